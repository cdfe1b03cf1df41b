"""
Preview server for the generated site.

Serves files from the output directory with a fixed extension -> MIME table,
refuses paths that escape the directory, and falls back to index.html for
extensionless paths so client-side routes work.
"""

import logging
import posixpath
from dataclasses import dataclass, field
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response

from .config import Config
from .core.constants import DEFAULT_MIME_TYPE, INDEX_FILE, MIME_TYPES
from .errors import ConfigError, OutputDirMissingError

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    root: Path
    host: str = "127.0.0.1"
    port: int = 8080
    mime_types: dict[str, str] = field(default_factory=lambda: dict(MIME_TYPES))
    index: str = INDEX_FILE
    timeout_keep_alive: int = 5
    timeout_graceful_shutdown: int = 10

    @classmethod
    def from_config(cls, cfg: Config, project_dir: str | Path | None = None) -> "ServerConfig":
        """
        Raises:
            ConfigError: If the configured port is not an integer in 1-65535
        """
        project_dir = Path(project_dir or Path.cwd()).resolve()
        port = cfg.get("port")
        try:
            if isinstance(port, bool):
                raise ValueError(port)
            port = int(port)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"port must be an integer, got {port!r}") from e
        if not 0 < port < 65536:
            raise ConfigError(f"port must be between 1 and 65535, got {port}")
        return cls(
            root=project_dir / cfg.get("output_dir"),
            host=cfg.get("host"),
            port=port,
        )


@dataclass
class Resolution:
    status: int
    path: Path | None = None


def resolve_request(config: ServerConfig, request_path: str) -> Resolution:
    """
    Map a request path to a file under the output root.

    Returns a Resolution with status 200 and the file to serve, 403 if the path
    escapes the root, or 404 if nothing matches.
    """
    root = config.root.resolve()
    if request_path == "/":
        relative = config.index
    else:
        relative = request_path[1:] if request_path.startswith("/") else request_path

    try:
        # An absolute "relative" part replaces root entirely and fails the check below
        candidate = (root / relative).resolve()
    except (OSError, ValueError):
        return Resolution(404)

    if not candidate.is_relative_to(root):
        return Resolution(403)

    if candidate.is_file():
        return Resolution(200, candidate)

    # Client-side route: no extension and nothing on disk
    if request_path != "/" and not posixpath.splitext(request_path)[1]:
        index = root / config.index
        if index.is_file():
            return Resolution(200, index)

    return Resolution(404)


def serve_file(config: ServerConfig, request_path: str) -> Response:
    """Build the HTTP response for one request path."""
    resolution = resolve_request(config, request_path)

    if resolution.status == 403:
        logger.warning(f"Forbidden path requested: {request_path}")
        return PlainTextResponse("Forbidden", status_code=403)
    if resolution.status == 404:
        logger.debug(f"Not found: {request_path}")
        return PlainTextResponse("File not found", status_code=404)

    try:
        data = resolution.path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading {resolution.path}: {e}")
        return PlainTextResponse("Server error", status_code=500)

    media_type = config.mime_types.get(resolution.path.suffix.lower(), DEFAULT_MIME_TYPE)
    return Response(content=data, media_type=media_type, headers={"Cache-Control": "no-cache"})


def create_app(config: ServerConfig) -> FastAPI:
    """Create the app. There is a single catch-all route and no API docs."""
    app = FastAPI(title="Folio Preview", docs_url=None, redoc_url=None, openapi_url=None)

    # Sync handler: FastAPI runs it in the threadpool, one task per request
    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"])
    def static_file(request: Request):
        return serve_file(config, request.scope["path"])

    return app


def start_server(config: ServerConfig) -> None:
    """
    Serve the output directory until interrupted.

    Uvicorn stops accepting connections on SIGINT/SIGTERM and lets in-flight
    responses finish before returning.

    Raises:
        OutputDirMissingError: If the output directory does not exist
    """
    if not config.root.is_dir():
        raise OutputDirMissingError(f"{config.root} directory not found")

    app = create_app(config)
    logger.info(f"Serving {config.root} at http://{config.host}:{config.port}")
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        # uvloop where installed (not on Windows), asyncio otherwise
        loop="auto",
        log_level="warning",
        timeout_keep_alive=config.timeout_keep_alive,
        timeout_graceful_shutdown=config.timeout_graceful_shutdown,
    )
