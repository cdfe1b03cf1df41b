"""
Configuration management for Folio.

Values are looked up in this order:
1. Environment variables
2. Config file (~/.folio/config.json)
3. Built-in defaults
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


class Config:
    """Layered configuration backed by a JSON file and the environment."""

    DEFAULTS: dict[str, Any] = {
        "port": 8080,
        "host": "127.0.0.1",
        "log_level": "INFO",
        "data_file": "data/portfolio.json",
        "templates_dir": "templates",
        "assets_dir": "assets",
        "output_dir": "dist",
        "static_files": "style.css,fade_in.js,menu.js",
        "on_missing_asset": "placeholder",
        "fail_on_render_error": False,
        "site_url": "https://your-username.github.io/repository-name/",
    }

    # Config key -> environment variable
    ENV_MAPPINGS: dict[str, str] = {
        "port": "PORT",
        "host": "HOST",
        "log_level": "FOLIO_LOG_LEVEL",
        "data_file": "FOLIO_DATA_FILE",
        "templates_dir": "FOLIO_TEMPLATES_DIR",
        "assets_dir": "FOLIO_ASSETS_DIR",
        "output_dir": "FOLIO_OUTPUT_DIR",
        "static_files": "FOLIO_STATIC_FILES",
        "on_missing_asset": "FOLIO_ON_MISSING_ASSET",
        "fail_on_render_error": "FOLIO_FAIL_ON_RENDER_ERROR",
        "site_url": "FOLIO_SITE_URL",
    }

    def __init__(self, config_dir: Path | None = None):
        if config_dir is None:
            config_dir = Path.home() / ".folio"
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / "config.json"

    def _load_config_file(self) -> dict[str, Any]:
        """Load values from the config file, or an empty dict if there is none."""
        if not self.config_file.exists():
            return {}
        try:
            with open(self.config_file) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read config file {self.config_file}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save_config_file(self, data: dict[str, Any]) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            json.dump(data, f, indent=2)

    def _parse_value(self, value: str, key: str) -> Any:
        """Parse a string (from the environment) using the type of the key's default."""
        default = self.DEFAULTS.get(key)
        if isinstance(default, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(default, int):
            try:
                return int(value)
            except ValueError:
                logger.warning(f"Invalid integer for {key}: {value!r}, using default {default}")
                return default
        return value

    def get(self, key: str, default: Any = None) -> Any:
        env_key = self.ENV_MAPPINGS.get(key, key.upper())
        env_value = os.getenv(env_key)
        if env_value is not None:
            return self._parse_value(env_value, key)

        file_config = self._load_config_file()
        if key in file_config:
            value = file_config[key]
            # Hand-edited files may hold "false" instead of false
            if isinstance(self.DEFAULTS.get(key), bool) and isinstance(value, str):
                return self._parse_value(value, key)
            return value

        if key in self.DEFAULTS:
            return self.DEFAULTS[key]
        return default

    def get_all(self) -> dict[str, Any]:
        return {key: self.get(key) for key in self.DEFAULTS}

    def set(self, key: str, value: Any) -> None:
        data = self._load_config_file()
        data[key] = value
        self._save_config_file(data)

    def unset(self, key: str) -> None:
        data = self._load_config_file()
        if key in data:
            del data[key]
            self._save_config_file(data)


def load_env_file(directory: Path | None = None) -> bool:
    """Load ``.env`` from the given directory (default: cwd) without overriding set variables.

    Returns:
        True if a file was found and loaded
    """
    env_file = Path(directory or Path.cwd()) / ".env"
    if not env_file.is_file():
        return False
    load_dotenv(env_file)
    logger.debug(f"Loaded environment from {env_file}")
    return True
