"""
Static site build pipeline.

A build runs these steps in order:
1. Load the portfolio document (fatal if missing or malformed)
2. Create the output directory
3. Render every page template against the document
4. Copy the assets directory and the top-level static files
5. Write sitemap.xml and robots.txt
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Undefined, select_autoescape
from jinja2.utils import missing

from ..config import Config
from ..errors import ConfigError, MissingAssetError, RenderError
from .constants import PLACEHOLDER_CONTENT
from .portfolio import load_portfolio, summarize
from .sitemap import write_robots, write_sitemap

logger = logging.getLogger(__name__)

MISSING_ASSET_POLICIES = ("placeholder", "fail")


class NameStrictUndefined(Undefined):
    """
    Undefined that fails for unknown top-level names but not for missing attributes.

    ``{{ no_such_name }}`` is a render error, while ``{{ photo.caption }}`` on a photo
    without a caption renders empty. ``is defined`` and ``| default`` work for both.
    """

    __slots__ = ()

    def _is_unknown_name(self) -> bool:
        return self._undefined_obj is missing

    def __str__(self) -> str:
        if self._is_unknown_name():
            self._fail_with_undefined_error()
        return super().__str__()

    def __iter__(self):
        if self._is_unknown_name():
            self._fail_with_undefined_error()
        return super().__iter__()

    def __bool__(self) -> bool:
        if self._is_unknown_name():
            self._fail_with_undefined_error()
        return super().__bool__()

    def __len__(self) -> int:
        if self._is_unknown_name():
            self._fail_with_undefined_error()
        return super().__len__()


@dataclass
class BuildSettings:
    """Everything a build needs to know, resolved to absolute paths."""

    data_file: Path
    templates_dir: Path
    assets_dir: Path
    output_dir: Path
    project_dir: Path
    static_files: list[str] = field(default_factory=list)
    on_missing_asset: str = "placeholder"
    fail_on_render_error: bool = False
    site_url: str = Config.DEFAULTS["site_url"]

    def __post_init__(self):
        if self.on_missing_asset not in MISSING_ASSET_POLICIES:
            raise ConfigError(
                f"on_missing_asset must be one of {', '.join(MISSING_ASSET_POLICIES)}, "
                f"got {self.on_missing_asset!r}"
            )

    @classmethod
    def from_config(cls, cfg: Config, project_dir: str | Path | None = None) -> "BuildSettings":
        project_dir = Path(project_dir or Path.cwd()).resolve()
        static_files = [name.strip() for name in str(cfg.get("static_files")).split(",") if name.strip()]
        return cls(
            data_file=project_dir / cfg.get("data_file"),
            templates_dir=project_dir / cfg.get("templates_dir"),
            assets_dir=project_dir / cfg.get("assets_dir"),
            output_dir=project_dir / cfg.get("output_dir"),
            project_dir=project_dir,
            static_files=static_files,
            on_missing_asset=str(cfg.get("on_missing_asset")).lower(),
            fail_on_render_error=bool(cfg.get("fail_on_render_error")),
            site_url=cfg.get("site_url"),
        )


@dataclass
class BuildResult:
    output_dir: Path
    pages: list[str] = field(default_factory=list)
    copied: list[str] = field(default_factory=list)
    placeholders: list[str] = field(default_factory=list)
    errors: dict[str, str] = field(default_factory=dict)
    stats: dict[str, int] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


class SiteBuilder:
    """Turns the portfolio data and page templates into a deployable directory."""

    def __init__(self, settings: BuildSettings):
        self.settings = settings
        self.env = Environment(
            loader=FileSystemLoader(str(settings.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=NameStrictUndefined,
        )

    def build(self) -> BuildResult:
        """
        Run the whole pipeline.

        Raises:
            PortfolioError: The data file is missing or malformed (nothing is written)
            RenderError: A page failed and fail_on_render_error is set
            MissingAssetError: A static file is missing and on_missing_asset is "fail"
        """
        settings = self.settings
        portfolio = load_portfolio(settings.data_file)

        settings.output_dir.mkdir(parents=True, exist_ok=True)
        result = BuildResult(output_dir=settings.output_dir)

        for template_name in self.discover_templates():
            self.render_page(template_name, portfolio, result)

        self.copy_assets(result)
        self.copy_static_files(result)

        write_sitemap(settings.output_dir / "sitemap.xml", settings.site_url)
        logger.info("✅ Generated sitemap.xml")
        write_robots(settings.output_dir / "robots.txt", settings.site_url)
        logger.info("✅ Generated robots.txt")

        result.stats = summarize(portfolio["photos"])
        return result

    def discover_templates(self) -> list[str]:
        """Page templates are the *.html files in the templates directory, minus _partials."""
        templates_dir = self.settings.templates_dir
        if not templates_dir.is_dir():
            logger.warning(f"⚠️ Templates directory not found: {templates_dir}")
            return []
        return sorted(
            p.name for p in templates_dir.glob("*.html") if p.is_file() and not p.name.startswith("_")
        )

    def render_page(self, template_name: str, context: dict[str, Any], result: BuildResult) -> bool:
        """Render one template to the output directory. Returns False if it failed."""
        try:
            template = self.env.get_template(template_name)
            html = template.render(**context)
            (self.settings.output_dir / template_name).write_text(html, encoding="utf-8")
        except Exception as e:
            if self.settings.fail_on_render_error:
                raise RenderError(template_name, str(e)) from e
            logger.error(f"❌ Error building {template_name}: {e}")
            result.errors[template_name] = str(e)
            return False

        logger.info(f"✅ Built {template_name}")
        result.pages.append(template_name)
        return True

    def copy_assets(self, result: BuildResult) -> None:
        """Copy the assets directory into the output, if there is one."""
        assets_dir = self.settings.assets_dir
        if not assets_dir.is_dir():
            logger.debug(f"No assets directory at {assets_dir}")
            return

        shutil.copytree(assets_dir, self.settings.output_dir / "assets", dirs_exist_ok=True)
        result.copied.append("assets")
        logger.info("✅ Copied assets")

    def copy_static_files(self, result: BuildResult) -> None:
        """Copy the top-level CSS/JS files, handling missing ones per on_missing_asset."""
        for filename in self.settings.static_files:
            src = self.settings.project_dir / filename
            dest = self.settings.output_dir / filename

            if src.is_file():
                dest.parent.mkdir(parents=True, exist_ok=True)
                shutil.copyfile(src, dest)
                result.copied.append(filename)
                logger.info(f"✅ Copied {filename}")
                continue

            if self.settings.on_missing_asset == "fail":
                logger.error(f"❌ {filename} not found")
                raise MissingAssetError(filename)

            logger.warning(f"⚠️ {filename} not found, creating placeholder...")
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(PLACEHOLDER_CONTENT.get(filename, ""), encoding="utf-8")
            result.placeholders.append(filename)
