import json
import logging
import os
import sys

import click

from . import __version__
from .config import Config, load_env_file
from .core.builder import MISSING_ASSET_POLICIES, BuildSettings, SiteBuilder
from .errors import ConfigError, FolioError, OutputDirMissingError
from .server import ServerConfig, start_server
from .utils.logging import setup_logging

# .env must be in the environment before Config is read for the log level
load_env_file()
setup_logging()
logger = logging.getLogger(__name__)


@click.group()
def cli():
    """Folio - Photography Portfolio Site Builder"""
    # The working directory may differ from import time; reload and reapply the level
    load_env_file()
    setup_logging()


@cli.command()
def build():
    """Build the site into the output directory"""
    cfg = Config()

    click.echo("🚀 Building portfolio...\n")
    try:
        settings = BuildSettings.from_config(cfg)
        result = SiteBuilder(settings).build()
    except FolioError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    for page, error in result.errors.items():
        click.echo(f"❌ Error building {page}: {error}", err=True)
    for filename in result.placeholders:
        click.echo(f"⚠️  {filename} not found, wrote a placeholder")

    if result.ok:
        click.echo("\n✨ Build completed successfully!")
    else:
        click.echo(f"\n⚠️  Build completed with {len(result.errors)} error(s)")
    click.echo(f"📁 Files generated in: {result.output_dir}")

    click.echo("\n📊 Build Statistics:")
    click.echo(f"   Pages: {len(result.pages)}")
    click.echo(f"   Photos: {result.stats['photos']}")
    click.echo(f"   Featured: {result.stats['featured']}")
    click.echo(f"   Categories: {result.stats['categories']}")
    click.echo(f"   Locations: {result.stats['locations']}")


@cli.command()
@click.option("--port", type=int, help="Port to run server on")
@click.option("--host", help="Interface to bind to")
def serve(port, host):
    """Serve the built site for local preview"""
    cfg = Config()
    try:
        server_config = ServerConfig.from_config(cfg)
    except ConfigError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)
    if port is not None:
        server_config.port = port
    if host is not None:
        server_config.host = host

    if not server_config.root.is_dir():
        click.echo(
            f'❌ {cfg.get("output_dir")}/ directory not found. Please run "folio build" first.',
            err=True,
        )
        sys.exit(1)

    click.echo(f"🚀 Development server running at http://{server_config.host}:{server_config.port}")
    click.echo(f"📁 Serving files from: {server_config.root}")
    click.echo("🛑 Press Ctrl+C to stop the server")

    try:
        start_server(server_config)
    except OutputDirMissingError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    click.echo("\n✅ Server closed")


@cli.command()
def version():
    """Show version information"""
    click.echo(f"folio v{__version__}")


@cli.group()
def config():
    """Manage configuration settings"""
    pass


@config.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output in JSON format")
def show_config(as_json):
    """Show current configuration"""
    cfg = Config()
    config_data = cfg.get_all()

    if as_json:
        click.echo(json.dumps(config_data, indent=2))
    else:
        click.echo("Current configuration:")
        file_config = cfg._load_config_file()
        for key, value in sorted(config_data.items()):
            # Show source of value
            env_key = Config.ENV_MAPPINGS.get(key, key.upper())
            if os.getenv(env_key) is not None:
                source = " (from environment)"
            elif key in file_config:
                source = " (from config file)"
            else:
                source = " (default)"
            click.echo(f"  {key}: {value}{source}")


@config.command("set")
@click.argument("key")
@click.argument("value")
def set_config(key, value):
    """Set a configuration value"""
    cfg = Config()

    if key not in Config.DEFAULTS:
        click.echo(f"Error: Unknown configuration key '{key}'")
        click.echo(f"Valid keys: {', '.join(sorted(Config.DEFAULTS.keys()))}")
        return

    # Parse value based on type
    default = Config.DEFAULTS.get(key)
    if isinstance(default, bool):
        value = value.lower() in ("true", "1", "yes", "on")
    elif isinstance(default, int):
        try:
            value = int(value)
        except ValueError:
            click.echo(f"Error: {key} must be an integer")
            return
    elif key == "on_missing_asset" and value not in MISSING_ASSET_POLICIES:
        click.echo(f"Error: on_missing_asset must be one of: {', '.join(MISSING_ASSET_POLICIES)}")
        return

    cfg.set(key, value)
    click.echo(f"✅ Set {key} = {value}")


@config.command("unset")
@click.argument("key")
def unset_config(key):
    """Remove a configuration value"""
    cfg = Config()
    cfg.unset(key)
    click.echo(f"✅ Removed {key} from config file")


@cli.command(name="help")
def show_help():
    """Show detailed help and usage examples"""
    click.echo(
        """Folio - Photography Portfolio Site Builder

Usage Examples:

  # Build the site from data/portfolio.json and templates/
  folio build

  # Preview the built site
  folio serve

  # Preview on a different port
  folio serve --port 9000

  # Fail the build instead of writing placeholders for missing CSS/JS
  folio config set on_missing_asset fail

  # Show configuration
  folio config show

  # Show version
  folio version

Configuration Keys:
  port                  - Preview server port (default: 8080)
  host                  - Preview server host (default: 127.0.0.1)
  log_level             - Logging level (default: INFO)
  data_file             - Portfolio JSON file (default: data/portfolio.json)
  templates_dir         - Page templates (default: templates)
  assets_dir            - Assets copied to dist/assets (default: assets)
  output_dir            - Build output (default: dist)
  static_files          - Top-level files to copy (default: style.css,fade_in.js,menu.js)
  on_missing_asset      - placeholder | fail (default: placeholder)
  fail_on_render_error  - Abort on the first page error (default: false)
  site_url              - Absolute URL used in sitemap.xml and robots.txt
"""
    )
