#!/usr/bin/env python3
"""
sweb CLI - serve a directory over HTTP with optional upload and WebDAV
"""

import logging
import sys
from typing import Optional

import click
import requests

from . import __version__
from .app import create_app
from .config.config import ServerConfig, config_service
from .exceptions import ConfigError, StartupError
from .services.pages import STATUS_ENDPOINT, create_default_page_if_needed
from .services.server import run_server
from .utils.logs import configure_logging
from .webdav.server import WEBDAV_PREFIX

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {'help_option_names': ['-h', '--help']}

SERVE_EXAMPLES = """\b
Examples:
  sweb serve                               # static files only
  sweb serve --upload                      # also accept uploads at /upload
  sweb serve --webdav                      # also share the current directory at /webdav
  sweb serve --webdav --webdav-readonly    # read-only WebDAV
  sweb serve --webdav --webdav-dir /data   # share /data over WebDAV
  sweb serve --upload --webdav -p 9000     # everything, on port 9000

\b
WebDAV:
  Connect any WebDAV client (Windows Explorer, macOS Finder, Cyberduck...)
  to http://localhost:<port>/webdav

\b
Security:
  Upload and WebDAV are disabled by default. Only enable them when needed.
"""


def print_gate_summary(config: ServerConfig) -> None:
    """Print which features are reachable"""
    if config.upload_enabled:
        click.echo("✅ File upload enabled")
    else:
        click.echo("🔒 File upload disabled (use --upload to enable)")

    if config.webdav_enabled:
        mode = 'read-only' if config.webdav_readonly else 'read-write'
        click.echo(f"✅ WebDAV enabled ({mode}) - directory: {config.webdav_dir}")
    else:
        click.echo("🔒 WebDAV disabled (use --webdav to enable)")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
def cli():
    """Simple web file server with optional upload and WebDAV"""
    pass


@cli.command(epilog=SERVE_EXAMPLES)
@click.option('--upload', '--enable-upload', 'upload', is_flag=True,
              help='Enable file upload at /upload (default: disabled)')
@click.option('--webdav', '--enable-webdav', 'webdav', is_flag=True,
              help='Enable the WebDAV endpoint at /webdav (default: disabled)')
@click.option('--webdav-dir', type=click.Path(file_okay=False),
              help='Root directory shared over WebDAV (default: current directory)')
@click.option('--webdav-readonly', is_flag=True,
              help='Only allow GET, HEAD, OPTIONS and PROPFIND on WebDAV (default: read-write)')
@click.option('--port', '-p', type=click.IntRange(1, 65535), help='Port to listen on (default: 8080)')
@click.option('--dir', '-d', 'served_dir', type=click.Path(file_okay=False),
              help='Directory served at / and receiving uploads (default: ./web)')
@click.option('--host', help='Address to bind to (default: 0.0.0.0)')
@click.option('--server', type=click.Choice(['waitress', 'cheroot']), help='WSGI server (default: waitress)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='JSON file with default settings')
@click.option('--verbose', '-v', count=True, help='More logging (repeatable)')
def serve(upload: bool, webdav: bool, webdav_dir: Optional[str], webdav_readonly: bool,
          port: Optional[int], served_dir: Optional[str], host: Optional[str],
          server: Optional[str], config_file: Optional[str], verbose: int):
    """Serve a directory over HTTP."""
    configure_logging(verbose)

    # Flags only override the config file when given
    try:
        config = config_service.load(
            config_file,
            upload_enabled=upload or None,
            webdav_enabled=webdav or None,
            webdav_readonly=webdav_readonly or None,
            webdav_dir=webdav_dir,
            served_dir=served_dir,
            port=port,
            host=host,
            server=server,
            verbose=verbose or None,
        )
        config_service.prepare_directories(config)
    except (ConfigError, StartupError) as e:
        logger.error("%s", e)
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    if create_default_page_if_needed(config.served_dir):
        click.echo("📄 Created default page: index.html")

    app = create_app(config)

    print_gate_summary(config)
    click.echo(f"📁 Serving: {config.served_dir}")
    click.echo(f"🌐 Server starting at http://localhost:{config.port}")
    if config.webdav_enabled:
        click.echo(f"🔗 WebDAV: http://localhost:{config.port}{WEBDAV_PREFIX}")

    try:
        run_server(app, config)
    except OSError as e:
        logger.error("Cannot listen on %s:%d: %s", config.host, config.port, e)
        click.echo(f"❌ Cannot listen on port {config.port}: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\n🛑 Server stopped by user")


@cli.command()
@click.option('--url', default='http://localhost:8080', show_default=True,
              help='Base URL of a running sweb server')
@click.option('--timeout', default=10.0, show_default=True, help='Request timeout in seconds')
def status(url: str, timeout: float):
    """Show the feature state of a running server."""
    endpoint = url.rstrip('/') + STATUS_ENDPOINT
    try:
        response = requests.get(endpoint, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        click.echo(f"❌ Could not read status from {endpoint}: {e}", err=True)
        sys.exit(1)

    upload = data.get('upload', {})
    webdav = data.get('webdav', {})
    click.echo(f"🌐 Server: {url}")
    click.echo(f"{'✅' if upload.get('enabled') else '🔒'} Upload: {upload.get('status', 'unknown')}")
    click.echo(f"{'✅' if webdav.get('enabled') else '🔒'} WebDAV: {webdav.get('status', 'unknown')}")
    if webdav.get('enabled'):
        click.echo(f"📁 WebDAV directory: {webdav.get('directory')}")


def main():
    cli()


if __name__ == '__main__':
    main()
