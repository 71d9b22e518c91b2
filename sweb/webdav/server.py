#!/usr/bin/env python3
"""
sweb/webdav/server.py
WebDAV endpoint: a WsgiDAV application behind the enabled/read-only/disabled gate
"""

import logging
from typing import Any, Dict, Optional

from werkzeug.wrappers import Response
from wsgidav.fs_dav_provider import FilesystemProvider
from wsgidav.wsgidav_app import WsgiDAVApp

from ..config.config import ServerConfig
from ..services.pages import render_page

logger = logging.getLogger(__name__)

WEBDAV_PREFIX = '/webdav'
SAFE_METHODS = frozenset(['GET', 'HEAD', 'OPTIONS', 'PROPFIND'])


def create_webdav_app(config: ServerConfig) -> WsgiDAVApp:
    """Create the WsgiDAV application serving config.webdav_dir under /webdav"""
    dav_config: Dict[str, Any] = {
        'mount_path': WEBDAV_PREFIX,
        'provider_mapping': {
            '/': FilesystemProvider(config.webdav_dir, readonly=config.webdav_readonly),
        },
        # Anonymous access, authentication is out of scope
        'simple_dc': {'user_mapping': {'*': True}},
        'http_authenticator': {
            'domain_controller': None,
            'accept_basic': True,
            'accept_digest': False,
            'default_to_digest': False,
        },
        'verbose': min(2 + config.verbose, 5),
        'logging': {
            'enable': True,
            'enable_loggers': [],
        },
        'property_manager': True,
        'lock_storage': True,
        'dir_browser': {
            'enable': True,
            'response_trailer': '<p>sweb WebDAV</p>',
        },
        'add_header_MS_Author_Via': True,
    }

    logger.info(
        "Creating WsgiDAV application for %s (%s)",
        config.webdav_dir,
        'read-only' if config.webdav_readonly else 'read-write',
    )
    return WsgiDAVApp(dav_config)


class WebDAVGate:
    """WSGI app mounted at /webdav that enforces the WebDAV feature gate"""

    def __init__(self, config: ServerConfig, dav_app: Optional[Any] = None):
        self.config = config
        self.dav_app = dav_app
        if config.webdav_enabled and self.dav_app is None:
            self.dav_app = create_webdav_app(config)

    def __call__(self, environ, start_response):
        method = environ['REQUEST_METHOD'].upper()

        if not self.config.webdav_enabled:
            response = self.disabled_response()
        elif self.config.webdav_readonly and method not in SAFE_METHODS:
            response = self.readonly_response()
        else:
            return self._forward(environ, start_response)

        return response(environ, start_response)

    def disabled_response(self) -> Response:
        return Response(
            render_page('webdav_disabled.html'),
            status=403,
            content_type='text/html; charset=utf-8',
        )

    def readonly_response(self) -> Response:
        return Response(
            'WebDAV is in read-only mode\n',
            status=405,
            headers={'Allow': ', '.join(sorted(SAFE_METHODS))},
            content_type='text/plain; charset=utf-8',
        )

    def _forward(self, environ, start_response):
        # The mount itself is the collection root
        if not environ.get('PATH_INFO'):
            environ['PATH_INFO'] = '/'

        method = environ['REQUEST_METHOD']
        path = environ.get('SCRIPT_NAME', '') + environ['PATH_INFO']

        def logging_start_response(status, headers, exc_info=None):
            self._log_outcome(method, path, status)
            return start_response(status, headers, exc_info)

        return self.dav_app(environ, logging_start_response)

    def _log_outcome(self, method: str, path: str, status: str) -> None:
        try:
            code = int(status.split(' ', 1)[0])
        except ValueError:
            logger.warning("WebDAV %s %s - unparsable status %r", method, path, status)
            return

        if code == 404:
            # Clients probe for missing files while creating them
            logger.debug("WebDAV %s %s - %s", method, path, status)
        elif code >= 500:
            logger.error("WebDAV %s %s - %s", method, path, status)
        elif code >= 400:
            logger.info("WebDAV %s %s - %s", method, path, status)
