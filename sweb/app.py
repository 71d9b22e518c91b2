#!/usr/bin/env python3
"""
sweb/app.py
Flask application routing requests to static files, upload, WebDAV and status
"""

import logging
import os
import posixpath
from typing import Any, Optional
from urllib.parse import quote

from flask import Flask, Response, abort, jsonify, request, send_from_directory
from werkzeug.middleware.dispatcher import DispatcherMiddleware
from werkzeug.utils import safe_join

from .config.config import ServerConfig
from .exceptions import UploadError
from .services.listing import list_directory
from .services.pages import find_index_page, render_page
from .services.status import build_status
from .services.upload import UPLOAD_FIELD, UploadService
from .webdav.server import WEBDAV_PREFIX, WebDAVGate

logger = logging.getLogger(__name__)

HTML = 'text/html; charset=utf-8'
TEXT = 'text/plain; charset=utf-8'
UPLOAD_PREFIX = '/upload'
UPLOAD_ALLOWED = 'GET, HEAD, POST'


def is_upload_path(url_path: str) -> bool:
    return url_path == UPLOAD_PREFIX or url_path.startswith(UPLOAD_PREFIX + '/')


def parent_path(url_path: str) -> str:
    """URL of the directory containing url_path"""
    return posixpath.dirname(url_path.rstrip('/')) or '/'


class FileServer:
    """Routes each request according to the feature gates in ServerConfig"""

    def __init__(self, config: ServerConfig, dav_app: Optional[Any] = None):
        self.config = config
        self.uploads = UploadService(config.served_dir)
        self.app = Flask(__name__, static_folder=None)
        self.app.extensions['sweb'] = config
        self.setup_routes()

        # /webdav and /webdav/* never reach the Flask routes
        self.app.wsgi_app = DispatcherMiddleware(
            self.app.wsgi_app,
            {WEBDAV_PREFIX: WebDAVGate(config, dav_app)},
        )

    def setup_routes(self):
        """Setup HTTP routes"""

        @self.app.route('/api/upload-status')
        @self.app.route('/api/status')
        def status():
            """Report the feature gates as JSON"""
            response = jsonify(build_status(self.config))
            response.headers['Access-Control-Allow-Origin'] = '*'
            return response

        @self.app.before_request
        def upload():
            """Gate every request under /upload, whatever its method.

            Runs before routing errors are raised, so verbs Flask has no rule
            for still get the disabled page or the upload 405.
            """
            if not is_upload_path(request.path):
                return None

            if not self.config.upload_enabled:
                return Response(render_page('upload_disabled.html'), status=403, content_type=HTML)

            if request.method in ('GET', 'HEAD'):
                return Response(render_page('upload_form.html'), content_type=HTML)

            if request.method == 'POST':
                filename = self.uploads.save(request.files.get(UPLOAD_FIELD))
                return Response(
                    render_page('upload_success.html', filename=filename, file_url='/' + quote(filename)),
                    content_type=HTML,
                )

            return Response(
                'Method Not Allowed\n',
                status=405,
                headers={'Allow': UPLOAD_ALLOWED},
                content_type=TEXT,
            )

        @self.app.route('/', defaults={'filename': ''})
        @self.app.route('/<path:filename>')
        def static_files(filename):
            """Serve files from the served directory"""
            root = self.config.served_dir
            target = safe_join(root, filename) if filename else root
            if target is None:
                abort(404)

            if os.path.isdir(target):
                index = find_index_page(target)
                if index:
                    return send_from_directory(target, index)
                return Response(
                    render_page('listing.html', path=request.path,
                                parent=parent_path(request.path),
                                entries=list_directory(target, request.path)),
                    content_type=HTML,
                )

            if not os.path.isfile(target):
                abort(404)
            return send_from_directory(root, filename)

        @self.app.errorhandler(UploadError)
        def upload_failed(error):
            """Report upload failures with their message"""
            if error.status_code >= 500:
                logger.error("Upload failed: %s", error.message)
            else:
                logger.warning("Upload rejected: %s", error.message)
            return Response(error.message + '\n', status=error.status_code, content_type=TEXT)


def create_app(config: ServerConfig, dav_app: Optional[Any] = None) -> Flask:
    """Build the WSGI application for config"""
    return FileServer(config, dav_app).app
