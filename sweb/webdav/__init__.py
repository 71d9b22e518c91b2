"""
WebDAV endpoint
"""

from .server import WebDAVGate, create_webdav_app, WEBDAV_PREFIX, SAFE_METHODS

__all__ = ['WebDAVGate', 'create_webdav_app', 'WEBDAV_PREFIX', 'SAFE_METHODS']
