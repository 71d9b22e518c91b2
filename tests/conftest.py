"""Shared fixtures for sweb tests."""

import pytest

from sweb.app import create_app
from sweb.config.config import ServerConfig


@pytest.fixture
def served_dir(tmp_path):
    """Create the directory served at /.

    Returns:
        Path of an empty served directory.
    """
    directory = tmp_path / 'web'
    directory.mkdir()
    return directory


@pytest.fixture
def webdav_dir(tmp_path):
    """Create the directory shared over WebDAV.

    Returns:
        Path of an empty WebDAV root.
    """
    directory = tmp_path / 'dav'
    directory.mkdir()
    return directory


@pytest.fixture
def make_config(served_dir, webdav_dir):
    """Build ServerConfig instances rooted in the temporary directories.

    Returns:
        Factory accepting ServerConfig field overrides.
    """
    def _make(**overrides):
        values = {
            'served_dir': str(served_dir),
            'webdav_dir': str(webdav_dir),
        }
        values.update(overrides)
        return ServerConfig(**values)

    return _make


@pytest.fixture
def make_client(make_config):
    """Build Flask test clients for a given gate configuration.

    Returns:
        Factory accepting ServerConfig field overrides and an optional dav_app.
    """
    def _make(dav_app=None, **overrides):
        return create_app(make_config(**overrides), dav_app=dav_app).test_client()

    return _make


class RecordingDAVApp:
    """WSGI stand-in for WsgiDAV that records what reaches it."""

    def __init__(self, status='200 OK'):
        self.status = status
        self.calls = []

    def __call__(self, environ, start_response):
        self.calls.append((
            environ['REQUEST_METHOD'],
            environ['SCRIPT_NAME'],
            environ['PATH_INFO'],
        ))
        start_response(self.status, [('Content-Type', 'text/plain')])
        return [b'dav']


@pytest.fixture
def recording_dav_app():
    """Create a recording WebDAV stand-in.

    Returns:
        RecordingDAVApp answering 200 OK.
    """
    return RecordingDAVApp()
