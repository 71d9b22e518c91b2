"""Tests for the command line interface."""

import json

import pytest
import requests
from click.testing import CliRunner

from sweb import __version__
from sweb import cli as cli_module
from sweb.cli import cli


@pytest.fixture
def runner():
    """Create a click test runner.

    Returns:
        CliRunner instance.
    """
    return CliRunner()


@pytest.fixture
def captured_runs(monkeypatch):
    """Replace the WSGI server with a recorder.

    Returns:
        List receiving (app, config) for every run_server call.
    """
    runs = []
    monkeypatch.setattr(cli_module, 'run_server', lambda app, config: runs.append((app, config)))
    return runs


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error')

    def json(self):
        return self.payload


class TestServeHelp:
    """Tests for serve --help."""

    @pytest.mark.parametrize('flag', ['--help', '-h'])
    def test_help_lists_options(self, runner, captured_runs, flag):
        """Test that help enumerates every flag and exits without serving."""
        result = runner.invoke(cli, ['serve', flag])

        assert result.exit_code == 0
        for option in ['--upload', '--enable-upload', '--webdav', '--enable-webdav',
                       '--webdav-dir', '--webdav-readonly', '--port', '-p', '--help']:
            assert option in result.output
        assert 'Examples:' in result.output
        assert 'sweb serve --upload --webdav -p 9000' in result.output
        assert captured_runs == []

    def test_version(self, runner):
        """Test that --version prints the package version."""
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestServe:
    """Tests for the serve command."""

    def test_default_start(self, runner, captured_runs, tmp_path):
        """Test startup creates the served directory and landing page."""
        served = tmp_path / 'web'

        result = runner.invoke(cli, ['serve', '--dir', str(served), '--port', '8123'])

        assert result.exit_code == 0, result.output
        assert (served / 'index.html').exists()
        assert 'File upload disabled' in result.output
        assert 'WebDAV disabled' in result.output

        _, config = captured_runs[0]
        assert config.port == 8123
        assert config.upload_enabled is False
        assert config.webdav_enabled is False

    def test_all_features(self, runner, captured_runs, tmp_path):
        """Test that flags reach the configuration."""
        dav = tmp_path / 'share'

        result = runner.invoke(cli, [
            'serve', '--dir', str(tmp_path / 'web'),
            '--enable-upload', '--webdav', '--webdav-dir', str(dav), '--webdav-readonly',
            '-p', '9000',
        ])

        assert result.exit_code == 0, result.output
        assert dav.is_dir()
        assert 'read-only' in result.output

        _, config = captured_runs[0]
        assert config.upload_enabled is True
        assert config.webdav_enabled is True
        assert config.webdav_readonly is True
        assert config.webdav_dir == str(dav)
        assert config.port == 9000

    def test_app_serves_status(self, runner, captured_runs, tmp_path):
        """Test that the application handed to the server is fully wired."""
        runner.invoke(cli, ['serve', '--dir', str(tmp_path / 'web'), '--upload'])

        app, _ = captured_runs[0]
        data = app.test_client().get('/api/upload-status').get_json()
        assert data['upload']['enabled'] is True

    def test_existing_index_kept(self, runner, captured_runs, tmp_path):
        """Test that restarting does not rewrite index.html."""
        served = tmp_path / 'web'
        served.mkdir()
        (served / 'index.html').write_text('mine')

        runner.invoke(cli, ['serve', '--dir', str(served)])

        assert (served / 'index.html').read_text() == 'mine'

    def test_config_file(self, runner, captured_runs, tmp_path):
        """Test that a JSON config file supplies defaults."""
        path = tmp_path / 'sweb.json'
        path.write_text(json.dumps({
            'served_dir': str(tmp_path / 'web'),
            'upload_enabled': True,
            'port': 8200,
        }))

        result = runner.invoke(cli, ['serve', '--config', str(path), '--port', '8300'])

        assert result.exit_code == 0, result.output
        _, config = captured_runs[0]
        assert config.upload_enabled is True
        assert config.port == 8300

    def test_bad_config_file(self, runner, captured_runs, tmp_path):
        """Test that config errors stop startup."""
        path = tmp_path / 'sweb.json'
        path.write_text('{"bogus": 1}')

        result = runner.invoke(cli, ['serve', '--config', str(path)])

        assert result.exit_code == 1
        assert captured_runs == []

    def test_directory_failure(self, runner, captured_runs, tmp_path):
        """Test that an uncreatable served directory is fatal."""
        blocker = tmp_path / 'web'
        blocker.write_text('file in the way')

        result = runner.invoke(cli, ['serve', '--dir', str(blocker)])

        assert result.exit_code != 0
        assert captured_runs == []

    @pytest.mark.parametrize('port', ['0', '70000', 'abc'])
    def test_invalid_port(self, runner, captured_runs, port):
        """Test that invalid ports are rejected by the parser."""
        result = runner.invoke(cli, ['serve', '--port', port])

        assert result.exit_code == 2
        assert captured_runs == []

    def test_bind_failure(self, runner, monkeypatch, tmp_path):
        """Test that a busy port exits with status 1."""
        def busy(app, config):
            raise OSError(98, 'Address already in use')

        monkeypatch.setattr(cli_module, 'run_server', busy)

        result = runner.invoke(cli, ['serve', '--dir', str(tmp_path / 'web')])

        assert result.exit_code == 1
        assert 'Address already in use' in result.output


class TestStatusCommand:
    """Tests for the status command."""

    def test_prints_state(self, runner, monkeypatch):
        """Test that the remote gate state is printed."""
        payload = {
            'upload': {'enabled': True, 'status': 'enabled'},
            'webdav': {'enabled': True, 'readonly': True, 'directory': '/srv',
                       'status': 'enabled-readonly'},
        }
        seen = []

        def fake_get(url, timeout):
            seen.append(url)
            return FakeResponse(payload)

        monkeypatch.setattr(cli_module.requests, 'get', fake_get)

        result = runner.invoke(cli, ['status', '--url', 'http://example:9000/'])

        assert result.exit_code == 0, result.output
        assert seen == ['http://example:9000/api/upload-status']
        assert 'Upload: enabled' in result.output
        assert 'WebDAV: enabled-readonly' in result.output
        assert '/srv' in result.output

    def test_connection_error(self, runner, monkeypatch):
        """Test that an unreachable server exits with status 1."""
        def refuse(url, timeout):
            raise requests.ConnectionError('connection refused')

        monkeypatch.setattr(cli_module.requests, 'get', refuse)

        result = runner.invoke(cli, ['status'])

        assert result.exit_code == 1
        assert 'connection refused' in result.output
