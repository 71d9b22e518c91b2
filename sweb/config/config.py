#!/usr/bin/env python3
"""
sweb/config/config.py
Configuration management for the sweb server
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ..exceptions import ConfigError, StartupError

logger = logging.getLogger(__name__)

SUPPORTED_SERVERS = ('waitress', 'cheroot')
FLAG_KEYS = ('upload_enabled', 'webdav_enabled', 'webdav_readonly')
DIRECTORY_MODE = 0o755


@dataclass(frozen=True)
class ServerConfig:
    """Process-wide settings, built once before the first request is served"""

    upload_enabled: bool = False
    webdav_enabled: bool = False
    webdav_readonly: bool = False
    webdav_dir: str = '.'
    served_dir: str = './web'
    port: int = 8080
    host: str = '0.0.0.0'
    server: str = 'waitress'
    verbose: int = 0

    @property
    def upload_status(self) -> str:
        return 'enabled' if self.upload_enabled else 'disabled'

    @property
    def webdav_status(self) -> str:
        if not self.webdav_enabled:
            return 'disabled'
        return 'enabled-readonly' if self.webdav_readonly else 'enabled-readwrite'


class ConfigService:
    """Builds ServerConfig from defaults, an optional JSON file and CLI overrides"""

    def __init__(self):
        self.defaults = {f.name: f.default for f in fields(ServerConfig)}

    def read_config_file(self, path: str) -> Dict[str, Any]:
        """Read a JSON config file; keys must be ServerConfig field names"""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        unknown = sorted(set(data) - set(self.defaults))
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
        return data

    def load(self, config_file: Optional[str] = None, **overrides: Any) -> ServerConfig:
        """Merge defaults, config file and overrides into a validated ServerConfig"""
        values = dict(self.defaults)
        if config_file:
            values.update(self.read_config_file(config_file))

        unknown = sorted(set(overrides) - set(self.defaults))
        if unknown:
            raise ConfigError(f"Unknown config options: {', '.join(unknown)}")
        values.update({k: v for k, v in overrides.items() if v is not None})

        return self._validate(values)

    def _validate(self, values: Dict[str, Any]) -> ServerConfig:
        try:
            port = int(values['port'])
        except (TypeError, ValueError):
            raise ConfigError(f"Port must be an integer, got {values['port']!r}")
        if not 1 <= port <= 65535:
            raise ConfigError(f"Port must be between 1 and 65535, got {port}")

        server = str(values['server']).lower()
        if server not in SUPPORTED_SERVERS:
            raise ConfigError(
                f"Unknown server {values['server']!r} (choose from {', '.join(SUPPORTED_SERVERS)})"
            )

        # "false" in a config file must not switch a feature on
        for key in FLAG_KEYS:
            if not isinstance(values[key], bool):
                raise ConfigError(f"{key} must be true or false, got {values[key]!r}")

        verbose = values['verbose']
        if isinstance(verbose, bool) or not isinstance(verbose, int) or verbose < 0:
            raise ConfigError(f"verbose must be a non-negative integer, got {verbose!r}")

        return ServerConfig(
            upload_enabled=values['upload_enabled'],
            webdav_enabled=values['webdav_enabled'],
            webdav_readonly=values['webdav_readonly'],
            webdav_dir=os.path.abspath(os.path.expanduser(str(values['webdav_dir']))),
            served_dir=os.path.abspath(os.path.expanduser(str(values['served_dir']))),
            port=port,
            host=str(values['host']),
            server=server,
            verbose=verbose,
        )

    def prepare_directories(self, config: ServerConfig) -> None:
        """Create the served directory, and the WebDAV root when WebDAV is on"""
        required = [('served', config.served_dir)]
        if config.webdav_enabled:
            required.append(('WebDAV', config.webdav_dir))

        for label, directory in required:
            path = Path(directory)
            if path.is_dir():
                continue
            try:
                path.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
            except OSError as e:
                raise StartupError(f"Cannot create {label} directory {directory}: {e}") from e
            logger.info("Created %s directory %s", label, directory)


# Global instance
config_service = ConfigService()
