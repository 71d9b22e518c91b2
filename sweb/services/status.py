"""
sweb/services/status.py
JSON status document describing the feature gates
"""

from typing import Any, Dict

from ..config.config import ServerConfig


def build_status(config: ServerConfig) -> Dict[str, Any]:
    """Serialize the current gate state; the landing page polls this"""
    return {
        'upload': {
            'enabled': config.upload_enabled,
            'status': config.upload_status,
        },
        'webdav': {
            'enabled': config.webdav_enabled,
            'readonly': config.webdav_readonly,
            'directory': config.webdav_dir,
            'status': config.webdav_status,
        },
    }
