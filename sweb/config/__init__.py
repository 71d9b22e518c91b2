"""
Server configuration
"""

from .config import config_service, ConfigService, ServerConfig

__all__ = ['config_service', 'ConfigService', 'ServerConfig']
