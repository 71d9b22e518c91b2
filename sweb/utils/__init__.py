"""
Helpers shared by the CLI and the server
"""

from .logs import configure_logging

__all__ = ['configure_logging']
