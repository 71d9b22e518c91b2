"""
sweb - simple web file server with optional upload and WebDAV
"""

__version__ = '1.0.0'
