"""
Request-side services
"""

from .status import build_status
from .upload import UploadService, validate_filename
from .pages import render_page, create_default_page_if_needed

__all__ = ['build_status', 'UploadService', 'validate_filename',
           'render_page', 'create_default_page_if_needed']
