#!/usr/bin/env python3
"""
sweb/services/upload.py
Stores files posted to /upload inside the served directory
"""

import logging
import os

from werkzeug.datastructures import FileStorage

from ..exceptions import UploadError

logger = logging.getLogger(__name__)

UPLOAD_FIELD = 'file'
FORBIDDEN_CHARACTERS = ('/', '\\', '\x00')


def validate_filename(filename: str) -> str:
    """Return the filename unchanged, or raise UploadError if it could escape the target directory"""
    if not filename or not filename.strip():
        raise UploadError("Uploaded file has no filename")
    if filename in ('.', '..'):
        raise UploadError(f"Invalid filename: {filename!r}")
    if any(ch in filename for ch in FORBIDDEN_CHARACTERS):
        raise UploadError(f"Filename must not contain path separators: {filename!r}")
    return filename


class UploadService:
    """Writes uploaded files into a single directory"""

    def __init__(self, target_dir: str):
        self.target_dir = os.path.abspath(target_dir)

    def destination_for(self, filename: str) -> str:
        """Absolute destination path for a client-supplied filename"""
        name = validate_filename(filename)
        destination = os.path.abspath(os.path.join(self.target_dir, name))
        if os.path.dirname(destination) != self.target_dir:
            raise UploadError(f"Invalid filename: {filename!r}")
        return destination

    def save(self, upload: FileStorage) -> str:
        """Store the upload and return the filename it was saved under.

        Existing files with the same name are overwritten; concurrent writers
        race and the last one wins.
        """
        if upload is None:
            raise UploadError(f"Unable to read uploaded file: missing form field '{UPLOAD_FIELD}'")

        filename = upload.filename or ''
        destination = self.destination_for(filename)

        try:
            upload.save(destination)
        except OSError as e:
            logger.error("Failed to store upload %s: %s", destination, e)
            raise UploadError(f"Unable to save file: {e}", status_code=500) from e

        try:
            size = os.path.getsize(destination)
        except OSError:
            # Removed or moved over WebDAV right after the write
            logger.info("Stored upload %s", destination)
        else:
            logger.info("Stored upload %s (%d bytes)", destination, size)
        return filename
