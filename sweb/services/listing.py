"""
sweb/services/listing.py
Directory listings for static directories without an index page
"""

import os
from datetime import datetime
from typing import Any, Dict, List
from urllib.parse import quote


def format_size(size_bytes: int) -> str:
    """Format bytes to human readable size"""
    if not size_bytes:
        return "0 B"
    size = float(size_bytes)
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0
    return f"{size:.1f} PB"


def list_directory(directory: str, url_path: str) -> List[Dict[str, Any]]:
    """Entries of directory, folders first, each with a link relative to url_path"""
    base = url_path if url_path.endswith('/') else url_path + '/'
    entries = []
    with os.scandir(directory) as it:
        for entry in it:
            try:
                stat = entry.stat()
            except OSError:
                # Dangling symlink or a file removed while listing
                continue
            is_dir = entry.is_dir()
            entries.append({
                'name': entry.name + ('/' if is_dir else ''),
                'href': base + quote(entry.name),
                'is_dir': is_dir,
                'size': '' if is_dir else format_size(stat.st_size),
                'modified': datetime.fromtimestamp(stat.st_mtime).strftime('%Y-%m-%d %H:%M'),
            })
    entries.sort(key=lambda e: (not e['is_dir'], e['name'].lower()))
    return entries
