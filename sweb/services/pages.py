#!/usr/bin/env python3
"""
sweb/services/pages.py
HTML pages served by sweb, and the generated landing page
"""

import logging
import os
from typing import Optional

from jinja2 import Environment, PackageLoader, select_autoescape

logger = logging.getLogger(__name__)

INDEX_FILES = ('index.html', 'index.htm')
STATUS_ENDPOINT = '/api/upload-status'
STATUS_POLL_INTERVAL_MS = 30000

_env = Environment(
    loader=PackageLoader('sweb', 'templates'),
    autoescape=select_autoescape(['html']),
)


def render_page(template_name: str, **context) -> str:
    """Render one of the bundled templates"""
    return _env.get_template(template_name).render(**context)


def find_index_page(directory: str) -> Optional[str]:
    """Name of the index page present in directory, if any"""
    for name in INDEX_FILES:
        if os.path.isfile(os.path.join(directory, name)):
            return name
    return None


def generate_default_page() -> str:
    return render_page(
        'index.html',
        status_endpoint=STATUS_ENDPOINT,
        poll_interval=STATUS_POLL_INTERVAL_MS,
    )


def create_default_page_if_needed(directory: str) -> bool:
    """Write index.html into directory unless an index page already exists.

    Returns True when a page was written. A failed write is logged and
    otherwise ignored; the server still starts without a landing page.
    """
    if find_index_page(directory):
        return False

    index_path = os.path.join(directory, 'index.html')
    try:
        with open(index_path, 'w', encoding='utf-8') as f:
            f.write(generate_default_page())
    except OSError as e:
        logger.warning("Could not create default page %s: %s", index_path, e)
        return False

    logger.info("Created default page %s", index_path)
    return True
