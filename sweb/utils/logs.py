#!/usr/bin/env python3
"""
sweb/utils/logs.py
Logging setup for the server process
"""

import logging

from wsgidav.default_conf import DEFAULT_LOGGER_DATE_FORMAT, DEFAULT_LOGGER_FORMAT


def configure_logging(verbose: int = 0) -> None:
    """Install the root handler; INFO by default, DEBUG with -v"""
    level = logging.DEBUG if verbose > 0 else logging.INFO
    logging.basicConfig(
        level=level,
        format=DEFAULT_LOGGER_FORMAT,
        datefmt=DEFAULT_LOGGER_DATE_FORMAT,
    )
    # Waitress logs every queue warning at WARNING; keep it quiet unless asked
    if verbose < 2:
        logging.getLogger('waitress.queue').setLevel(logging.ERROR)
