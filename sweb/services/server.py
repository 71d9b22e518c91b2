#!/usr/bin/env python3
"""
sweb/services/server.py
Runs the WSGI application on waitress or cheroot
"""

import logging

from ..config.config import ServerConfig

logger = logging.getLogger(__name__)

SERVER_IDENT = 'sweb'
WORKER_THREADS = 10


def run_server(app, config: ServerConfig) -> None:
    """Serve app until interrupted. Bind failures propagate as OSError."""
    logger.info("Starting %s on %s:%d", config.server, config.host, config.port)

    if config.server == 'cheroot':
        from cheroot import wsgi

        server = wsgi.Server(
            bind_addr=(config.host, config.port),
            wsgi_app=app,
            numthreads=WORKER_THREADS,
            server_name=SERVER_IDENT,
        )
        try:
            server.start()
        finally:
            server.stop()
    else:
        from waitress import serve

        serve(
            app,
            host=config.host,
            port=config.port,
            threads=WORKER_THREADS,
            ident=SERVER_IDENT,
        )
