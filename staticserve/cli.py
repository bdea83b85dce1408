"""Command line entry point for the static file server.

Serves files from the current working directory on port 80. ``GET /`` is
answered with ``index.html``; every other path maps to the file of the same
name. There are no options besides ``--help``.
"""

import argparse
import logging

from werkzeug.serving import make_server

from . import create_app
from .config import HOST, LISTEN_MESSAGE, PORT

logger = logging.getLogger(__name__)


def build_server(app, host, port):
    """Bind a threaded WSGI server for ``app``.

    Werkzeug reports a failed bind on stderr and exits with status 1.
    """
    return make_server(host, port, app, threaded=True)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve files from the current directory over HTTP"
    )
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    app = create_app()
    server = build_server(app, HOST, PORT)

    print(LISTEN_MESSAGE.format(port=server.server_address[1]), flush=True)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("[Server] Shutting down...")
    finally:
        server.server_close()
