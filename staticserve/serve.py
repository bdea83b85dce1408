"""Static file server built on the standard library's http.server.

Answers requests the same way as the Flask blueprint: ``/`` and directories
serve their ``index.html``, missing files are 404, unreadable files are 500.
"""

import http.server
import logging
import os
import socketserver
import sys
from http import HTTPStatus
from urllib.parse import urlsplit, urlunsplit

from .config import CONTENT_TYPE_OVERRIDES, DEFAULT_DOCUMENT, HOST, LISTEN_MESSAGE, PORT
from .paths import local_path_for

logger = logging.getLogger(__name__)

# open() failures that mean "nothing servable at this path"
NOT_FOUND_ERRORS = (FileNotFoundError, IsADirectoryError, NotADirectoryError)


class Handler(http.server.SimpleHTTPRequestHandler):
    extensions_map = {
        **http.server.SimpleHTTPRequestHandler.extensions_map,
        **CONTENT_TYPE_OVERRIDES,
    }

    def __init__(self, *args, **kwargs):
        try:
            directory = os.getcwd()
        except FileNotFoundError:
            # Working directory was removed; relative lookups all miss
            directory = ""
        super().__init__(*args, directory=directory, **kwargs)

    def _map_path(self):
        parts = urlsplit(self.path)
        self.path = "/" + local_path_for(parts.path)
        if parts.query:
            self.path += "?" + parts.query

    def do_GET(self):
        self._map_path()
        return super().do_GET()

    def do_HEAD(self):
        self._map_path()
        return super().do_HEAD()

    def send_head(self):
        path = self.translate_path(self.path)

        if os.path.isdir(path):
            parts = urlsplit(self.path)
            if not parts.path.endswith("/"):
                self.send_response(HTTPStatus.MOVED_PERMANENTLY)
                self.send_header("Location", urlunsplit(parts._replace(path=parts.path + "/")))
                self.send_header("Content-Length", "0")
                self.end_headers()
                return None
            path = os.path.join(path, DEFAULT_DOCUMENT)
        elif path.endswith("/"):
            self.send_error(HTTPStatus.NOT_FOUND, "File not found")
            return None

        try:
            f = open(path, "rb")
        except NOT_FOUND_ERRORS:
            self.send_error(HTTPStatus.NOT_FOUND, "File not found")
            return None
        except OSError as e:
            logger.error("[Static] Could not serve %s: %s", self.path, e)
            self.send_error(HTTPStatus.INTERNAL_SERVER_ERROR)
            return None

        try:
            fs = os.fstat(f.fileno())
            self.send_response(HTTPStatus.OK)
            self.send_header("Content-Type", self.guess_type(path))
            self.send_header("Content-Length", str(fs.st_size))
            self.send_header("Last-Modified", self.date_time_string(fs.st_mtime))
            self.end_headers()
            return f
        except Exception:
            f.close()
            raise

    def log_message(self, format, *args):
        logger.info("%s - - %s", self.address_string(), format % args)


class ThreadingServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True


def build_server(host, port):
    return ThreadingServer((host, port), Handler)


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        httpd = build_server(HOST, PORT)
    except OSError as e:
        logger.error("[Server] Could not bind %s:%d: %s", HOST, PORT, e)
        sys.exit(1)

    with httpd:
        print(LISTEN_MESSAGE.format(port=httpd.server_address[1]), flush=True)
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            print("\nShutting down server.")
