"""
Shared helpers for the server tests.
"""

import builtins
import os
import threading


class BackgroundServer:
    """Runs a socketserver-style server in a background thread."""

    def __init__(self, server):
        self.server = server
        self.port = server.server_address[1]
        self._thread = threading.Thread(target=server.serve_forever, daemon=True)

    @property
    def url(self) -> str:
        return f"http://127.0.0.1:{self.port}"

    def start(self):
        self._thread.start()
        return self

    def stop(self):
        self.server.shutdown()
        self.server.server_close()
        self._thread.join(timeout=5.0)


def failing_open(name: str, error: OSError):
    """Return a replacement for builtins.open that raises ``error`` for ``name``.

    Every other file opens normally, so the server's own send path still runs.
    """
    real_open = builtins.open

    def fake_open(file, *args, **kwargs):
        if isinstance(file, (str, os.PathLike)) and os.fspath(file).endswith(name):
            raise error
        return real_open(file, *args, **kwargs)

    return fake_open
