"""Flask Blueprint that serves files from a local directory."""

from __future__ import annotations

import logging
import os
import posixpath

from flask import Blueprint, redirect, request, send_from_directory
from werkzeug.security import safe_join

from .config import DEFAULT_DOCUMENT
from .paths import content_type_for, local_path_for

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "root": None,
    "default_document": DEFAULT_DOCUMENT,
}


def create_blueprint(name="static_files", config=None):
    """Create and return the static file Blueprint.

    Args:
        name: Blueprint name (used for url_for namespacing).
        config: Optional dict overriding DEFAULT_CONFIG keys.
            - root (Path|str|None): Directory to serve. None serves the
              process's working directory, looked up on every request.
            - default_document (str): File served for the empty path and
              for any directory that is requested.

    Returns:
        A Flask Blueprint with one catch-all route.
    """
    cfg = {**DEFAULT_CONFIG, **(config or {})}
    bp = Blueprint(name, __name__)

    def served_root():
        if cfg["root"] is None:
            return os.getcwd()
        return os.path.abspath(cfg["root"])

    @bp.route("/", defaults={"filename": ""})
    @bp.route("/<path:filename>")
    def serve_file(filename):
        root = served_root()
        local_path = local_path_for(filename, cfg["default_document"])

        full_path = safe_join(root, local_path)
        if full_path is not None and os.path.isdir(full_path):
            if not request.path.endswith("/"):
                location = request.path + "/"
                if request.query_string:
                    location += "?" + request.query_string.decode("latin-1")
                return redirect(location, code=301)
            local_path = posixpath.join(local_path, cfg["default_document"])

        # Missing files and paths outside the root raise NotFound
        return send_from_directory(
            root,
            local_path,
            mimetype=content_type_for(local_path),
        )

    @bp.errorhandler(FileNotFoundError)
    def file_vanished(e):
        logger.info("[Static] %s disappeared before it could be read", request.path)
        return "Not Found\n", 404, {"Content-Type": "text/plain; charset=utf-8"}

    @bp.errorhandler(OSError)
    def file_unreadable(e):
        logger.error("[Static] Could not serve %s: %s", request.path, e)
        return (
            "Internal Server Error\n",
            500,
            {"Content-Type": "text/plain; charset=utf-8"},
        )

    return bp
