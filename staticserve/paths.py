"""Mapping from request URL paths to files under the served directory."""

from __future__ import annotations

import posixpath
from typing import Optional

from .config import CONTENT_TYPE_OVERRIDES, DEFAULT_DOCUMENT


def local_path_for(url_path: str, default_document: str = DEFAULT_DOCUMENT) -> str:
    """Return the file path, relative to the served directory, for a URL path.

    A single leading ``/`` is stripped. An empty result means the root was
    requested and ``default_document`` is returned instead.
    """
    path = url_path[1:] if url_path.startswith("/") else url_path
    return path or default_document


def content_type_for(path: str) -> Optional[str]:
    """Forced content type for ``path``, or None to let the server guess."""
    ext = posixpath.splitext(path)[1].lower()
    return CONTENT_TYPE_OVERRIDES.get(ext)
