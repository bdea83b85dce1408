"""
pytest configuration and fixtures.
"""

import socket
from pathlib import Path
from typing import Generator

import pytest

from staticserve import create_app


@pytest.fixture
def site_dir(tmp_path: Path, monkeypatch) -> Path:
    """Empty directory made the working directory for the test."""
    site = tmp_path / "site"
    site.mkdir()
    monkeypatch.chdir(site)
    return site


@pytest.fixture
def client(site_dir: Path):
    """Flask test client serving the working directory."""
    return create_app().test_client()


@pytest.fixture
def busy_port() -> Generator[int, None, None]:
    """A port on 127.0.0.1 that is already bound and listening."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        s.listen(1)
        yield s.getsockname()[1]
