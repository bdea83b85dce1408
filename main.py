#!/usr/bin/env python3
"""Start the static file server (same as ``python -m staticserve``)."""

from staticserve.cli import main

if __name__ == "__main__":
    main()
