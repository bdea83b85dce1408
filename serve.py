#!/usr/bin/env python3
"""Start the static file server built on http.server."""

from staticserve.serve import main

if __name__ == "__main__":
    main()
