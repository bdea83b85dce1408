"""Configuration for the static file server."""

# Bind address (all interfaces)
HOST = "0.0.0.0"

# Server port
PORT = 80

# Served when the request path is empty (e.g. GET /)
DEFAULT_DOCUMENT = "index.html"

# Printed once the socket is bound
LISTEN_MESSAGE = "listening on port {port}..."

# Content types that platform mimetypes tables get wrong or lack.
# Browsers refuse module scripts served as text/plain or text/html.
CONTENT_TYPE_OVERRIDES = {
    ".js": "text/javascript",
    ".mjs": "text/javascript",
    ".wasm": "application/wasm",
}
