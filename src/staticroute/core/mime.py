"""Content type lookup by file extension."""

import mimetypes

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Pinned so responses don't depend on the host's mime.types file
_WEB_TYPES = {
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "text/javascript",
    "mjs": "text/javascript",
    "json": "application/json",
    "map": "application/json",
    "webmanifest": "application/manifest+json",
    "svg": "image/svg+xml",
    "png": "image/png",
    "ico": "image/x-icon",
    "woff2": "font/woff2",
    "wasm": "application/wasm",
    "txt": "text/plain",
    "xml": "application/xml",
}


def mime_type_for(extension: str) -> str:
    """Return the content type for a file extension.

    Args:
        extension: Extension with or without leading dot (e.g. "html", ".CSS")

    Returns:
        Content type, or application/octet-stream when unknown
    """
    ext = extension.lstrip(".").lower()
    if not ext:
        return DEFAULT_CONTENT_TYPE
    if ext in _WEB_TYPES:
        return _WEB_TYPES[ext]
    guessed, _ = mimetypes.guess_type(f"file.{ext}", strict=False)
    return guessed or DEFAULT_CONTENT_TYPE
