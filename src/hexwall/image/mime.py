"""Resolve an image MIME type from a file path or URL."""

__all__ = ["mime_from_path", "extension_of", "is_url"]

import posixpath
import re
from urllib.parse import urlsplit

DEFAULT_MIME: str = "image/png"

MIME_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "svg": "image/svg+xml",
    "gif": "image/gif",
    "webp": "image/webp",
}

URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def is_url(source: str) -> bool:
    """Check whether a source is an http(s) URL."""
    return bool(URL_PATTERN.match(source))


def extension_of(path: str) -> str:
    """
    Return the lowercased extension of a path or URL, without the dot.

    Query strings and fragments are ignored for URLs.

    Example:
        >>> extension_of("https://example.org/logo.SVG?raw=true")
        'svg'
    """
    if is_url(path):
        path = urlsplit(path).path
    _, ext = posixpath.splitext(path.replace("\\", "/"))
    return ext[1:].lower()


def mime_from_path(path: str) -> str:
    """
    Map a file path or URL to an image MIME type.

    Unknown or missing extensions fall back to ``image/png``.

    Example:
        >>> mime_from_path("logo.jpeg")
        'image/jpeg'
        >>> mime_from_path("logo")
        'image/png'
    """
    return MIME_TYPES.get(extension_of(path), DEFAULT_MIME)
