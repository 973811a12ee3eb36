"""Encode raw bytes as base64 data URIs."""

__all__ = ["data_uri_from_bytes", "data_uri_from_file"]

import base64
from pathlib import Path

from .mime import mime_from_path


def data_uri_from_bytes(data: bytes, mime: str) -> str:
    """
    Build a ``data:<mime>;base64,<payload>`` string.

    Example:
        >>> data_uri_from_bytes(b"<svg/>", "image/svg+xml")
        'data:image/svg+xml;base64,PHN2Zy8+'
    """
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"


def data_uri_from_file(path: str | Path) -> str:
    """Read a local file and encode it, inferring the MIME type from its name."""
    data = Path(path).read_bytes()
    return data_uri_from_bytes(data, mime_from_path(str(path)))
