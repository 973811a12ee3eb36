"""Validate image sources before any conversion work."""

__all__ = ["validate_images"]

import re
from collections.abc import Sequence
from pathlib import Path

from ..config import SUPPORTED_EXTENSIONS
from ..diagnostics import Diagnostics
from ..errors import MissingFileError
from .mime import is_url

_EXT_GROUP = "|".join(SUPPORTED_EXTENSIONS)

# Pre-compiled patterns; matched against the raw source string
IMAGE_URL_PATTERN = re.compile(rf"^https?://\S+\.({_EXT_GROUP})$", re.IGNORECASE)
IMAGE_FILE_PATTERN = re.compile(rf"\.({_EXT_GROUP})$", re.IGNORECASE)


def validate_images(
    images: Sequence[str],
    diagnostics: Diagnostics | None = None,
) -> Diagnostics:
    """
    Check that local images exist and that sources look like images.

    Args:
        images: Local paths and/or http(s) URLs
        diagnostics: Collector for non-fatal warnings (created if omitted)

    Returns:
        The diagnostics collector

    Raises:
        MissingFileError: If a local path does not exist
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    for img in images:
        if is_url(img):
            # Only the format can be checked without a request
            if not IMAGE_URL_PATTERN.match(img):
                diagnostics.warn(img, f"URL '{img}' may not point to a valid image format")
            continue

        if not img or not Path(img).exists():
            raise MissingFileError(img)

        if not IMAGE_FILE_PATTERN.search(img):
            diagnostics.warn(img, f"File '{img}' may not be a supported image format")

    return diagnostics
