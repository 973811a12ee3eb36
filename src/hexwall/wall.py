"""
Build a hex wall from package logos and image sources.

``hex_wall`` is the entry point: it collects logos from installed packages,
adds the given images, validates everything, inlines each image as a
base64 data URI and assembles the tile fragment.
"""

__all__ = ["hex_wall", "hextile"]

import warnings
from collections.abc import Iterable
from typing import Any

import requests
from loguru import logger

from .args import as_string_list
from .diagnostics import Diagnostics
from .errors import InvalidArgumentError
from .html.tags import TileFragment, hex_tiles
from .image.fetch import convert_images
from .image.validate import validate_images
from .packages.locator import PackageLocator
from .packages.logos import find_package_logos

_hextile_warned: bool = False


def hex_wall(
    packages: str | Iterable[str] | None = None,
    images: str | Iterable[str] | None = None,
    class_: str | Iterable[str] | None = None,
    *,
    locator: PackageLocator | None = None,
    session: requests.Session | None = None,
    timeout: float | None = None,
    diagnostics: Diagnostics | None = None,
    **attrs: Any,
) -> TileFragment:
    """
    Create a hexagon tile wall.

    Package logos come first (in package order), followed by the images.
    Every image is embedded as a data URI; an image that fails to convert
    keeps its original path/URL and a warning is recorded.

    Args:
        packages: Package name(s) whose ``help/figures/logo.*`` to show
        images: Local image paths and/or http(s) URLs
        class_: Additional CSS class(es) for the container
        locator: Package registry access (defaults to importlib)
        session: HTTP session for downloads
        timeout: Download timeout in seconds
        diagnostics: Collector for warnings (one is created if omitted)
        **attrs: Additional attributes for the container div

    Returns:
        TileFragment; its ``diagnostics`` hold every warning of the call

    Raises:
        InvalidArgumentError: On empty/non-string arguments, non-string
            classes, or no images
        MissingFileError: If a local image does not exist
        MissingAssetError: If hex.css cannot be located

    Example:
        >>> wall = hex_wall(images=["logo1.svg", "logo2.png"], class_="my-wall")
        >>> print(wall.render())
    """
    if diagnostics is None:
        diagnostics = Diagnostics()

    package_names = as_string_list(packages, "packages") if packages is not None else None
    image_sources = as_string_list(images, "images") if images is not None else None
    if class_ is not None and not isinstance(class_, str):
        # Checked before any download; generators are materialized once
        if isinstance(class_, Iterable) and not isinstance(class_, (bytes, dict)):
            class_ = list(class_)
        if class_ != []:
            as_string_list(class_, "class_")

    all_images: list[str] = []
    if package_names is not None:
        all_images.extend(find_package_logos(package_names, locator=locator, diagnostics=diagnostics))
    if image_sources is not None:
        all_images.extend(image_sources)

    if not all_images:
        raise InvalidArgumentError("Must provide either 'packages' or 'images' argument")

    # Fail on missing local files before any download
    validate_images(all_images, diagnostics=diagnostics)

    logger.debug(f"Converting {len(all_images)} image(s) to data URIs")
    conversions = convert_images(all_images, diagnostics=diagnostics, session=session, timeout=timeout)

    return hex_tiles(
        [c.value for c in conversions],
        class_=class_,
        diagnostics=diagnostics,
        **attrs,
    )


def hextile(
    images: str | Iterable[str],
    class_: str | Iterable[str] | None = None,
    **attrs: Any,
) -> TileFragment:
    """Deprecated: use ``hex_wall(images=...)``."""
    global _hextile_warned
    if not _hextile_warned:
        _hextile_warned = True
        warnings.warn(
            "hextile() is deprecated. Use hex_wall(images = ...) instead.",
            DeprecationWarning,
            stacklevel=2,
        )
    return hex_wall(images=images, class_=class_, **attrs)
