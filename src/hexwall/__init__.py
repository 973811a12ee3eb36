"""
hexwall - Hexagonal tile walls of images, as self-contained HTML.

This package is organized into focused subpackages:

- image/     Image sources (requires requests)
             - mime: mime_from_path, extension_of
             - validate: validate_images
             - encode: data_uri_from_bytes, data_uri_from_file
             - fetch: download, convert_image, convert_images

- packages/  Installed-package logos
             - locator: PackageLocator, ImportlibPackageLocator
             - logos: find_package_logos

- html/      Fragment assembly (requires jinja2)
             - dependency: HTMLDependency, hex_dependency
             - tags: TileFragment, hex_tiles
             - save: save_html

- ui/        Notebook display (requires marimo)
             - marimo: wrap_wall

Usage:
    from hexwall import hex_wall, save_html

    wall = hex_wall(packages=["requests"], images=["logo.svg"], class_="large")
    save_html(wall, "wall.html")
"""

__version__ = "0.1.0"

from hexwall.errors import (
    HexWallError,
    InvalidArgumentError,
    MissingFileError,
    DownloadError,
    MissingAssetError,
)

from hexwall.diagnostics import (
    Diagnostic,
    Diagnostics,
)

from hexwall.image import (
    mime_from_path,
    validate_images,
    data_uri_from_bytes,
    data_uri_from_source,
    convert_image,
    convert_images,
    Conversion,
)

from hexwall.packages import (
    PackageLocator,
    ImportlibPackageLocator,
    find_package_logos,
)

from hexwall.html import (
    HTMLDependency,
    TileFragment,
    hex_dependency,
    hex_tiles,
    save_html,
)

from hexwall.wall import (
    hex_wall,
    hextile,
)

__all__ = [
    "__version__",
    # wall
    "hex_wall",
    "hextile",
    # errors
    "HexWallError",
    "InvalidArgumentError",
    "MissingFileError",
    "DownloadError",
    "MissingAssetError",
    # diagnostics
    "Diagnostic",
    "Diagnostics",
    # image
    "mime_from_path",
    "validate_images",
    "data_uri_from_bytes",
    "data_uri_from_source",
    "convert_image",
    "convert_images",
    "Conversion",
    # packages
    "PackageLocator",
    "ImportlibPackageLocator",
    "find_package_logos",
    # html
    "HTMLDependency",
    "TileFragment",
    "hex_dependency",
    "hex_tiles",
    "save_html",
]
