"""
HTML subpackage.

Fragment assembly, stylesheet dependency and page output.
"""

from hexwall.html.dependency import (
    HTMLDependency,
    hex_dependency,
)

from hexwall.html.tags import (
    TileFragment,
    hex_tiles,
    attach_hex_dependency,
)

from hexwall.html.save import save_html

__all__ = [
    # dependency
    "HTMLDependency",
    "hex_dependency",
    # tags
    "TileFragment",
    "hex_tiles",
    "attach_hex_dependency",
    # save
    "save_html",
]
