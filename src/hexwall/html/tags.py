"""
Assemble the hex tile fragment.

The fragment is a ``<div class="hextile clr ...">`` holding a ``<ul>`` with
one ``<li><img></li>`` per image, plus the stylesheet it depends on.
"""

__all__ = [
    "TileFragment",
    "hex_tiles",
    "attach_hex_dependency",
    "attr_name",
]

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..args import as_string_list
from ..config import BASE_CLASSES
from ..diagnostics import Diagnostics
from .dependency import HTMLDependency, hex_dependency
from .render import render_template


def attr_name(key: str) -> str:
    """
    Convert a Python keyword to an HTML attribute name.

    Example:
        >>> attr_name("data_id")
        'data-id'
        >>> attr_name("for_")
        'for'
    """
    return key.rstrip("_").replace("_", "-")


def _attr_value(value: Any) -> str | None:
    if value is True:
        return None
    if isinstance(value, (list, tuple)):
        return " ".join(str(v) for v in value)
    return str(value)


@dataclass
class TileFragment:
    """Hex tile markup plus the stylesheets it needs."""

    images: list[str]
    class_name: str = BASE_CLASSES
    attrs: dict[str, str | None] = field(default_factory=dict)
    dependencies: list[HTMLDependency] = field(default_factory=list)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    def render(self) -> str:
        """Return the fragment markup (without stylesheets)."""
        return render_template(
            "hextile.html",
            class_name=self.class_name,
            attrs=self.attrs,
            images=self.images,
        )

    def head(self, libdir: str = "lib") -> str:
        """Return ``<link>`` tags for the dependencies copied into ``libdir``."""
        return render_template("dependencies.html", dependencies=self.dependencies, libdir=libdir)

    def inline(self) -> str:
        """Return the fragment with its stylesheets inlined in ``<style>`` elements."""
        return render_template(
            "inline.html",
            stylesheets=[dep.read_stylesheet() for dep in self.dependencies],
            body=self.render(),
        )

    def _repr_html_(self) -> str:
        return self.inline()

    def __str__(self) -> str:
        return self.render()


def attach_hex_dependency(fragment: TileFragment) -> TileFragment:
    """Attach the ``hex.css`` dependency to a fragment."""
    dependency = hex_dependency()
    if dependency not in fragment.dependencies:
        fragment.dependencies.append(dependency)
    return fragment


def hex_tiles(
    images: Sequence[str],
    class_: str | Iterable[str] | None = None,
    diagnostics: Diagnostics | None = None,
    **attrs: Any,
) -> TileFragment:
    """
    Build a hex tile fragment from display strings.

    Args:
        images: ``src`` values, usually data URIs
        class_: Extra CSS class(es) appended to "hextile clr"
        diagnostics: Warnings to carry on the fragment
        **attrs: Extra attributes for the container div

    Returns:
        TileFragment with the stylesheet dependency attached

    Raises:
        InvalidArgumentError: If class_ holds non-strings
        MissingAssetError: If the stylesheet cannot be located
    """
    classes = [BASE_CLASSES]
    if class_ is not None and not (isinstance(class_, (list, tuple)) and not class_):
        classes.extend(as_string_list(class_, "class_"))

    div_attrs: dict[str, str | None] = {}
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = attr_name(key)
        if name == "class":
            classes.append(_attr_value(value) or "")
            continue
        div_attrs[name] = _attr_value(value)

    fragment = TileFragment(
        images=list(images),
        class_name=" ".join(c for c in classes if c),
        attrs=div_attrs,
        diagnostics=diagnostics if diagnostics is not None else Diagnostics(),
    )
    return attach_hex_dependency(fragment)
