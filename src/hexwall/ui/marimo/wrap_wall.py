"""Wrap a hex wall in mo.Html for notebook display."""

__all__ = ["wrap_wall"]

import marimo as mo

from ...html.tags import TileFragment


def wrap_wall(fragment: TileFragment | None) -> mo.Html:
    """Wrap a fragment (stylesheet inlined) in mo.Html."""
    return mo.Html(fragment.inline()) if fragment is not None else mo.Html("")
