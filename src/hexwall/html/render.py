"""Render packaged jinja2 templates."""

__all__ = ["render_template"]

from functools import lru_cache
from typing import Any

import jinja2


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    """Template environment with HTML autoescaping."""
    return jinja2.Environment(
        loader=jinja2.PackageLoader("hexwall", "templates"),
        autoescape=jinja2.select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_template(name: str, **context: Any) -> str:
    return get_environment().get_template(name).render(**context)
