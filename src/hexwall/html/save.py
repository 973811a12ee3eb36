"""Save a fragment as a standalone HTML page."""

__all__ = ["save_html"]

from pathlib import Path

from loguru import logger

from .render import render_template
from .tags import TileFragment


def save_html(
    fragment: TileFragment,
    file: str | Path,
    libdir: str = "lib",
    title: str | None = None,
) -> Path:
    """
    Write a fragment to an HTML page, copying its stylesheets next to it.

    Stylesheets land in ``<page dir>/<libdir>/<name>-<version>/`` and are
    linked from the page head.

    Args:
        fragment: Fragment to save
        file: Output HTML path
        libdir: Directory (relative to the page) for stylesheets
        title: Optional page title

    Returns:
        Path of the written page
    """
    path = Path(file)
    path.parent.mkdir(parents=True, exist_ok=True)

    for dependency in fragment.dependencies:
        copied = dependency.copy_to(path.parent / libdir)
        logger.debug(f"Copied {dependency.name} to {copied}")

    page = render_template(
        "page.html",
        title=title,
        head=fragment.head(libdir),
        body=fragment.render(),
    )
    path.write_text(page, encoding="utf-8")
    logger.info(f"Saved hex wall to {path}")

    return path
