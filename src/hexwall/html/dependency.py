"""Stylesheet dependency for hex walls."""

__all__ = ["HTMLDependency", "hex_dependency", "package_asset_dir"]

import shutil
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path

from loguru import logger

from ..config import CONFIG
from ..errors import MissingAssetError


@dataclass(frozen=True)
class HTMLDependency:
    """A stylesheet that must be loaded alongside a fragment."""

    name: str
    version: str
    src: Path
    stylesheet: str

    @property
    def path(self) -> Path:
        return self.src / self.stylesheet

    @property
    def dirname(self) -> str:
        return f"{self.name}-{self.version}"

    def href(self, libdir: str = "lib") -> str:
        """Relative URL of the stylesheet once copied into ``libdir``."""
        return f"{libdir}/{self.dirname}/{self.stylesheet}"

    def read_stylesheet(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def copy_to(self, libdir: Path) -> Path:
        """Copy the stylesheet into ``<libdir>/<name>-<version>/``."""
        target_dir = Path(libdir) / self.dirname
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / self.stylesheet
        shutil.copy2(self.path, target)
        return target


def package_asset_dir() -> Path | None:
    """
    Return the installed package's asset directory if it holds the stylesheet.

    Only filesystem installs qualify. A zip or other non-filesystem loader has
    no stable directory to hand out (``importlib.resources.as_file`` gives a
    temporary copy that is removed on exit), so None is returned and the
    development fallbacks apply.
    """
    resource = files("hexwall") / CONFIG["stylesheet_dir"] / CONFIG["stylesheet_file"]
    if not resource.is_file():
        return None
    path = Path(str(resource))
    if not path.is_file():
        logger.debug(f"Stylesheet resource {resource!r} is not on the filesystem")
        return None
    return path.parent


def hex_dependency() -> HTMLDependency:
    """
    Build the ``hex.css`` dependency.

    The stylesheet is taken from the installed package, then from a
    development checkout (``inst/hex.css`` or ``hex.css`` in the working
    directory).

    Raises:
        MissingAssetError: If no location holds the stylesheet
    """
    stylesheet = CONFIG["stylesheet_file"]
    src = package_asset_dir()

    if src is None:
        for directory, filename in CONFIG["stylesheet_fallbacks"]:
            if (Path(directory) / filename).is_file():
                logger.debug(f"Using development stylesheet from {directory}")
                src = Path(directory)
                stylesheet = filename
                break
        else:
            raise MissingAssetError(stylesheet)

    return HTMLDependency(
        name=CONFIG["stylesheet_name"],
        version=CONFIG["stylesheet_version"],
        src=src,
        stylesheet=stylesheet,
    )
