"""Find hex logos shipped inside installed packages."""

__all__ = ["find_package_logos", "find_logo"]

import re
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from ..args import as_string_list
from ..config import CONFIG
from ..diagnostics import Diagnostics
from .locator import ImportlibPackageLocator, PackageLocator

LOGO_PATTERN = re.compile(CONFIG["logo_pattern"], re.IGNORECASE)


def find_logo(figures_dir: Path) -> Path | None:
    """Return the first ``logo.<ext>`` file in a directory, if any."""
    if not figures_dir.is_dir():
        return None

    candidates = sorted(
        entry for entry in figures_dir.iterdir()
        if entry.is_file() and LOGO_PATTERN.match(entry.name)
    )
    return candidates[0] if candidates else None


def find_package_logos(
    packages: str | Iterable[str],
    locator: PackageLocator | None = None,
    diagnostics: Diagnostics | None = None,
) -> list[str]:
    """
    Resolve package names to the absolute paths of their logos.

    Logos are looked up under ``help/figures/`` in each package's
    installation root. Packages that are missing or have no logo are
    skipped with a warning.

    Args:
        packages: Package name or names
        locator: Registry access (defaults to importlib)
        diagnostics: Collector for non-fatal warnings

    Returns:
        Logo paths, in package order

    Raises:
        InvalidArgumentError: If packages is empty or not strings
    """
    names = as_string_list(packages, "packages")
    if locator is None:
        locator = ImportlibPackageLocator()
    if diagnostics is None:
        diagnostics = Diagnostics()

    logo_paths: list[str] = []

    for pkg in names:
        if not locator.is_installed(pkg):
            diagnostics.warn(pkg, f"Package '{pkg}' is not installed, skipping logo search")
            continue

        pkg_path = locator.install_path(pkg)
        if pkg_path is None:
            diagnostics.warn(pkg, f"Cannot find installation path for package '{pkg}'")
            continue

        figures_dir = Path(pkg_path).joinpath(*CONFIG["logo_subpath"])
        logo = find_logo(figures_dir)
        if logo is None:
            diagnostics.warn(pkg, f"No logo found for package '{pkg}' in {figures_dir}")
            continue

        logger.debug(f"Found logo for {pkg}: {logo}")
        logo_paths.append(str(logo.resolve()))

    return logo_paths
