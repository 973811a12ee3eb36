"""
Access to the installed-package registry.

The logo finder only talks to a ``PackageLocator`` so that tests can swap
in a fake registry.
"""

__all__ = ["PackageLocator", "ImportlibPackageLocator"]

import importlib.util
from importlib.machinery import ModuleSpec
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PackageLocator(Protocol):
    """Lookup of installed packages and their installation roots."""

    def is_installed(self, name: str) -> bool: ...

    def install_path(self, name: str) -> Path | None: ...


class ImportlibPackageLocator:
    """Locate importable Python packages with ``importlib``."""

    def _find_spec(self, name: str) -> ModuleSpec | None:
        try:
            return importlib.util.find_spec(name)
        except (ImportError, ValueError):
            # Missing parent package or empty/relative name
            return None

    def is_installed(self, name: str) -> bool:
        return self._find_spec(name) is not None

    def install_path(self, name: str) -> Path | None:
        """Return the package directory (or the module's directory)."""
        spec = self._find_spec(name)
        if spec is None:
            return None

        if spec.submodule_search_locations:
            return Path(next(iter(spec.submodule_search_locations)))

        if spec.origin and spec.has_location:
            return Path(spec.origin).parent

        return None
