"""
Packages subpackage.

Installed-package lookup and logo discovery.
"""

from hexwall.packages.locator import (
    PackageLocator,
    ImportlibPackageLocator,
)

from hexwall.packages.logos import (
    find_package_logos,
    find_logo,
)

__all__ = [
    # locator
    "PackageLocator",
    "ImportlibPackageLocator",
    # logos
    "find_package_logos",
    "find_logo",
]
