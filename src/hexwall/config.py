"""
Configuration for hexwall.

All tunables (network, lookup conventions, styling) are centralized here.
"""

__all__ = [
    "CONFIG",
    "SUPPORTED_EXTENSIONS",
    "LOGO_EXTENSIONS",
    "BASE_CLASSES",
]

from typing import Any

# ====================================================================
# APPLICATION CONFIGURATION
# ====================================================================

CONFIG: dict[str, Any] = {
    # Network
    "user_agent": "hexwall/0.1.0",
    "download_timeout": 30,  # seconds per image request
    "download_chunk_size": 64 * 1024,  # bytes written to the temp file per read
    "max_retries": 3,  # transport-level retries for a single download
    "retry_backoff": 0.5,  # urllib3 backoff factor
    "retry_status_codes": [429, 500, 502, 503, 504],
    # Logo lookup (relative to a package's installation root)
    "logo_subpath": ("help", "figures"),
    "logo_pattern": r"^logo\.(png|jpg|jpeg|svg)$",
    # Stylesheet asset
    "stylesheet_name": "hex-css",
    "stylesheet_version": "1.0.0",
    "stylesheet_file": "hex.css",
    "stylesheet_dir": "www",
    # Development checkouts: (directory, file) pairs relative to cwd
    "stylesheet_fallbacks": (("inst", "hex.css"), (".", "hex.css")),
}

# ====================================================================
# IMAGE FORMATS
# ====================================================================

SUPPORTED_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "svg", "gif", "webp")
LOGO_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "svg")

# ====================================================================
# STYLING
# ====================================================================

BASE_CLASSES: str = "hextile clr"
