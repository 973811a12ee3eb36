"""Exceptions raised by hexwall."""

__all__ = [
    "HexWallError",
    "InvalidArgumentError",
    "MissingFileError",
    "DownloadError",
    "MissingAssetError",
]


class HexWallError(Exception):
    """Base class for all hexwall errors."""


class InvalidArgumentError(HexWallError, ValueError):
    """Malformed or missing top-level arguments."""


class MissingFileError(HexWallError, FileNotFoundError):
    """A local image does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Image file does not exist: {path}")

    def __str__(self) -> str:
        return self.args[0]


class DownloadError(HexWallError):
    """A remote image could not be fetched."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download '{url}': {reason}")


class MissingAssetError(HexWallError, FileNotFoundError):
    """A packaged asset (stylesheet) cannot be located."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Cannot find {name} file")

    def __str__(self) -> str:
        return self.args[0]
