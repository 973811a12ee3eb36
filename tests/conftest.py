from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import requests

import hexwall.wall

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
SVG_BYTES = b"<svg/>"


class FakeLocator:
    """In-memory package registry: name -> install root (None = no path)."""

    def __init__(self, packages: dict[str, Path | None]) -> None:
        self.packages = packages

    def is_installed(self, name: str) -> bool:
        return name in self.packages

    def install_path(self, name: str) -> Path | None:
        return self.packages.get(name)


class FakeResponse:
    """Streamed response; ``body_error`` is raised after the first chunk."""

    def __init__(
        self,
        content: bytes,
        status_code: int = 200,
        body_error: Exception | None = None,
    ) -> None:
        self.content = content
        self.status_code = status_code
        self.body_error = body_error
        self.closed = False

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error", response=self)

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        for start in range(0, len(self.content), chunk_size):
            yield self.content[start:start + chunk_size]
            if self.body_error is not None:
                raise self.body_error

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class FakeSession:
    """Session stand-in: URL -> bytes, status code, response, or exception."""

    def __init__(self, routes: dict[str, bytes | int | FakeResponse | Exception]) -> None:
        self.routes = routes
        self.requested: list[str] = []
        self.streamed: list[bool] = []
        self.closed = False

    def get(self, url: str, timeout: float | None = None, stream: bool = False) -> FakeResponse:
        self.requested.append(url)
        self.streamed.append(stream)
        outcome = self.routes.get(url, 404)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, FakeResponse):
            return outcome
        if isinstance(outcome, int):
            return FakeResponse(b"", status_code=outcome)
        return FakeResponse(outcome)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    p = tmp_path / "a.png"
    p.write_bytes(PNG_BYTES)
    return p


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    p = tmp_path / "b.svg"
    p.write_bytes(SVG_BYTES)
    return p


@pytest.fixture
def package_root(tmp_path: Path) -> Path:
    """An install root holding help/figures/logo.svg."""
    root = tmp_path / "site-packages" / "withlogo"
    figures = root / "help" / "figures"
    figures.mkdir(parents=True)
    (figures / "logo.svg").write_bytes(SVG_BYTES)
    return root


@pytest.fixture(autouse=True)
def reset_hextile_warning(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(hexwall.wall, "_hextile_warned", False)
