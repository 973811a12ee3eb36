"""Tests for hexwall.wall — the hex_wall entry point and hextile alias."""

from __future__ import annotations

import base64
import re
import warnings
from pathlib import Path

import pytest
import requests

import hexwall
from hexwall import Diagnostics, InvalidArgumentError, MissingFileError, hex_wall, hextile

from conftest import PNG_BYTES, SVG_BYTES, FakeLocator, FakeSession

SRC_PATTERN = re.compile(r'<img src="([^"]+)"/>')


def _srcs(html: str) -> list[str]:
    return SRC_PATTERN.findall(html)


class TestArguments:
    def test_nothing_supplied(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Must provide either 'packages' or 'images' argument"):
            hex_wall()

    def test_empty_packages(self) -> None:
        with pytest.raises(InvalidArgumentError, match="packages"):
            hex_wall(packages=[])

    def test_non_string_packages(self) -> None:
        with pytest.raises(InvalidArgumentError, match="packages"):
            hex_wall(packages=[1, 2])

    def test_empty_images(self, png_file: Path) -> None:
        with pytest.raises(InvalidArgumentError, match="images"):
            hex_wall(images=[])

    def test_non_string_images(self) -> None:
        with pytest.raises(InvalidArgumentError, match="images"):
            hex_wall(images=[Path("a.png")])

    def test_bad_images_checked_before_package_lookup(self, package_root: Path) -> None:
        class CountingLocator(FakeLocator):
            calls = 0

            def is_installed(self, name: str) -> bool:
                CountingLocator.calls += 1
                return super().is_installed(name)

        with pytest.raises(InvalidArgumentError):
            hex_wall(packages=["withlogo"], images=[], locator=CountingLocator({"withlogo": package_root}))
        assert CountingLocator.calls == 0

    def test_unknown_package_only(self) -> None:
        with pytest.raises(InvalidArgumentError):
            hex_wall(packages=["nonexistent-pkg"])

    def test_unknown_package_only_with_fake_locator(self) -> None:
        with pytest.raises(InvalidArgumentError):
            hex_wall(packages=["nonexistent-pkg"], locator=FakeLocator({}))

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            hex_wall()


class TestLocalImages:
    def test_png_and_svg(self, png_file: Path, svg_file: Path) -> None:
        wall = hex_wall(images=[str(png_file), str(svg_file)])
        html = wall.render()

        assert html.count("<li>") == 2
        srcs = _srcs(html)
        assert srcs[0] == "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()
        assert srcs[1] == "data:image/svg+xml;base64," + base64.b64encode(SVG_BYTES).decode()
        assert len(wall.diagnostics) == 0

    def test_image_count_matches_input(self, tmp_path: Path) -> None:
        paths = []
        for i, ext in enumerate(["png", "jpg", "jpeg", "svg", "gif", "webp"]):
            p = tmp_path / f"img{i}.{ext}"
            p.write_bytes(PNG_BYTES)
            paths.append(str(p))
        wall = hex_wall(images=paths)
        assert len(_srcs(wall.render())) == len(paths)
        assert all(src.startswith("data:image/") for src in wall.images)

    def test_single_string_image(self, svg_file: Path) -> None:
        assert len(hex_wall(images=str(svg_file)).images) == 1

    def test_missing_file_aborts_whole_call(self, png_file: Path, tmp_path: Path) -> None:
        session = FakeSession({})
        with pytest.raises(MissingFileError):
            hex_wall(
                images=["https://example.org/logo.png", str(png_file), str(tmp_path / "nope.png")],
                session=session,
            )
        assert session.requested == []

    def test_unsupported_extension_warns_but_converts(self, tmp_path: Path) -> None:
        bmp = tmp_path / "pic.bmp"
        bmp.write_bytes(b"BM")
        wall = hex_wall(images=[str(bmp)])
        assert wall.images == ["data:image/png;base64," + base64.b64encode(b"BM").decode()]
        assert wall.diagnostics.messages == [f"File '{bmp}' may not be a supported image format"]


class TestRemoteImages:
    def test_download_failure_keeps_url(self) -> None:
        url = "https://no-such-host.invalid/logo.png"
        session = FakeSession({url: requests.ConnectionError("Failed to resolve 'no-such-host.invalid'")})

        wall = hex_wall(images=[url], session=session)

        assert _srcs(wall.render()) == [url]
        [entry] = wall.diagnostics.for_source(url)
        assert "Failed to resolve" in entry.message

    def test_malformed_url_keeps_url(self, png_file: Path) -> None:
        url = "http://[::1/a.png"
        wall = hex_wall(images=[url, str(png_file)], session=FakeSession({}))
        assert wall.images[0] == url
        assert wall.images[1].startswith("data:image/png;base64,")
        assert len(wall.diagnostics) == 1

    def test_successful_download(self) -> None:
        url = "https://example.org/figures/logo.svg"
        wall = hex_wall(images=[url], session=FakeSession({url: SVG_BYTES}))
        assert wall.images == ["data:image/svg+xml;base64,PHN2Zy8+"]

    def test_partial_failure_does_not_abort(self, png_file: Path) -> None:
        bad = "https://example.org/broken.png"
        wall = hex_wall(images=[bad, str(png_file)], session=FakeSession({bad: 500}))
        assert wall.images[0] == bad
        assert wall.images[1].startswith("data:image/png;base64,")


class TestPackages:
    def test_logos_come_before_images(self, package_root: Path, png_file: Path) -> None:
        locator = FakeLocator({"withlogo": package_root})
        wall = hex_wall(packages="withlogo", images=[str(png_file)], locator=locator)
        assert wall.images[0] == "data:image/svg+xml;base64,PHN2Zy8+"
        assert wall.images[1].startswith("data:image/png;base64,")

    def test_missing_packages_are_skipped(self, package_root: Path) -> None:
        locator = FakeLocator({"withlogo": package_root})
        wall = hex_wall(packages=["ghost", "withlogo"], locator=locator)
        assert len(wall.images) == 1
        assert wall.diagnostics.messages == ["Package 'ghost' is not installed, skipping logo search"]

    def test_missing_package_with_images(self, png_file: Path) -> None:
        wall = hex_wall(packages=["ghost"], images=[str(png_file)], locator=FakeLocator({}))
        assert len(wall.images) == 1


class TestContainer:
    def test_classes_and_attributes(self, png_file: Path) -> None:
        wall = hex_wall(images=[str(png_file)], class_=["large-hexes", "custom-theme"], id="logos")
        assert wall.render().startswith('<div class="hextile clr large-hexes custom-theme" id="logos">')

    def test_non_string_class_fails_before_download(self) -> None:
        session = FakeSession({})
        with pytest.raises(InvalidArgumentError, match="class_"):
            hex_wall(images=["https://example.org/logo.png"], class_=["ok", 1], session=session)
        assert session.requested == []

    def test_class_generator(self, png_file: Path) -> None:
        wall = hex_wall(images=[str(png_file)], class_=(c for c in ["a", "b"]))
        assert wall.class_name == "hextile clr a b"

    def test_stylesheet_dependency(self, png_file: Path) -> None:
        wall = hex_wall(images=[str(png_file)])
        assert [d.name for d in wall.dependencies] == ["hex-css"]

    def test_given_diagnostics_are_used(self, tmp_path: Path) -> None:
        bmp = tmp_path / "pic.bmp"
        bmp.write_bytes(b"BM")
        diagnostics = Diagnostics()
        wall = hex_wall(images=[str(bmp)], diagnostics=diagnostics)
        assert wall.diagnostics is diagnostics
        assert len(diagnostics) == 1


class TestHextile:
    def test_warns_and_forwards(self, png_file: Path) -> None:
        with pytest.warns(DeprecationWarning, match=r"hextile\(\) is deprecated"):
            legacy = hextile([str(png_file)], class_="old")
        assert legacy.render() == hex_wall(images=[str(png_file)], class_="old").render()

    def test_warns_only_once(self, png_file: Path) -> None:
        with pytest.warns(DeprecationWarning):
            hextile([str(png_file)])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            hextile([str(png_file)])

    def test_requires_images(self) -> None:
        with pytest.warns(DeprecationWarning), pytest.raises(InvalidArgumentError):
            hextile([])


def test_public_api() -> None:
    for name in hexwall.__all__:
        assert hasattr(hexwall, name), name
