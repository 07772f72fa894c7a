"""Unit tests for tile path resolution, formats and reads in tile_store."""

from __future__ import annotations

import asyncio
import pathlib

import pytest

from tile_server.models import TileRequest
from tile_server.services import tile_store


def test_resolve_tile_path() -> None:
    """Test that the path nests zoom, x and y under the tiles root."""
    tile = TileRequest(zoom="18", x="131072", y="131073", format="png")

    path = tile_store.resolve_tile_path(pathlib.Path("/srv/tiles"), tile)

    assert path == pathlib.Path("/srv/tiles/18/131072/131073.png")


def test_resolve_tile_path_keeps_format_case() -> None:
    """Test that the on-disk extension is used exactly as requested."""
    tile = TileRequest(zoom="1", x="0", y="0", format="JPG")

    path = tile_store.resolve_tile_path(pathlib.Path("tiles"), tile)

    assert path.name == "0.JPG"


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        ("png", "image/png"),
        ("JPEG", "image/jpeg"),
        ("pbf", "application/x-protobuf"),
        ("xyz", None),
    ],
)
def test_content_type_for(fmt: str, expected: str | None) -> None:
    """Test the fixed format to MIME table."""
    assert tile_store.content_type_for(fmt) == expected


@pytest.mark.parametrize("fmt", ["png", "XYZ", "mvt2"])
def test_valid_formats(fmt: str) -> None:
    """Test that alphanumeric formats are accepted, known or not."""
    assert tile_store.is_valid_format(fmt)


@pytest.mark.parametrize(
    "fmt",
    ["", "..", "png/..", "p g", "png%00", "png\n", "\npng"],
)
def test_invalid_formats(fmt: str) -> None:
    """Test that punctuation and separators are rejected."""
    assert not tile_store.is_valid_format(fmt)


def test_read_tile(tmp_path: pathlib.Path, png_bytes: bytes) -> None:
    """Test that read_tile returns the stored bytes."""
    path = tmp_path / "0.png"
    path.write_bytes(png_bytes)

    assert asyncio.run(tile_store.read_tile(path)) == png_bytes


def test_read_tile_missing(tmp_path: pathlib.Path) -> None:
    """Test that read_tile surfaces filesystem errors as OSError."""
    with pytest.raises(OSError):
        asyncio.run(tile_store.read_tile(tmp_path / "missing.png"))


def test_tile_exists(tmp_path: pathlib.Path) -> None:
    """Test the existence-only check for files and directories."""
    (tmp_path / "0.png").write_bytes(b"")
    (tmp_path / "1.png").mkdir()

    assert tile_store.tile_exists(tmp_path / "0.png")
    assert tile_store.tile_exists(tmp_path / "1.png")
    assert not tile_store.tile_exists(tmp_path / "2.png")


def test_tile_exists_unreachable_path(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: pathlib.Path,
) -> None:
    """Test that a permission error counts as a missing tile."""

    def denied(self: pathlib.Path, *args: object, **kwargs: object) -> bool:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(pathlib.Path, "exists", denied)

    assert not tile_store.tile_exists(tmp_path / "locked" / "0.png")


def test_tile_exists_name_too_long(tmp_path: pathlib.Path) -> None:
    """Test that an over-long file name counts as a missing tile."""
    assert not tile_store.tile_exists(tmp_path / f"{'9' * 5000}.png")
