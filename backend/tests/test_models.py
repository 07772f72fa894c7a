"""Tests for the request-scoped value types."""

from __future__ import annotations

import dataclasses

import pytest

from tile_server.models import LevelSummary, TileRequest, TilesRootSnapshot


def test_tile_request_relative_path() -> None:
    """Test the URL-style relative path used in 404 bodies."""
    tile = TileRequest(zoom="19", x="0", y="0", format="png")
    assert tile.relative_path == "19/0/0.png"


def test_tile_request_is_frozen() -> None:
    """Test that a tile request cannot be mutated."""
    tile = TileRequest(zoom="1", x="2", y="3", format="pbf")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tile.zoom = "4"  # type: ignore[misc]


def test_snapshot_to_dict() -> None:
    """Test that level keys become strings and failures become errors."""
    snapshot = TilesRootSnapshot(
        tiles_directory="/srv/tiles",
        available_levels=[3, 4],
        structure={
            3: LevelSummary(x_directories=1, sample_x_dirs=["7"]),
            4: None,
        },
    )

    assert snapshot.to_dict() == {
        "tiles_directory": "/srv/tiles",
        "available_levels": [3, 4],
        "structure": {
            "3": {"x_directories": 1, "sample_x_dirs": ["7"]},
            "4": {"error": "Cannot read directory"},
        },
    }
