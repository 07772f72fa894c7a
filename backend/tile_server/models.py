"""Request-scoped value types for tile lookups and directory snapshots.

Nothing here is persisted. A TileRequest lives for the duration of one tile
request, and a TilesRootSnapshot is rebuilt from the filesystem on every
introspection request.

Example:
    Describe a tile request and its relative path:
        >>> from tile_server.models import TileRequest
        >>> tile = TileRequest(zoom="18", x="131072", y="131072", format="png")
        >>> tile.relative_path
        '18/131072/131072.png'
"""

from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(frozen=True)
class TileRequest:
    """A single tile address as received in the URL.

    Coordinates are the digit strings from the URL, unchanged, so a
    zero-padded "07" directory is looked up and reported as "07".

    Attributes:
        zoom: Zoom level (first path segment).
        x: Tile column (second path segment).
        y: Tile row (stem of the last path segment).
        format: Text after the last ``.`` of the last path segment, kept as
            received (case is preserved for the filesystem lookup).
    """

    zoom: str
    x: str
    y: str
    format: str

    @property
    def relative_path(self) -> str:
        """Path of the tile relative to the tiles root, URL style."""
        return f"{self.zoom}/{self.x}/{self.y}.{self.format}"


@dataclasses.dataclass
class LevelSummary:
    """Immediate x-directories found under one zoom level."""

    x_directories: int
    sample_x_dirs: list[str]


@dataclasses.dataclass
class TilesRootSnapshot:
    """Transient view of the tiles root used by ``/tiles-info``.

    Attributes:
        tiles_directory: Absolute path of the tiles root.
        available_levels: Zoom levels found, ascending.
        structure: Per-level summary keyed by zoom level. A level that
            could not be listed maps to ``None``.
    """

    tiles_directory: str
    available_levels: list[int]
    structure: dict[int, LevelSummary | None] = dataclasses.field(
        default_factory=dict
    )

    def to_dict(self) -> dict[str, Any]:
        """Render the snapshot as the JSON body of ``/tiles-info``."""
        structure: dict[str, dict[str, Any]] = {}
        for level, summary in self.structure.items():
            if summary is None:
                structure[str(level)] = {"error": "Cannot read directory"}
            else:
                structure[str(level)] = dataclasses.asdict(summary)
        return {
            "tiles_directory": self.tiles_directory,
            "available_levels": self.available_levels,
            "structure": structure,
        }
