"""Enumeration of the tiles root for the introspection endpoints.

Zoom levels are the immediate subdirectories of the tiles root whose names
parse as integers; x buckets are the immediate subdirectories of a zoom
level. Nothing is cached: every call lists the directories again, so a new
zoom level shows up on the next request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from tile_server.models import LevelSummary, TilesRootSnapshot

if TYPE_CHECKING:
    import pathlib

logger = structlog.get_logger(__name__)


def _parse_level(name: str) -> int | None:
    try:
        return int(name)
    except ValueError:
        return None


def _subdirectory_names(directory: pathlib.Path) -> list[str]:
    return sorted(entry.name for entry in directory.iterdir() if entry.is_dir())


def available_zoom_levels(tiles_dir: pathlib.Path) -> list[int]:
    """List the zoom levels present under the tiles root.

    Args:
        tiles_dir: Tiles root.

    Returns:
        Integer directory names, ascending. Entries that are not
        directories or whose names are not integers are skipped. An
        unreadable or missing root yields an empty list.
    """
    try:
        names = _subdirectory_names(tiles_dir)
    except OSError as exc:
        logger.warning(
            "Error reading tiles directory", path=str(tiles_dir), error=str(exc)
        )
        return []

    levels = [level for level in map(_parse_level, names) if level is not None]
    return sorted(levels)


def summarize_level(level_dir: pathlib.Path) -> LevelSummary:
    """Count the x directories of one zoom level.

    Raises:
        OSError: if the level directory cannot be listed.
    """
    x_dirs = _subdirectory_names(level_dir)
    return LevelSummary(x_directories=len(x_dirs), sample_x_dirs=x_dirs)


def snapshot(tiles_dir: pathlib.Path) -> TilesRootSnapshot:
    """Describe the tiles root and each of its zoom levels.

    A level whose directory cannot be listed is recorded as ``None`` in
    the structure so the rest of the snapshot is still returned.
    """
    levels = available_zoom_levels(tiles_dir)
    result = TilesRootSnapshot(
        tiles_directory=str(tiles_dir),
        available_levels=levels,
    )
    for level in levels:
        # "07" parses as 7 and is then looked up as "7".
        level_dir = tiles_dir / str(level)
        try:
            result.structure[level] = summarize_level(level_dir)
        except OSError as exc:
            logger.warning(
                "Cannot read zoom level directory",
                level=level,
                path=str(level_dir),
                error=str(exc),
            )
            result.structure[level] = None
    return result
