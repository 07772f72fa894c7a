"""Filesystem access for individual tiles.

This module maps a TileRequest onto the ``<tiles root>/<z>/<x>/<y>.<format>``
layout, picks the Content-Type for a tile format, and reads tile bytes
without blocking the event loop.

Example:
    Resolve and read a tile:
        >>> import pathlib
        >>> from tile_server.models import TileRequest
        >>> from tile_server.services import tile_store
        >>> tile = TileRequest(zoom="10", x="512", y="340", format="png")
        >>> path = tile_store.resolve_tile_path(pathlib.Path("/srv/tiles"), tile)
        >>> str(path)
        '/srv/tiles/10/512/340.png'
        >>> tile_store.content_type_for("PNG")
        'image/png'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import aiofiles

if TYPE_CHECKING:
    import pathlib

    from tile_server.models import TileRequest

CONTENT_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "pbf": "application/x-protobuf",
}

_FORMAT_RE = re.compile(r"[A-Za-z0-9]+")


def is_valid_format(fmt: str) -> bool:
    """Return True if ``fmt`` is safe to use as a file extension.

    Only ASCII letters and digits are accepted. Formats outside
    CONTENT_TYPES are still valid; they are served without a Content-Type.
    """
    return _FORMAT_RE.fullmatch(fmt) is not None


def resolve_tile_path(tiles_dir: pathlib.Path, tile: TileRequest) -> pathlib.Path:
    """Build the on-disk location of a tile.

    The path is produced whether or not the file exists. Callers must
    have validated ``tile.format`` with is_valid_format().

    Args:
        tiles_dir: Tiles root.
        tile: Requested tile.

    Returns:
        ``tiles_dir / z / x / "<y>.<format>"``.
    """
    return tiles_dir / tile.zoom / tile.x / f"{tile.y}.{tile.format}"


def tile_exists(path: pathlib.Path) -> bool:
    """Existence-only check; an unreachable path counts as absent."""
    try:
        return path.exists()
    except OSError:
        return False


def content_type_for(fmt: str) -> str | None:
    """Look up the MIME type of a tile format, ignoring case."""
    return CONTENT_TYPES.get(fmt.lower())


async def read_tile(path: pathlib.Path) -> bytes:
    """Read a whole tile file.

    Raises:
        OSError: if the file cannot be opened or read.
    """
    async with aiofiles.open(path, "rb") as f:
        return await f.read()
