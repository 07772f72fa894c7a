"""XYZ tile serving endpoint backed by a directory tree.

This module serves pre-rendered tiles stored as
``<tiles root>/<z>/<x>/<y>.<format>``. The route only matches when z, x and
y are all made of digits; any other path falls through to the static asset
handler. Missing tiles are a normal outcome for sparse pyramids and are
answered with a JSON 404 naming the requested tile.

Example:
    Request a raster tile:
        >>> response = client.get("/18/131072/131072.png")
        >>> response.headers["content-type"]
        'image/png'
        >>> response.headers["cache-control"]
        'public, max-age=3600'

    Request a tile that is not on disk:
        >>> client.get("/19/0/0.png").json()
        {'error': 'Tile not found', 'path': '19/0/0.png'}
"""

import fastapi
import structlog
from fastapi import responses
from starlette import convertors

from tile_server.core import config
from tile_server.models import TileRequest
from tile_server.services import tile_store

logger = structlog.get_logger(__name__)


class DigitsConvertor(convertors.Convertor):
    """Path segment of ASCII digits, passed through as a string."""

    regex = "[0-9]+"

    def convert(self, value: str) -> str:
        return value

    def to_string(self, value: str) -> str:
        return value


convertors.register_url_convertor("digits", DigitsConvertor())

router = fastapi.APIRouter(tags=["tiles"])


@router.get("/{z:digits}/{x:digits}/{y:digits}.{format}")
async def get_tile(
    z: str,
    x: str,
    y: str,
    format: str,
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> responses.Response:
    """Serve one tile file from the tiles root.

    Args:
        z: Zoom level.
        x: Tile X coordinate.
        y: Tile Y coordinate.
        format: File extension of the tile (``png``, ``jpg``, ``pbf``...).
        settings: Application settings (injected via FastAPI Depends).

    Returns:
        The tile bytes with a Content-Type taken from the format (omitted
        for formats without a known MIME type) and a public Cache-Control
        header. A JSON 404 if the tile is absent, a JSON 400 if the format
        is not alphanumeric, and a JSON 500 if the file exists but cannot
        be read.
    """
    if not tile_store.is_valid_format(format):
        return responses.JSONResponse(
            status_code=400,
            content={"error": "Invalid tile format", "format": format},
        )

    tile = TileRequest(zoom=z, x=x, y=y, format=format)
    tile_path = tile_store.resolve_tile_path(settings.tiles_root, tile)
    logger.debug("Requesting tile", tile=tile.relative_path, path=str(tile_path))

    if not tile_store.tile_exists(tile_path):
        logger.info("Tile not found", path=str(tile_path))
        return responses.JSONResponse(
            status_code=404,
            content={"error": "Tile not found", "path": tile.relative_path},
        )

    try:
        content = await tile_store.read_tile(tile_path)
    except OSError as exc:
        logger.error("Error sending file", path=str(tile_path), error=str(exc))
        return responses.JSONResponse(
            status_code=500,
            content={"error": "Error serving tile"},
        )

    return responses.Response(
        content=content,
        media_type=tile_store.content_type_for(format),
        headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
    )
