"""Service introspection endpoints.

Three read-only endpoints describe the running service: ``/`` returns a
descriptor with usage hints, ``/health`` reports liveness and uptime, and
``/tiles-info`` summarizes the zoom levels and x-directories on disk. The
tiles root is listed again on every request.

Example:
    Check which zoom levels are available:
        >>> client.get("/tiles-info").json()["available_levels"]
        [17, 18, 20]
"""

import datetime
import time
from typing import Any

import fastapi

from tile_server.core import config
from tile_server.services import tile_catalog, tile_store

SERVICE_NAME = "Local Tile Server"
SERVICE_VERSION = "1.0.0"

_STARTED_AT = time.monotonic()

router = fastapi.APIRouter(tags=["info"])


def uptime_seconds() -> float:
    """Seconds elapsed since the service module was loaded."""
    return time.monotonic() - _STARTED_AT


@router.get("/")
async def service_info(
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> dict[str, Any]:
    """Describe the service, its URL template and the zoom levels on disk.

    Args:
        settings: Application settings (injected via FastAPI Depends).

    Returns:
        Service descriptor. ``available_zoom_levels`` is empty when the
        tiles root cannot be read.
    """
    base_url = f"http://localhost:{settings.port}"
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": f"Serving tiles from {settings.tiles_root}",
        "usage": {
            "tile_url": base_url + "/{z}/{x}/{y}.{format}",
            "example": f"{base_url}/18/131072/131072.png",
            "supported_formats": list(tile_store.CONTENT_TYPES),
        },
        "available_zoom_levels": tile_catalog.available_zoom_levels(
            settings.tiles_root
        ),
    }


@router.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        ``status`` "healthy", the current UTC time in ISO-8601 and the
        uptime in seconds.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.datetime.now(tz=datetime.UTC).isoformat(),
        "uptime": uptime_seconds(),
    }


@router.get("/tiles-info")
async def tiles_info(
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> dict[str, Any]:
    """Summarize the tiles root: levels found and x-directories per level."""
    return tile_catalog.snapshot(settings.tiles_root).to_dict()
