"""FastAPI application entrypoint and configuration.

This module provides the main FastAPI application factory that sets up
CORS middleware, includes the tile and introspection routers, installs the
JSON error handlers, and mounts the public assets directory as the
catch-all static handler.

Example:
    The application can be run with uvicorn:
        $ uvicorn tile_server.main:app --port 3000

    Or built programmatically with explicit settings:
        >>> from tile_server.core import config
        >>> from tile_server.main import create_app
        >>> app = create_app(config.Settings(service_root="/srv/maps"))
"""

import contextlib
from collections.abc import AsyncIterator, Callable

import fastapi
import structlog
from fastapi import responses
from fastapi.middleware import cors
from fastapi.staticfiles import StaticFiles
from starlette import exceptions as starlette_exceptions

from tile_server.api import info, tiles
from tile_server.core import config
from tile_server.core.logging_setup import configure_logging

logger = structlog.get_logger(__name__)


async def _http_error(
    request: fastapi.Request,
    exc: starlette_exceptions.HTTPException,
) -> responses.JSONResponse:
    """Render framework HTTP errors (unmatched routes, missing assets) as JSON."""
    if exc.status_code == 404:
        logger.debug("Path not found", path=request.url.path)
        content = {
            "error": "Not found",
            "message": f"Path {request.url.path} not found",
        }
    else:
        content = {"error": exc.detail}
    return responses.JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error(
    request: fastapi.Request,
    exc: Exception,
) -> responses.JSONResponse:
    """Catch-all boundary for faults raised inside handlers."""
    logger.exception("Server error", path=request.url.path)
    return responses.JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
    )


def _lifespan(
    settings: config.Settings,
) -> Callable[[fastapi.FastAPI], contextlib.AbstractAsyncContextManager[None]]:
    """Build the lifespan hook that logs the startup banner and shutdown."""

    @contextlib.asynccontextmanager
    async def lifespan(_app: fastapi.FastAPI) -> AsyncIterator[None]:
        base_url = f"http://localhost:{settings.port}"
        logger.info(
            "Tile server is running",
            url=base_url,
            tiles_directory=str(settings.tiles_root),
            tile_url=base_url + "/{z}/{x}/{y}.{format}",
            server_info=f"{base_url}/",
            tiles_info=f"{base_url}/tiles-info",
            health_check=f"{base_url}/health",
        )
        yield
        logger.info("Gracefully shutting down")

    return lifespan


def create_app(settings: config.Settings | None = None) -> fastapi.FastAPI:
    """Create and configure the FastAPI application.

    Sets up logging and CORS middleware, includes the tile and
    introspection routers, registers the JSON error handlers, and mounts
    the public assets root last so that it only sees requests no route
    matched.

    Args:
        settings: Settings to serve with. Defaults to get_settings(). When
            given, they also replace the get_settings dependency.

    Returns:
        Configured FastAPI application instance ready for ASGI server.
    """
    if settings is None:
        settings = config.get_settings()
    configure_logging(settings.log_level)

    app = fastapi.FastAPI(
        title="Local Tile Server",
        version=info.SERVICE_VERSION,
        lifespan=_lifespan(settings),
    )
    app.dependency_overrides[config.get_settings] = lambda: settings

    app.include_router(tiles.router)
    app.include_router(info.router)

    app.add_middleware(
        cors.CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(
        starlette_exceptions.HTTPException,
        _http_error,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, _unhandled_error)

    public_root = settings.public_root
    if public_root.is_dir():
        app.mount("/", StaticFiles(directory=public_root), name="public")
    else:
        logger.warning("Public assets directory not found", path=str(public_root))

    return app


app = create_app()
