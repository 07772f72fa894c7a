"""Command-line entrypoint: ``python -m tile_server`` or ``tile-server``.

uvicorn installs the SIGINT/SIGTERM handlers and shuts the application
down gracefully; the lifespan hook in main logs startup and shutdown.
"""

import uvicorn

from tile_server.core import config
from tile_server.main import create_app


def main() -> None:
    """Serve the tiles and public directories on the configured port."""
    settings = config.get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
