"""Application settings and configuration management.

This module provides Pydantic-based settings management that loads
configuration from environment variables or a .env file. Settings include
the listening address, the service root holding the ``tiles`` and
``public`` directories, CORS origins, the tile cache lifetime, and the log
level.

Example:
    Settings can be accessed via the cached get_settings() function:
        >>> from tile_server.core.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.tiles_root)

    Environment variables can override defaults:
        >>> PORT=8080
        >>> SERVICE_ROOT=/srv/maps
        >>> TILES_DIR=/mnt/tiles
"""

import functools
import pathlib
from typing import Any

import pydantic
import pydantic_settings

DEFAULT_PORT = 3000


class Settings(pydantic_settings.BaseSettings):
    """Runtime configuration pulled from environment variables or defaults.

    All settings can be overridden via environment variables or .env file.
    Relative ``tiles_dir`` and ``public_dir`` values are resolved against
    ``service_root``; absolute values are used as given. The process only
    reads from these directories and never creates them.

    Attributes:
        host: Interface uvicorn binds to.
        port: Listening port. Unset, non-numeric or out-of-range values
            fall back to 3000.
        service_root: Base directory of the deployment.
        tiles_dir: Tiles root holding the ``<z>/<x>/<y>.<format>`` tree.
        public_dir: Public assets root served as static files.
        allow_origins: List of allowed CORS origins (["*"] allows all).
        cache_max_age: ``max-age`` in seconds sent with every tile.
        log_level: Minimum level for structured log output.

    Example:
        Create settings with custom values:
            >>> settings = Settings(
            ...     service_root=pathlib.Path("/srv/maps"),
            ...     port=8080,
            ... )
            >>> settings.tiles_root
            PosixPath('/srv/maps/tiles')
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    service_root: pathlib.Path = pathlib.Path(".")
    tiles_dir: pathlib.Path = pathlib.Path("tiles")
    public_dir: pathlib.Path = pathlib.Path("public")
    allow_origins: list[str] = ["*"]
    cache_max_age: int = 3600
    log_level: str = "INFO"

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @pydantic.field_validator("port", mode="before")
    @classmethod
    def _fallback_port(cls, value: Any) -> int:
        """Replace a missing or unusable port with the default."""
        try:
            port = int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 < port < 65536:
            return DEFAULT_PORT
        return port

    @property
    def tiles_root(self) -> pathlib.Path:
        """Absolute path of the tiles root."""
        return (self.service_root / self.tiles_dir).resolve()

    @property
    def public_root(self) -> pathlib.Path:
        """Absolute path of the public assets root."""
        return (self.service_root / self.public_dir).resolve()


@functools.lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables or .env file and cached
    for the lifetime of the application. Subsequent calls return the same
    cached instance.

    Returns:
        Settings instance with all configuration values populated.

    Example:
        The settings are cached, so multiple calls return the same instance:
            >>> settings1 = get_settings()
            >>> settings2 = get_settings()
            >>> assert settings1 is settings2  # Same instance
    """
    return Settings()
