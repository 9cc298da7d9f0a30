from __future__ import annotations

"""Connection settings for the Redis database backing the push directory."""


import logging
from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_int, env_str

logger = logging.getLogger(__name__)

SUPPORTED_ENGINE = "redis"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6379
DEFAULT_DATABASE_NAME = "0"
DEFAULT_SOCKET_TIMEOUT_SECONDS = 10.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class RedisSettings:
    host: str
    port: int
    db: int
    password: str | None
    ssl: bool
    socket_timeout: float | None
    socket_connect_timeout: float | None


@dataclass
class DatabaseConfig:
    """Raw connection parameters as supplied by the directory service.

    Blank fields fall back to the defaults of a local Redis server. The
    database ``name`` is the numeric Redis database index as a string.
    """

    engine: str = SUPPORTED_ENGINE
    host: str = ""
    port: int = 0
    password: str = ""
    name: str = ""
    ssl: bool = False
    socket_timeout: float | None = DEFAULT_SOCKET_TIMEOUT_SECONDS
    socket_connect_timeout: float | None = DEFAULT_CONNECT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        return cls(
            engine=env_str("PUSHDB_ENGINE", or_value=SUPPORTED_ENGINE) or SUPPORTED_ENGINE,
            host=env_str("REDIS_HOST", or_value="") or "",
            port=env_int("REDIS_PORT", or_value=0) or 0,
            password=env_str("REDIS_PASSWORD", or_value="", allow_blank=True) or "",
            name=env_str("REDIS_DB", or_value="") or "",
            ssl=bool(env_bool("REDIS_SSL", or_value=False)),
            socket_timeout=env_float("REDIS_SOCKET_TIMEOUT", or_value=DEFAULT_SOCKET_TIMEOUT_SECONDS),
            socket_connect_timeout=env_float(
                "REDIS_SOCKET_CONNECT_TIMEOUT", or_value=DEFAULT_CONNECT_TIMEOUT_SECONDS
            ),
        )

    def resolve(self) -> RedisSettings:
        """Validate the parameters and apply defaults.

        Raises:
            ConfigurationError: If the engine is not redis or a value is out of range
        """
        if (self.engine or "").strip().lower() != SUPPORTED_ENGINE:
            raise ConfigurationError.unsupported_engine(self.engine)

        host = self.host.strip() if self.host else ""
        if not host:
            host = DEFAULT_HOST
        port = self.port if self.port and self.port > 0 else DEFAULT_PORT

        name = self.name.strip() if self.name else ""
        if not name:
            name = DEFAULT_DATABASE_NAME
        try:
            db = int(name)
        except ValueError:  # policy_guard: allow-silent-handler
            logger.warning("Database name %r is not a Redis database index; using database 0", name)
            db = 0
        if db < 0:
            raise ConfigurationError.invalid_value("database name", name, "Redis database index must not be negative")

        for field_name in ("socket_timeout", "socket_connect_timeout"):
            value = getattr(self, field_name)
            if value is not None and value <= 0:
                raise ConfigurationError.invalid_value(field_name, value, "Timeouts must be positive")

        return RedisSettings(
            host=host,
            port=port,
            db=db,
            password=self.password or None,
            ssl=bool(self.ssl),
            socket_timeout=self.socket_timeout,
            socket_connect_timeout=self.socket_connect_timeout,
        )


__all__ = ["DatabaseConfig", "RedisSettings"]
