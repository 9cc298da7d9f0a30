"""
Redis client construction for the push directory store.
"""

import logging
from typing import Any, Dict

import redis.asyncio

from ..config import RedisSettings
from . import config

logger = logging.getLogger(__name__)


def build_pool_kwargs(settings: RedisSettings) -> Dict[str, Any]:
    """Translate resolved settings into ``ConnectionPool`` keyword arguments."""
    pool_kwargs: Dict[str, Any] = {
        "host": settings.host,
        "port": settings.port,
        "db": settings.db,
        "max_connections": config.REDIS_CONNECTION_POOL_MAXSIZE,
        "socket_timeout": settings.socket_timeout,
        "socket_connect_timeout": settings.socket_connect_timeout,
        "socket_keepalive": config.REDIS_SOCKET_KEEPALIVE,
        # Entity payloads are opaque bytes; names are decoded explicitly.
        "decode_responses": False,
    }
    if settings.password:
        pool_kwargs["password"] = settings.password
    if settings.ssl:
        pool_kwargs["connection_class"] = redis.asyncio.SSLConnection
    return pool_kwargs


def create_redis_client(settings: RedisSettings) -> redis.asyncio.Redis:
    """Create an asyncio Redis client backed by its own connection pool.

    No connection is opened until the first command is issued.
    """
    pool = redis.asyncio.ConnectionPool(**build_pool_kwargs(settings))
    logger.info(
        "Created Redis connection pool for %s:%s db=%s (max_connections=%s)",
        settings.host,
        settings.port,
        settings.db,
        config.REDIS_CONNECTION_POOL_MAXSIZE,
    )
    return redis.asyncio.Redis(connection_pool=pool)


__all__ = ["build_pool_kwargs", "create_redis_client"]
