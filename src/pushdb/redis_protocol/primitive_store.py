"""
Single-key atomic Redis primitives used by the push directory indices.

Every method issues exactly one Redis command. Failures are translated into
``StoreUnavailableError`` (transport faults) or ``StoreProtocolError`` (the
server rejected the command) carrying the operation name and the keys
involved. Nothing here retries; retry policy belongs to the caller.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from ..exceptions import StoreError, StoreProtocolError, StoreUnavailableError
from . import config
from .converters import decode_redis_members, decode_redis_value
from .error_types import REDIS_ERRORS, is_unavailable_error
from .typing import RedisClient, ensure_awaitable

logger = logging.getLogger(__name__)

StoreValue = bytes | str | int


class RedisPrimitiveStore:
    """Thin adapter exposing the atomic single-key operations of a Redis client."""

    def __init__(self, redis: RedisClient, *, scan_count: int = config.KEY_SCAN_COUNT) -> None:
        """
        Args:
            redis: Redis client created with ``decode_responses=False``
            scan_count: SCAN page size hint used by ``keys_matching``
        """
        self.redis = redis
        self._scan_count = scan_count

    @staticmethod
    def _translate(operation: str, keys: Sequence[str], exc: BaseException) -> StoreError:
        error_cls = StoreUnavailableError if is_unavailable_error(exc) else StoreProtocolError
        key_list = ", ".join(repr(k) for k in keys)
        return error_cls(f"Redis {operation} failed for {key_list or '<no keys>'}: {exc}", operation=operation, keys=keys)

    async def _execute(self, operation: str, keys: Sequence[str], command: Callable[[], Awaitable[Any]]) -> Any:
        try:
            return await ensure_awaitable(command())
        except REDIS_ERRORS as exc:
            logger.error("Redis %s failed for %s: %s", operation, list(keys), exc, exc_info=True)
            raise self._translate(operation, keys, exc) from exc

    async def get(self, key: str) -> Optional[bytes]:
        return await self._execute("GET", (key,), lambda: self.redis.get(key))

    async def mget(self, keys: Sequence[str]) -> List[Optional[bytes]]:
        """Fetch several keys at once; absent keys come back as ``None`` in input order."""
        if not keys:
            return []
        values = await self._execute("MGET", keys, lambda: self.redis.mget(list(keys)))
        return list(values)

    async def set(self, key: str, value: StoreValue) -> None:
        await self._execute("SET", (key,), lambda: self.redis.set(key, value))

    async def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return int(await self._execute("DEL", keys, lambda: self.redis.delete(*keys)))

    async def increment(self, key: str) -> int:
        return int(await self._execute("INCR", (key,), lambda: self.redis.incr(key)))

    async def decrement(self, key: str) -> int:
        return int(await self._execute("DECR", (key,), lambda: self.redis.decr(key)))

    async def set_add(self, key: str, member: str) -> bool:
        """Add *member*; True only when it was not already present."""
        added = await self._execute("SADD", (key,), lambda: self.redis.sadd(key, member))
        return int(added) > 0

    async def set_remove(self, key: str, member: str) -> bool:
        """Remove *member*; True only when it was present."""
        removed = await self._execute("SREM", (key,), lambda: self.redis.srem(key, member))
        return int(removed) > 0

    async def set_members(self, key: str) -> List[str]:
        members = await self._execute("SMEMBERS", (key,), lambda: self.redis.smembers(key))
        return decode_redis_members(members)

    async def keys_matching(self, pattern: str) -> List[str]:
        """Enumerate keys matching a glob *pattern* with SCAN.

        SCAN may return a key more than once; each key appears here once, in
        first-seen order.
        """

        async def _scan() -> List[str]:
            matched: Dict[str, None] = {}
            async for key in self.redis.scan_iter(match=pattern, count=self._scan_count):
                matched.setdefault(str(decode_redis_value(key)), None)
            return list(matched)

        return await self._execute("SCAN", (pattern,), _scan)

    async def save(self) -> None:
        """Synchronously persist the dataset to disk (Redis SAVE)."""
        await self._execute("SAVE", (), lambda: self.redis.save())

    async def ping(self) -> bool:
        return bool(await self._execute("PING", (), lambda: self.redis.ping()))

    async def close(self) -> None:
        await ensure_awaitable(self.redis.aclose())


__all__ = ["RedisPrimitiveStore", "StoreValue"]
