"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Any, AsyncIterator

import pytest
from redis.exceptions import ResponseError

from pushdb.data_models import DeliveryPoint, PushServiceProvider
from pushdb.redis_protocol.primitive_store import RedisPrimitiveStore
from pushdb.redis_protocol.push_store import PushStore

_WRONGTYPE = "WRONGTYPE Operation against a key holding the wrong kind of value"


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, (int, float)):
        return str(value).encode()
    return str(value).encode("utf-8")


class FakeRedis:
    """In-memory Redis mock for testing.

    Mirrors a client created with ``decode_responses=False``: values, members
    and scanned keys come back as bytes. Sets that become empty disappear, as
    they do in Redis. ``fail_on`` makes the next calls of a command raise;
    ``scan_repeats`` makes SCAN yield every key that many times, as a real
    cursor may when the keyspace is rehashed mid-scan.
    """

    def __init__(self):
        self._data: dict[str, bytes] = {}
        self._sets: dict[str, set[bytes]] = {}
        self._failures: dict[str, BaseException] = {}
        self.calls: list[str] = []
        self.saved = 0
        self.closed = False
        self.scan_repeats = 1

    def fail_on(self, command: str, exc: BaseException) -> None:
        """Make every subsequent *command* call raise *exc*."""
        self._failures[command] = exc

    def clear_failures(self) -> None:
        self._failures.clear()

    def _enter(self, command: str) -> None:
        self.calls.append(command)
        if command in self._failures:
            raise self._failures[command]

    def _ensure_string_key(self, key: str) -> None:
        if key in self._sets:
            raise ResponseError(_WRONGTYPE)

    def _ensure_set_key(self, key: str) -> None:
        if key in self._data:
            raise ResponseError(_WRONGTYPE)

    async def set(self, key: str, value: Any) -> bool:
        self._enter("set")
        self._sets.pop(key, None)
        self._data[key] = _to_bytes(value)
        return True

    async def get(self, key: str) -> bytes | None:
        self._enter("get")
        self._ensure_string_key(key)
        return self._data.get(key)

    async def mget(self, keys: list[str]) -> list[bytes | None]:
        self._enter("mget")
        return [self._data.get(k) for k in keys]

    async def delete(self, *keys: str) -> int:
        self._enter("delete")
        deleted = 0
        for k in keys:
            if self._data.pop(k, None) is not None:
                deleted += 1
            if self._sets.pop(k, None) is not None:
                deleted += 1
        return deleted

    async def _incr_by(self, key: str, amount: int) -> int:
        self._ensure_string_key(key)
        try:
            current = int(self._data.get(key, b"0"))
        except ValueError as exc:
            raise ResponseError("value is not an integer or out of range") from exc
        new_val = current + amount
        self._data[key] = str(new_val).encode()
        return new_val

    async def incr(self, key: str) -> int:
        self._enter("incr")
        return await self._incr_by(key, 1)

    async def decr(self, key: str) -> int:
        self._enter("decr")
        return await self._incr_by(key, -1)

    async def sadd(self, key: str, *members: Any) -> int:
        self._enter("sadd")
        self._ensure_set_key(key)
        encoded = {_to_bytes(m) for m in members}
        existing = self._sets.setdefault(key, set())
        added = len(encoded - existing)
        existing.update(encoded)
        return added

    async def srem(self, key: str, *members: Any) -> int:
        self._enter("srem")
        self._ensure_set_key(key)
        if key not in self._sets:
            return 0
        encoded = {_to_bytes(m) for m in members}
        removed = len(encoded & self._sets[key])
        self._sets[key] -= encoded
        if not self._sets[key]:
            del self._sets[key]
        return removed

    async def smembers(self, key: str) -> set[bytes]:
        self._enter("smembers")
        self._ensure_set_key(key)
        return set(self._sets.get(key, set()))

    async def scan_iter(self, match: str | None = None, count: int | None = None) -> AsyncIterator[bytes]:
        self._enter("scan_iter")
        for key in sorted(list(self._data) + list(self._sets)):
            if match is None or fnmatchcase(key, match):
                for _ in range(self.scan_repeats):
                    yield key.encode("utf-8")

    async def save(self) -> bool:
        self._enter("save")
        self.saved += 1
        return True

    async def ping(self) -> bool:
        self._enter("ping")
        return True

    async def aclose(self) -> None:
        self.closed = True

    def dump_set(self, key: str) -> set[str]:
        """Dump contents of a set (test helper)."""
        return {m.decode() for m in self._sets.get(key, set())}

    def dump_string(self, key: str) -> bytes | None:
        """Dump contents of a string (test helper)."""
        return self._data.get(key)

    def has_key(self, key: str) -> bool:
        return key in self._data or key in self._sets


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Provide a fake Redis instance."""
    return FakeRedis()


@pytest.fixture
def primitive_store(fake_redis: FakeRedis) -> RedisPrimitiveStore:
    return RedisPrimitiveStore(fake_redis)  # type: ignore[arg-type]


@pytest.fixture
def push_store(primitive_store: RedisPrimitiveStore) -> PushStore:
    return PushStore(primitive_store)


@pytest.fixture
def make_delivery_point():
    def factory(name: str = "iphone-1", service_type: str = "apns") -> DeliveryPoint:
        return DeliveryPoint(
            name=name,
            service_type=service_type,
            fixed_data={"devtoken": f"token-{name}"},
            volatile_data={"badge": "0"},
        )

    return factory


@pytest.fixture
def make_push_service_provider():
    def factory(name: str = "gcm-cred-1", service_type: str = "gcm") -> PushServiceProvider:
        return PushServiceProvider(
            name=name,
            service_type=service_type,
            fixed_data={"projectid": "proj-1"},
            volatile_data={"apikey": "secret"},
        )

    return factory
