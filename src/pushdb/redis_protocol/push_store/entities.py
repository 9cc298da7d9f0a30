from __future__ import annotations

"""Whole-entity persistence for delivery points and push service providers."""

import logging
from typing import List, Optional, Sequence

from ...data_models.push_entities import DeliveryPoint, PushServiceProvider
from ..primitive_store import RedisPrimitiveStore
from .codec import EntityCodec
from .identifiers import validate_name
from .keys import PushKeyBuilder

logger = logging.getLogger(__name__)


class EntityRepository:
    """Stores and loads entity records keyed by name.

    Lookups return ``None`` for a missing or empty record. Store faults raise
    ``StoreError`` subclasses and malformed payloads raise ``EntityDecodeError``,
    so "absent" is never confused with "broken".
    """

    def __init__(
        self,
        store: RedisPrimitiveStore,
        *,
        key_builder: PushKeyBuilder,
        codec: EntityCodec,
    ) -> None:
        self._store = store
        self._keys = key_builder
        self._codec = codec

    async def get_delivery_point(self, name: str) -> Optional[DeliveryPoint]:
        payload = await self._store.get(self._keys.delivery_point(name))
        if not payload:
            return None
        return self._codec.decode_delivery_point(payload)

    async def set_delivery_point(self, delivery_point: DeliveryPoint) -> None:
        name = validate_name(delivery_point.name, kind="delivery point name")
        await self._store.set(self._keys.delivery_point(name), self._codec.encode_delivery_point(delivery_point))
        logger.debug("Stored delivery point %s", name)

    async def remove_delivery_point(self, name: str) -> None:
        await self._store.delete(self._keys.delivery_point(name))
        logger.debug("Removed delivery point %s", name)

    async def mget_raw_delivery_points(self, names: Sequence[str]) -> List[Optional[bytes]]:
        """Fetch undecoded delivery point payloads, ``None`` where a record is missing."""
        keys = [self._keys.delivery_point(name) for name in names]
        return await self._store.mget(keys)

    async def get_push_service_provider(self, name: str) -> Optional[PushServiceProvider]:
        payload = await self._store.get(self._keys.push_service_provider(name))
        if not payload:
            return None
        return self._codec.decode_push_service_provider(payload)

    async def set_push_service_provider(self, provider: PushServiceProvider) -> None:
        name = validate_name(provider.name, kind="push service provider name")
        await self._store.set(
            self._keys.push_service_provider(name),
            self._codec.encode_push_service_provider(provider),
        )
        logger.debug("Stored push service provider %s", name)

    async def remove_push_service_provider(self, name: str) -> None:
        await self._store.delete(self._keys.push_service_provider(name))
        logger.debug("Removed push service provider %s", name)


__all__ = ["EntityRepository"]
