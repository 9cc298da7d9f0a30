"""
Push service provider assignments.

Two independent indices live here: the provider responsible for a delivery
point within a service (``srv.dp-2-psp``), and the set of providers
registered to a service (``srv-2-psp``). Neither is reference counted;
provider records are never deleted as a side effect of these operations.
"""

import logging
from typing import List, Optional

from ..converters import decode_redis_value
from ..primitive_store import RedisPrimitiveStore
from .identifiers import validate_name, validate_segment
from .keys import PushKeyBuilder

logger = logging.getLogger(__name__)


class AssignmentIndex:
    def __init__(self, store: RedisPrimitiveStore, *, key_builder: PushKeyBuilder) -> None:
        self._store = store
        self._keys = key_builder

    async def get_assigned_psp(self, service: str, delivery_point: str) -> Optional[str]:
        """Name of the provider serving *delivery_point* in *service*, or None."""
        raw = await self._store.get(self._keys.assigned_provider(service, delivery_point))
        if not raw:
            return None
        return str(decode_redis_value(raw))

    async def set_assigned_psp(self, service: str, delivery_point: str, psp: str) -> None:
        validate_segment(service, kind="service")
        validate_name(delivery_point, kind="delivery point name")
        validate_name(psp, kind="push service provider name")
        await self._store.set(self._keys.assigned_provider(service, delivery_point), psp)
        logger.debug("Assigned %s to %s:%s", psp, service, delivery_point)

    async def clear_assigned_psp(self, service: str, delivery_point: str) -> None:
        await self._store.delete(self._keys.assigned_provider(service, delivery_point))
        logger.debug("Cleared provider assignment of %s:%s", service, delivery_point)

    async def list_psp_names_for_service(self, service: str) -> List[str]:
        """Providers registered to *service*; empty when there are none."""
        return await self._store.set_members(self._keys.service_providers(service))

    async def add_psp_to_service(self, service: str, psp: str) -> bool:
        validate_segment(service, kind="service")
        validate_name(psp, kind="push service provider name")
        added = await self._store.set_add(self._keys.service_providers(service), psp)
        logger.debug("Registered %s to service %s (new=%s)", psp, service, added)
        return added

    async def remove_psp_from_service(self, service: str, psp: str) -> bool:
        removed = await self._store.set_remove(self._keys.service_providers(service), psp)
        logger.debug("Unregistered %s from service %s (present=%s)", psp, service, removed)
        return removed


__all__ = ["AssignmentIndex"]
