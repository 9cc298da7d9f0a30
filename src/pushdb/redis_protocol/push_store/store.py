"""
Redis-backed persistence for the push notification directory.

PushStore composes the entity repository, the subscription and assignment
indices, and maintenance operations around one shared primitive store. The
components never call each other; consistency between the indices comes from
the ordering each one applies to its own Redis commands.
"""

from typing import Dict, List, Optional, Sequence

from ...config import DatabaseConfig
from ...data_models.push_entities import DeliveryPoint, PushServiceProvider
from ..connection import create_redis_client
from ..primitive_store import RedisPrimitiveStore
from .codec import EntityCodec
from .dependencies_factory import PushStoreDependencies, PushStoreDependenciesFactory
from .maintenance import ReconciliationReport


class PushStore:
    """Directory of delivery points, push service providers and their relations."""

    def __init__(
        self,
        store: RedisPrimitiveStore,
        *,
        codec: Optional[EntityCodec] = None,
        dependencies: Optional[PushStoreDependencies] = None,
    ) -> None:
        deps = dependencies or PushStoreDependenciesFactory.create(store, codec=codec)
        self._store = deps.store
        self._entities = deps.entities
        self._subscriptions = deps.subscriptions
        self._assignments = deps.assignments
        self._maintenance = deps.maintenance

    @classmethod
    def from_config(cls, config: DatabaseConfig, *, codec: Optional[EntityCodec] = None) -> "PushStore":
        """Build a store connected to the database described by *config*.

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        settings = config.resolve()
        client = create_redis_client(settings)
        return cls(RedisPrimitiveStore(client), codec=codec)

    async def __aenter__(self) -> "PushStore":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying Redis client."""
        await self._store.close()

    async def ping(self) -> bool:
        return await self._store.ping()

    # Entities

    async def get_delivery_point(self, name: str) -> Optional[DeliveryPoint]:
        return await self._entities.get_delivery_point(name)

    async def set_delivery_point(self, delivery_point: DeliveryPoint) -> None:
        await self._entities.set_delivery_point(delivery_point)

    async def remove_delivery_point(self, name: str) -> None:
        await self._entities.remove_delivery_point(name)

    async def mget_raw_delivery_points(self, names: Sequence[str]) -> List[Optional[bytes]]:
        return await self._entities.mget_raw_delivery_points(names)

    async def get_push_service_provider(self, name: str) -> Optional[PushServiceProvider]:
        return await self._entities.get_push_service_provider(name)

    async def set_push_service_provider(self, provider: PushServiceProvider) -> None:
        await self._entities.set_push_service_provider(provider)

    async def remove_push_service_provider(self, name: str) -> None:
        await self._entities.remove_push_service_provider(name)

    # Subscriptions

    async def list_delivery_point_names(self, service: str, subscriber: str) -> Dict[str, List[str]]:
        return await self._subscriptions.list_delivery_point_names(service, subscriber)

    async def add_association(self, service: str, subscriber: str, delivery_point: str) -> bool:
        return await self._subscriptions.add_association(service, subscriber, delivery_point)

    async def remove_association(self, service: str, subscriber: str, delivery_point: str) -> bool:
        return await self._subscriptions.remove_association(service, subscriber, delivery_point)

    async def get_reference_count(self, delivery_point: str) -> int:
        return await self._subscriptions.get_reference_count(delivery_point)

    # Assignments

    async def get_assigned_psp(self, service: str, delivery_point: str) -> Optional[str]:
        return await self._assignments.get_assigned_psp(service, delivery_point)

    async def set_assigned_psp(self, service: str, delivery_point: str, psp: str) -> None:
        await self._assignments.set_assigned_psp(service, delivery_point, psp)

    async def clear_assigned_psp(self, service: str, delivery_point: str) -> None:
        await self._assignments.clear_assigned_psp(service, delivery_point)

    async def list_psp_names_for_service(self, service: str) -> List[str]:
        return await self._assignments.list_psp_names_for_service(service)

    async def add_psp_to_service(self, service: str, psp: str) -> bool:
        return await self._assignments.add_psp_to_service(service, psp)

    async def remove_psp_from_service(self, service: str, psp: str) -> bool:
        return await self._assignments.remove_psp_from_service(service, psp)

    # Maintenance

    async def flush(self) -> None:
        await self._maintenance.flush()

    async def reconcile_counters(self, *, remove_orphans: bool = False) -> ReconciliationReport:
        return await self._maintenance.reconcile_counters(remove_orphans=remove_orphans)


__all__ = ["PushStore"]
