"""
Dependency factory for PushStore.

Creates the key builder, codec and the per-concern components around one
shared ``RedisPrimitiveStore`` so PushStore only has to delegate.
"""

from dataclasses import dataclass
from typing import Optional

from ..primitive_store import RedisPrimitiveStore
from .assignments import AssignmentIndex
from .codec import EntityCodec, JsonEntityCodec
from .entities import EntityRepository
from .keys import PushKeyBuilder
from .maintenance import StoreMaintenance
from .subscriptions import SubscriptionIndex


@dataclass
class PushStoreDependencies:
    """Container for all PushStore components."""

    store: RedisPrimitiveStore
    keys: PushKeyBuilder
    codec: EntityCodec
    entities: EntityRepository
    subscriptions: SubscriptionIndex
    assignments: AssignmentIndex
    maintenance: StoreMaintenance


class PushStoreDependenciesFactory:
    """Factory for creating PushStore dependencies."""

    @staticmethod
    def create(
        store: RedisPrimitiveStore,
        *,
        codec: Optional[EntityCodec] = None,
        key_builder: Optional[PushKeyBuilder] = None,
    ) -> PushStoreDependencies:
        keys = key_builder or PushKeyBuilder()
        entity_codec = codec or JsonEntityCodec()
        return PushStoreDependencies(
            store=store,
            keys=keys,
            codec=entity_codec,
            entities=EntityRepository(store, key_builder=keys, codec=entity_codec),
            subscriptions=SubscriptionIndex(store, key_builder=keys),
            assignments=AssignmentIndex(store, key_builder=keys),
            maintenance=StoreMaintenance(store, key_builder=keys),
        )
