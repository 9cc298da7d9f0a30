from __future__ import annotations

"""
Subscriber to delivery point associations and delivery point reference counts.

Redis offers no transaction spanning the subscriber set and the counter, so
each operation is a sequence of independent single-key commands:

* the subscriber set is authoritative for whether an association exists;
* the counter is a denormalised count of sets naming the delivery point and
  only serves to trigger deletion of the delivery point record once it drops
  to zero.

A failure part-way through is not rolled back. The error propagates after a
warning naming the keys left out of step; ``StoreMaintenance.reconcile_counters``
can rebuild the counters from the sets.
"""

import logging
from typing import Dict, List

from ...exceptions import StoreError, StoreProtocolError
from ..converters import decode_redis_value
from ..primitive_store import RedisPrimitiveStore
from .identifiers import contains_wildcard, validate_name, validate_segment
from .keys import PushKeyBuilder

logger = logging.getLogger(__name__)


class SubscriptionIndex:
    """Maintains ``srv.sub-2-dp`` sets and ``delivery.point.counter`` keys."""

    def __init__(self, store: RedisPrimitiveStore, *, key_builder: PushKeyBuilder) -> None:
        self._store = store
        self._keys = key_builder

    async def list_delivery_point_names(self, service: str, subscriber: str) -> Dict[str, List[str]]:
        """Map each matching subscriber to the delivery point names it uses.

        Either argument may contain ``*``, in which case every matching
        subscriber set is enumerated. Subscribers with an empty set are left
        out. List order follows Redis and is not stable between calls.
        """
        if not contains_wildcard(service) and not contains_wildcard(subscriber):
            members = await self._store.set_members(self._keys.subscriber_delivery_points(service, subscriber))
            return {subscriber: members} if members else {}

        pattern = self._keys.subscriber_delivery_points(service, subscriber)
        matched_keys = await self._store.keys_matching(pattern)

        grouped: Dict[str, List[str]] = {}
        for key in matched_keys:
            parsed = self._keys.parse_subscriber_key(key)
            if parsed is None:
                logger.warning("Skipping malformed subscriber key %r", key)
                continue
            members = await self._store.set_members(key)
            if not members:
                continue
            _, matched_subscriber = parsed
            grouped.setdefault(matched_subscriber, []).extend(members)
        return grouped

    async def add_association(self, service: str, subscriber: str, delivery_point: str) -> bool:
        """Associate a delivery point with a subscriber of a service.

        Returns:
            True if the association was created, False if it already existed

        Raises:
            InvalidIdentifierError: If an identifier cannot be used in a key
            StoreError: If either Redis command fails; when the set was already
                updated the counter under-counts by one
        """
        validate_segment(service, kind="service")
        validate_segment(subscriber, kind="subscriber")
        validate_name(delivery_point, kind="delivery point name")

        set_key = self._keys.subscriber_delivery_points(service, subscriber)
        if not await self._store.set_add(set_key, delivery_point):
            logger.debug("Delivery point %s already associated with %s:%s", delivery_point, service, subscriber)
            return False

        counter_key = self._keys.delivery_point_counter(delivery_point)
        try:
            count = await self._store.increment(counter_key)
        except StoreError:
            logger.warning(
                "Added %r to %s but failed to increment %s; reference count is now low by one",
                delivery_point,
                set_key,
                counter_key,
            )
            raise
        logger.debug("Associated %s with %s:%s (references=%s)", delivery_point, service, subscriber, count)
        return True

    async def remove_association(self, service: str, subscriber: str, delivery_point: str) -> bool:
        """Drop a delivery point from a subscriber, deleting it when unreferenced.

        Removing an association that does not exist changes nothing.

        Returns:
            True if an association was removed, False if there was none
        """
        validate_name(service, kind="service")
        validate_name(subscriber, kind="subscriber")
        validate_name(delivery_point, kind="delivery point name")

        set_key = self._keys.subscriber_delivery_points(service, subscriber)
        if not await self._store.set_remove(set_key, delivery_point):
            logger.debug("Delivery point %s was not associated with %s:%s", delivery_point, service, subscriber)
            return False

        counter_key = self._keys.delivery_point_counter(delivery_point)
        try:
            remaining = await self._store.decrement(counter_key)
        except StoreError:
            logger.warning(
                "Removed %r from %s but failed to decrement %s; reference count is now high by one",
                delivery_point,
                set_key,
                counter_key,
            )
            raise
        logger.debug("Dissociated %s from %s:%s (references=%s)", delivery_point, service, subscriber, remaining)

        if remaining <= 0:
            await self._delete_unreferenced(delivery_point)
        return True

    async def _delete_unreferenced(self, delivery_point: str) -> None:
        counter_key = self._keys.delivery_point_counter(delivery_point)
        record_key = self._keys.delivery_point(delivery_point)
        try:
            await self._store.delete(counter_key)
        except StoreError:
            logger.warning("Failed to delete exhausted counter %s; record %s kept", counter_key, record_key)
            raise
        try:
            deleted = await self._store.delete(record_key)
        except StoreError:
            logger.warning("Counter %s deleted but record %s remains orphaned", counter_key, record_key)
            raise
        if deleted:
            logger.info("Deleted delivery point %s: no subscriber references it", delivery_point)
        else:
            logger.debug("Delivery point %s is unreferenced and had no stored record", delivery_point)

    async def get_reference_count(self, delivery_point: str) -> int:
        """Current counter value for a delivery point; 0 when the counter is absent."""
        counter_key = self._keys.delivery_point_counter(delivery_point)
        raw = await self._store.get(counter_key)
        if raw is None:
            return 0
        try:
            return int(decode_redis_value(raw))
        except ValueError as exc:
            raise StoreProtocolError(
                f"Counter {counter_key!r} holds a non-integer value {raw!r}",
                operation="GET",
                keys=(counter_key,),
            ) from exc


__all__ = ["SubscriptionIndex"]
