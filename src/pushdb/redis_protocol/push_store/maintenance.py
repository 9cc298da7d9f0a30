"""Store-wide maintenance: durability checkpoints and counter reconciliation."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..converters import decode_redis_value
from ..primitive_store import RedisPrimitiveStore
from .keys import PushKeyBuilder

logger = logging.getLogger(__name__)


@dataclass
class ReconciliationReport:
    """Outcome of a counter reconciliation pass.

    ``corrected`` maps a delivery point to ``(stored, recomputed)`` where the
    stored value is None if the counter was missing or unreadable.
    """

    subscriber_sets_scanned: int = 0
    corrected: Dict[str, Tuple[Optional[int], int]] = field(default_factory=dict)
    dropped_counters: List[str] = field(default_factory=list)
    orphaned_delivery_points: List[str] = field(default_factory=list)
    removed_orphans: bool = False

    @property
    def is_consistent(self) -> bool:
        return not (self.corrected or self.dropped_counters or self.orphaned_delivery_points)


def _parse_counter(raw: Optional[bytes]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(decode_redis_value(raw))
    except ValueError:  # policy_guard: allow-silent-handler
        return None


class StoreMaintenance:
    def __init__(self, store: RedisPrimitiveStore, *, key_builder: PushKeyBuilder) -> None:
        self._store = store
        self._keys = key_builder

    async def flush(self) -> None:
        """Ask Redis to write its dataset to disk before returning.

        Raises:
            StoreError: If the save could not be performed
        """
        await self._store.save()
        logger.info("Redis dataset flushed to disk")

    async def reconcile_counters(self, *, remove_orphans: bool = False) -> ReconciliationReport:
        """Recompute delivery point reference counts from the subscriber sets.

        Counters that disagree with the number of sets naming their delivery
        point are overwritten, and counters for delivery points no set names
        are deleted. Delivery point records no set names are reported as
        orphans and deleted only when *remove_orphans* is true.

        Writers running concurrently can move counters while the pass is in
        progress, so run it while the directory is quiet.
        """
        report = ReconciliationReport(removed_orphans=remove_orphans)

        references: Counter = Counter()
        subscriber_keys = await self._store.keys_matching(f"{self._keys.subscriber_prefix}*")
        for key in subscriber_keys:
            for member in await self._store.set_members(key):
                references[member] += 1
        report.subscriber_sets_scanned = len(subscriber_keys)

        for name, expected in references.items():
            counter_key = self._keys.delivery_point_counter(name)
            stored = _parse_counter(await self._store.get(counter_key))
            if stored != expected:
                await self._store.set(counter_key, str(expected))
                report.corrected[name] = (stored, expected)

        for counter_key in await self._store.keys_matching(f"{self._keys.counter_prefix}*"):
            name = self._keys.strip_prefix(counter_key, self._keys.counter_prefix)
            if name not in references:
                await self._store.delete(counter_key)
                report.dropped_counters.append(name)

        for record_key in await self._store.keys_matching(f"{self._keys.delivery_point_prefix}*"):
            name = self._keys.strip_prefix(record_key, self._keys.delivery_point_prefix)
            if name in references:
                continue
            report.orphaned_delivery_points.append(name)
            if remove_orphans:
                await self._store.delete(record_key)

        logger.info(
            "Reconciled counters over %s subscriber sets: %s corrected, %s dropped, %s orphaned records%s",
            report.subscriber_sets_scanned,
            len(report.corrected),
            len(report.dropped_counters),
            len(report.orphaned_delivery_points),
            " (removed)" if remove_orphans and report.orphaned_delivery_points else "",
        )
        return report


__all__ = ["ReconciliationReport", "StoreMaintenance"]
