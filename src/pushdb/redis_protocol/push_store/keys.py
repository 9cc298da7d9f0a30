"""
Key builders for the push directory.

The helpers centralise Redis key construction so the index code can focus on
behaviour and the keys remain easy to audit.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .. import config


@dataclass(frozen=True)
class PushKeyBuilder:
    """Utility responsible for building Redis keys for push directory data."""

    delivery_point_prefix: str = config.DELIVERY_POINT_PREFIX
    push_service_provider_prefix: str = config.PUSH_SERVICE_PROVIDER_PREFIX
    subscriber_prefix: str = config.SERVICE_SUBSCRIBER_TO_DELIVERY_POINTS_PREFIX
    assignment_prefix: str = config.SERVICE_DELIVERY_POINT_TO_PUSH_SERVICE_PROVIDER_PREFIX
    service_providers_prefix: str = config.SERVICE_TO_PUSH_SERVICE_PROVIDERS_PREFIX
    counter_prefix: str = config.DELIVERY_POINT_COUNTER_PREFIX
    separator: str = config.KEY_SEPARATOR

    def delivery_point(self, name: str) -> str:
        """Key for the encoded delivery point record."""
        return f"{self.delivery_point_prefix}{name}"

    def push_service_provider(self, name: str) -> str:
        """Key for the encoded push service provider record."""
        return f"{self.push_service_provider_prefix}{name}"

    def subscriber_delivery_points(self, service: str, subscriber: str) -> str:
        """Key for the set of delivery point names of a subscriber within a service.

        Either argument may be a glob pattern when the key is used for matching.
        """
        return f"{self.subscriber_prefix}{service}{self.separator}{subscriber}"

    def assigned_provider(self, service: str, delivery_point: str) -> str:
        """Key for the provider responsible for a delivery point within a service."""
        return f"{self.assignment_prefix}{service}{self.separator}{delivery_point}"

    def service_providers(self, service: str) -> str:
        """Key for the set of provider names registered to a service."""
        return f"{self.service_providers_prefix}{service}"

    def delivery_point_counter(self, name: str) -> str:
        """Key for the number of subscriptions referencing a delivery point."""
        return f"{self.counter_prefix}{name}"

    def parse_subscriber_key(self, key: str) -> Optional[Tuple[str, str]]:
        """Split a subscriber set key into ``(service, subscriber)``.

        Returns None for keys outside the subscriber namespace or without a
        separator between the two components.
        """
        if not key.startswith(self.subscriber_prefix):
            return None
        service, sep, subscriber = key[len(self.subscriber_prefix) :].partition(self.separator)
        if not sep:
            return None
        return service, subscriber

    def strip_prefix(self, key: str, prefix: str) -> str:
        return key[len(prefix) :] if key.startswith(prefix) else key
