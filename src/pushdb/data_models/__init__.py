"""Push directory data models package."""

from .push_entities import DeliveryPoint, PushServiceProvider

__all__ = ["DeliveryPoint", "PushServiceProvider"]
