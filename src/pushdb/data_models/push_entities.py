"""Delivery point and push service provider entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

__all__ = ["DeliveryPoint", "PushServiceProvider"]


@dataclass
class _PushEntity:
    name: str
    service_type: str
    fixed_data: Dict[str, str] = field(default_factory=dict)  # identity, never refreshed
    volatile_data: Dict[str, str] = field(default_factory=dict)  # tokens etc. that may be rotated


@dataclass
class DeliveryPoint(_PushEntity):
    """
    An endpoint able to receive a push through one push channel.

    ``fixed_data`` holds whatever identifies the endpoint to its channel (a
    device token, a registration id); ``volatile_data`` holds fields that the
    channel may replace over time.
    """


@dataclass
class PushServiceProvider(_PushEntity):
    """A credential set able to send through one push channel."""
