"""
Static Redis tuning constants and the push directory key prefixes.
"""

from __future__ import annotations

REDIS_CONNECTION_POOL_MAXSIZE = 20
REDIS_SOCKET_KEEPALIVE = True
KEY_SCAN_COUNT = 1000

# STRING (prefix of) - delivery point name -> encoded delivery point
DELIVERY_POINT_PREFIX = "delivery.point:"
# STRING (prefix of) - push service provider name -> encoded provider
PUSH_SERVICE_PROVIDER_PREFIX = "push.service.provider:"
# SET (prefix of) - service + subscriber -> delivery point names
SERVICE_SUBSCRIBER_TO_DELIVERY_POINTS_PREFIX = "srv.sub-2-dp:"
# STRING (prefix of) - service + delivery point -> push service provider name
SERVICE_DELIVERY_POINT_TO_PUSH_SERVICE_PROVIDER_PREFIX = "srv.dp-2-psp:"
# SET (prefix of) - service -> push service provider names
SERVICE_TO_PUSH_SERVICE_PROVIDERS_PREFIX = "srv-2-psp:"
# STRING (prefix of) - delivery point name -> subscriptions referencing it, summed over services
DELIVERY_POINT_COUNTER_PREFIX = "delivery.point.counter:"

KEY_SEPARATOR = ":"
WILDCARD = "*"

__all__ = [
    "DELIVERY_POINT_COUNTER_PREFIX",
    "DELIVERY_POINT_PREFIX",
    "KEY_SCAN_COUNT",
    "KEY_SEPARATOR",
    "PUSH_SERVICE_PROVIDER_PREFIX",
    "REDIS_CONNECTION_POOL_MAXSIZE",
    "REDIS_SOCKET_KEEPALIVE",
    "SERVICE_DELIVERY_POINT_TO_PUSH_SERVICE_PROVIDER_PREFIX",
    "SERVICE_SUBSCRIBER_TO_DELIVERY_POINTS_PREFIX",
    "SERVICE_TO_PUSH_SERVICE_PROVIDERS_PREFIX",
    "WILDCARD",
]
