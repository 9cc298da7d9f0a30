"""Redis persistence layer for a push notification directory."""

from .config import ConfigurationError, DatabaseConfig
from .data_models import DeliveryPoint, PushServiceProvider
from .redis_protocol.push_store import (
    EntityDecodeError,
    InvalidIdentifierError,
    PushStore,
    ReconciliationReport,
    StoreError,
    StoreProtocolError,
    StoreUnavailableError,
)

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "DeliveryPoint",
    "EntityDecodeError",
    "InvalidIdentifierError",
    "PushServiceProvider",
    "PushStore",
    "ReconciliationReport",
    "StoreError",
    "StoreProtocolError",
    "StoreUnavailableError",
]
