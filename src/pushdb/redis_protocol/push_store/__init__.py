"""
Push store package.

Expose the public PushStore API while keeping internal modules private.
"""

from .codec import EntityCodec, JsonEntityCodec
from .errors import EntityDecodeError, InvalidIdentifierError, StoreError, StoreProtocolError, StoreUnavailableError
from .keys import PushKeyBuilder
from .maintenance import ReconciliationReport
from .store import PushStore

__all__ = [
    "EntityCodec",
    "EntityDecodeError",
    "InvalidIdentifierError",
    "JsonEntityCodec",
    "PushKeyBuilder",
    "PushStore",
    "ReconciliationReport",
    "StoreError",
    "StoreProtocolError",
    "StoreUnavailableError",
]
