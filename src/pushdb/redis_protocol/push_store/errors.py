"""Shared exception types for the push store package."""

from ...exceptions import DataError, StoreError, StoreProtocolError, StoreUnavailableError, ValidationError


class InvalidIdentifierError(ValidationError):
    """A service, subscriber or entity name cannot be used as a key segment."""


class EntityDecodeError(DataError):
    """A stored payload could not be decoded into an entity."""


__all__ = [
    "EntityDecodeError",
    "InvalidIdentifierError",
    "StoreError",
    "StoreProtocolError",
    "StoreUnavailableError",
]
