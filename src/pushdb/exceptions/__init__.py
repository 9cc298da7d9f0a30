"""Common exception classes for the push directory store.

All custom exceptions inherit from these base classes so callers can catch
a whole family (validation, data, store) without enumerating every type.

Exception classes support two patterns:
1. No-argument raise: raise ValidationError()
2. Contextual attributes: err = StoreError(operation="get", keys=("k",)); raise err
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all push directory errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ValidationError(ApplicationError):
    """Data validation failed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data validation failed"
        super().__init__(message, **kwargs)


class DataError(ApplicationError):
    """Data processing or parsing error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Data processing or parsing error"
        super().__init__(message, **kwargs)


class RedisError(ApplicationError):
    """Redis operation error."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Redis operation error"
        super().__init__(message, **kwargs)


from .store import StoreError, StoreProtocolError, StoreUnavailableError  # noqa: E402

__all__ = [
    "ApplicationError",
    "DataError",
    "RedisError",
    "StoreError",
    "StoreProtocolError",
    "StoreUnavailableError",
    "ValidationError",
]
