"""Key-value store exceptions."""

from typing import Any, Sequence

from . import RedisError


class StoreError(RedisError):
    """A store command failed.

    ``operation`` names the command and ``keys`` lists the keys it touched.
    """

    def __init__(self, message: str = "", *, operation: str = "", keys: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(message, operation=operation, keys=tuple(keys), **kwargs)


class StoreUnavailableError(StoreError):
    """The store could not be reached or did not answer in time."""


class StoreProtocolError(StoreError):
    """The store answered with an error or an unexpected reply."""
