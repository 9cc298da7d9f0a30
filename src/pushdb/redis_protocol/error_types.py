"""
Shared exception groupings for Redis protocol modules.
"""

import asyncio
from typing import Tuple, Type

from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

ExceptionTuple = Tuple[Type[BaseException], ...]

# Transport faults: the server could not be reached or did not answer in time.
REDIS_UNAVAILABLE_ERRORS: ExceptionTuple = (
    RedisConnectionError,
    RedisTimeoutError,
    asyncio.TimeoutError,
    OSError,
)

# Everything redis-py or the transport can raise from a single command.
REDIS_ERRORS: ExceptionTuple = (RedisError,) + REDIS_UNAVAILABLE_ERRORS


def is_unavailable_error(exc: BaseException) -> bool:
    """Return True when *exc* means the store could not be reached."""
    return isinstance(exc, REDIS_UNAVAILABLE_ERRORS)
