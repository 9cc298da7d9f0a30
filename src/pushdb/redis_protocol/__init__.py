"""
Redis protocol package
"""

from .connection import create_redis_client
from .primitive_store import RedisPrimitiveStore
from .push_store import PushStore

__all__ = ["PushStore", "RedisPrimitiveStore", "create_redis_client"]
