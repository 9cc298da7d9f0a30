"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_int, env_str
from .shared import DatabaseConfig, RedisSettings

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "RedisSettings",
    "env_bool",
    "env_float",
    "env_int",
    "env_str",
]
