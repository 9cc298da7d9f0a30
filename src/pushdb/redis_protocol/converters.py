from __future__ import annotations

"""Helpers for decoding raw Redis replies.

The push store talks to Redis with ``decode_responses=False`` so entity
payloads come back untouched. Names (set members, matched keys, PSP names)
are text and pass through these helpers before reaching callers.
"""

from typing import Any, Iterable, List

__all__ = ["decode_redis_value", "decode_redis_members"]


def decode_redis_value(value: Any) -> Any:
    """Normalise a Redis value into its Python representation.

    ``bytes`` are decoded as UTF-8; any other value is returned untouched so
    integers survive round-trips.
    """

    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def decode_redis_members(members: Iterable[Any] | None) -> List[str]:
    """Decode a set/list reply into a list of strings, treating ``None`` as empty."""

    if not members:
        return []
    return [str(decode_redis_value(member)) for member in members]
