from __future__ import annotations

"""Validation of names that become Redis key segments.

Service and subscriber identifiers are parsed back out of matched keys, so
they must not contain the key separator or any glob metacharacter.
Delivery point and provider names only need to be non-empty.
"""


from .. import config
from .errors import InvalidIdentifierError

_GLOB_CHARACTERS = frozenset("*?[]")
_RESERVED_CHARACTERS = _GLOB_CHARACTERS | {config.KEY_SEPARATOR}


def contains_wildcard(value: str) -> bool:
    return config.WILDCARD in value


def validate_segment(value: str, *, kind: str) -> str:
    """Return *value* unchanged if it can be embedded as a key segment."""

    if not isinstance(value, str) or not value:
        raise InvalidIdentifierError(f"{kind} must be a non-empty string", kind=kind, value=value)
    reserved = sorted(set(value) & _RESERVED_CHARACTERS)
    if reserved:
        raise InvalidIdentifierError(
            f"{kind} {value!r} contains reserved characters {''.join(reserved)!r}",
            kind=kind,
            value=value,
        )
    return value


def validate_name(value: str, *, kind: str) -> str:
    """Return *value* unchanged if it is a usable entity name."""

    if not isinstance(value, str) or not value:
        raise InvalidIdentifierError(f"{kind} must be a non-empty string", kind=kind, value=value)
    return value


__all__ = ["contains_wildcard", "validate_name", "validate_segment"]
