from __future__ import annotations

"""Environment lookups used by DatabaseConfig.from_env and setup_logging.

Unset and blank variables fall back to the caller's default; set but
malformed ones raise ConfigurationError naming the variable.
"""


import os
from typing import Callable, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")

_BOOL_WORDS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def env_str(name: str, or_value: str | None = None, *, allow_blank: bool = False) -> str | None:
    """Stripped value of *name*; blank counts as unset unless *allow_blank*."""

    raw = os.getenv(name)
    if raw is None:
        return or_value
    value = raw.strip()
    if not value and not allow_blank:
        return or_value
    return value


def _env_parsed(name: str, or_value: T | None, parse: Callable[[str], T], expected: str) -> T | None:
    raw = env_str(name)
    if raw is None:
        return or_value
    try:
        return parse(raw)
    except ValueError as exc:
        raise ConfigurationError.invalid_format(f"pushdb setting {name}", raw, expected) from exc


def _parse_bool(raw: str) -> bool:
    try:
        return _BOOL_WORDS[raw.lower()]
    except KeyError as exc:
        raise ValueError(raw) from exc


def env_int(name: str, or_value: int | None = None) -> int | None:
    return _env_parsed(name, or_value, int, "an integer")


def env_float(name: str, or_value: float | None = None) -> float | None:
    return _env_parsed(name, or_value, float, "a number of seconds")


def env_bool(name: str, or_value: bool | None = None) -> bool | None:
    return _env_parsed(name, or_value, _parse_bool, "one of " + "/".join(sorted(_BOOL_WORDS)))


__all__ = ["env_bool", "env_float", "env_int", "env_str"]
