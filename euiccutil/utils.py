"""Environment, string, JSON output and clock helpers."""

from __future__ import annotations

import json
import os
import re
import sys
import time
from collections.abc import Iterable
from typing import Any, NamedTuple, Optional, TextIO, Union

ENV_HTTP_DRIVER = "LPAC_HTTP"
ENV_APDU_DRIVER = "LPAC_APDU"

_NSEC_PER_SEC = 1_000_000_000
_TRUE_WORDS = frozenset({"1", "y", "on", "yes", "true"})
_FALSE_WORDS = frozenset({"0", "n", "off", "no", "false"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def http_env_name(driver: str, name: str) -> str:
    """Name of an HTTP driver's environment variable."""
    return f"{ENV_HTTP_DRIVER}_{driver}_{name}"


def apdu_env_name(driver: str, name: str) -> str:
    """Name of an APDU driver's environment variable."""
    return f"{ENV_APDU_DRIVER}_{driver}_{name}"


def custom_env_name(name: str) -> str:
    """Name of a custom environment variable."""
    return f"LPAC_CUSTOM_{name}"


def _getenv_nonempty(name: str) -> Optional[str]:
    value = os.environ.get(name)
    return value if value else None


def getenv_str_or_default(name: str, default_value: Optional[str]) -> Optional[str]:
    """Value of ``name``, or the default when unset or empty."""
    value = _getenv_nonempty(name)
    return default_value if value is None else value


def str_to_bool(value: str) -> Optional[bool]:
    """Parse a boolean word case-insensitively; None if not recognised."""
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    return None


def getenv_bool_or_default(name: str, default_value: bool) -> bool:
    """Boolean value of ``name``; warns and falls back on an invalid value."""
    value = _getenv_nonempty(name)
    if value is None:
        return default_value
    parsed = str_to_bool(value)
    if parsed is not None:
        return parsed
    print(
        f"WARNING: Invalid value '{value}' for environment variable '{name}', "
        f"falling back to default ({'true' if default_value else 'false'})",
        file=sys.stderr,
    )
    return default_value


def _parse_leading_int(value: str) -> int:
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def getenv_int_or_default(name: str, default_value: int) -> int:
    """Integer value of ``name``, parsed from its leading decimal digits.

    A set value without leading digits yields 0.
    """
    value = _getenv_nonempty(name)
    if value is None:
        return default_value
    return _parse_leading_int(value)


def getenv_or_default(name: str, default_value: Union[bool, int, str]) -> Union[bool, int, str, None]:
    """Read ``name`` as the type of ``default_value``."""
    if isinstance(default_value, bool):
        return getenv_bool_or_default(name, default_value)
    if isinstance(default_value, int):
        return getenv_int_or_default(name, default_value)
    if isinstance(default_value, str):
        return getenv_str_or_default(name, default_value)
    raise TypeError(f"unsupported default type: {type(default_value).__name__}")


def set_deprecated_env_name(name: str, deprecated_name: str) -> None:
    """Copy ``deprecated_name`` into ``name`` when only the old one is set."""
    if name in os.environ:
        return
    value = os.environ.get(deprecated_name)
    if value is None:
        return
    print(f"WARNING: Please use '{name}' instead of '{deprecated_name}'", file=sys.stderr)
    os.environ[name] = value


def json_print(kind: Optional[str], payload: Any, stream: Optional[TextIO] = None) -> None:
    """Write ``{"type": kind, "payload": payload}`` as one compact JSON line."""
    if payload is None:
        raise ValueError("payload is required")
    out = sys.stdout if stream is None else stream
    line = json.dumps({"type": kind, "payload": payload}, separators=(",", ":"), ensure_ascii=False)
    out.write(line + "\n")
    out.flush()


def ends_with(text: Optional[str], suffix: Optional[str]) -> bool:
    """True when both are given and ``text`` ends with ``suffix``."""
    if text is None or suffix is None:
        return False
    return text.endswith(suffix)


def remove_suffix(text: Optional[str], suffix: Optional[str]) -> Optional[str]:
    """``text`` without ``suffix``, or None when it does not end with it."""
    if text is None or suffix is None or not text.endswith(suffix):
        return None
    return text[: len(text) - len(suffix)]


def merge_string_lists(left: Iterable[str], right: Iterable[str]) -> list[str]:
    """New list holding the items of ``left`` followed by those of ``right``."""
    return [*left, *right]


def path_concat(a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Join two path parts with a slash; None if either is missing."""
    if a is None or b is None:
        return None
    return f"{a}/{b}"


class Timespec(NamedTuple):
    """A point or span of time in seconds and nanoseconds."""

    sec: int
    nsec: int

    @property
    def total_ns(self) -> int:
        return self.sec * _NSEC_PER_SEC + self.nsec


def get_current_clock() -> Timespec:
    """Current reading of the monotonic clock."""
    sec, nsec = divmod(time.monotonic_ns(), _NSEC_PER_SEC)
    return Timespec(sec, nsec)


def get_duration(t0: Timespec, t1: Timespec) -> Timespec:
    """Time elapsed from ``t0`` to ``t1``."""
    sec = t1.sec - t0.sec
    nsec = t1.nsec - t0.nsec
    if nsec < 0:
        sec -= 1
        nsec += _NSEC_PER_SEC
    return Timespec(sec, nsec)


def get_wall_time(start: Timespec) -> Timespec:
    """Time elapsed on the monotonic clock since ``start``."""
    return get_duration(start, get_current_clock())