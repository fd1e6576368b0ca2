"""
Value formatting and the built-in template helpers.

Helpers are single-argument functions callable from a format string as
``{{ name(variable) }}``. The registry is fixed at import time; there is
no way to add helpers at runtime.

Helpers:
- lc: formatted value in lowercase
- uc: formatted value in uppercase
- duration: integer microseconds as ``M:SS`` or ``H:MM:SS``
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Final
from pctl.models.dataModel import ContextValue

Helper = Callable[[ContextValue], str | None]

MICROSECONDS: Final[int] = 1_000_000


def value_format(value: ContextValue) -> str:
    """Render a context value as text.

    String lists are joined with ", ", strings are returned as-is, and
    numbers use their natural textual form (``42``, ``0.5``).
    """
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return repr(value)
    return str(value)


def helper_lc(value: ContextValue) -> str:
    return value_format(value).lower()


def helper_uc(value: ContextValue) -> str:
    return value_format(value).upper()


def helper_duration(value: ContextValue) -> str | None:
    """Format a duration in microseconds.

    Args:
        value: Duration as an integer count of microseconds

    Returns:
        ``H:MM:SS`` when at least an hour, ``M:SS`` otherwise, or None if
        the value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return None

    sign: str = "-" if value < 0 else ""
    hours, remainder = divmod(abs(value) // MICROSECONDS, 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours:
        return f"{sign}{hours}:{minutes:02d}:{seconds:02d}"
    return f"{sign}{minutes}:{seconds:02d}"


HELPERS: Final[Mapping[str, Helper]] = MappingProxyType(
    {
        "lc": helper_lc,
        "uc": helper_uc,
        "duration": helper_duration,
    }
)
