"""Display formatting for byte sizes, timestamps and counts.

All functions are pure and never raise for bad values that came out of the
database; they fall back to a sentinel string instead.
"""

from __future__ import annotations

import locale
from datetime import datetime, timezone, tzinfo

UNKNOWN = "UNKNOWN"

_BYTE_UNITS = ("KB", "MB", "GB", "TB", "PB")


def format_byte_size(size: int) -> str:
    """Human readable size using binary (1024) scaling."""
    if size < 1024:
        return f"{size} bytes"
    value = size / 1024.0
    for unit in _BYTE_UNITS[:-1]:
        if value < 1024.0:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} {_BYTE_UNITS[-1]}"


def format_timestamp(epoch: int | None, tz: tzinfo | None = None) -> str:
    """Render epoch seconds as e.g. ``Wed, 13 March 2024 at 07:46:05``.

    Returns ``UNKNOWN`` when the value cannot be represented as a date.
    """
    if isinstance(epoch, bool) or not isinstance(epoch, (int, float)):
        return UNKNOWN
    try:
        dt = datetime.fromtimestamp(epoch, tz or timezone.utc)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN
    return f"{dt:%a}, {dt.day} {dt:%B %Y} at {dt:%H:%M:%S}"


def format_large_integer(value: int | str) -> str:
    """Group digits with the active locale's thousands separator.

    Sentinel strings such as ``ERROR`` are passed through unchanged.
    """
    if isinstance(value, str):
        return value
    if locale.localeconv().get("thousands_sep"):
        return locale.format_string("%d", value, grouping=True)
    return f"{value:,}"
