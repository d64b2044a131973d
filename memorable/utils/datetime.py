# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for the Memorable client.

All datetimes handed out by this package are timezone-aware UTC.

The server is not consistent about how it serializes timestamps, so
``parse_sheet_date`` tries a fixed chain of formats:

1. ``2024-07-03T10:15:30.123456`` (local-style, up to 6 fractional digits)
2. ``2024-07-03T10:15:30`` (local-style, whole seconds)
3. ``2024-07-03T10:15:30.123Z`` / ``...+09:00`` (ISO 8601 with fractional
   seconds and an explicit zone)

Zone-less timestamps are taken as UTC.

Usage:
------
    from memorable.utils.datetime import parse_sheet_date

    created = parse_sheet_date("2024-07-03T10:15:30.123456")
"""

import re
from datetime import datetime, timezone

# Formats tried, in order, before the ISO 8601 fallback
SHEET_DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
)

_ISO_FRACTIONAL_RE = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"\.(?P<fraction>\d+)"
    r"(?P<zone>Z|[+-]\d{2}:\d{2})$"
)


class DateParseError(ValueError):
    """Raised when a date string matches none of the known formats."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Date string does not match any known format: {value}")


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        - If dt is naive, assumes UTC and adds tzinfo
        - If dt is aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def _parse_iso_fractional(value: str) -> datetime | None:
    match = _ISO_FRACTIONAL_RE.match(value)
    if match is None:
        return None

    # strptime's %f takes at most 6 digits
    fraction = match.group("fraction")[:6].ljust(6, "0")
    zone = match.group("zone")
    if zone == "Z":
        zone = "+00:00"

    try:
        return datetime.strptime(
            f"{match.group('base')}.{fraction}{zone}",
            "%Y-%m-%dT%H:%M:%S.%f%z",
        )
    except ValueError:
        return None


def parse_sheet_date(value: str) -> datetime:
    """Parse a sheet timestamp using the server's format fallback chain.

    Args:
        value: Timestamp string as returned by the server.

    Returns:
        Timezone-aware UTC datetime.

    Raises:
        DateParseError: If the string matches none of the known formats.
    """
    for fmt in SHEET_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue

    parsed = _parse_iso_fractional(value)
    if parsed is not None:
        return parsed.astimezone(timezone.utc)

    raise DateParseError(value)


def format_sheet_date(dt: datetime) -> str:
    """Format a datetime the way list cells show it (``YYYY.MM.DD``)."""
    return ensure_utc(dt).strftime("%Y.%m.%d")


def format_iso(dt: datetime | None) -> str | None:
    """Format a datetime as ISO 8601 string.

    Args:
        dt: Datetime to format.

    Returns:
        ISO 8601 formatted string or None.
    """
    if dt is None:
        return None

    return ensure_utc(dt).isoformat()
