# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for the Memorable client.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations and sheet date parsing
"""

from memorable.utils.datetime import (
    DateParseError,
    ensure_utc,
    format_iso,
    format_sheet_date,
    parse_sheet_date,
    utc_now,
)
from memorable.utils.logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "ensure_utc",
    "format_iso",
    "format_sheet_date",
    "parse_sheet_date",
    "DateParseError",
]
