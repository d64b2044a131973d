# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for the Memorable client.

Example:
    >>> from memorable.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.api.base_url)
    'https://memorable-pard.site'
"""

from memorable.core.config.settings import (
    APISettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "Settings",
    "APISettings",
    "get_settings",
    "clear_settings_cache",
]
