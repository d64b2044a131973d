# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Terminal rendering of the library views with rich."""

from memorable.presentation.tables import render_bookmarks, render_detail, render_documents

__all__ = ["render_documents", "render_bookmarks", "render_detail"]
