# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Memorable API access.

This package provides:
- MemorableClient: Async HTTP client for the Memorable REST API
- SheetService: Document operations across all three sheet kinds
- MockSheetStore: In-memory backing for test and wrong-answer sheets

Usage:
    from memorable.services.api import SheetService

    service = SheetService()
    documents = await service.get_documents(user_id="42")
"""

from memorable.services.api.client import MemorableClient, close_api_client, get_api_client
from memorable.services.api.exceptions import (
    APIDecodingError,
    APINetworkError,
    APIServerError,
    InvalidURLError,
    MemorableAPIError,
    SheetNotFoundError,
)
from memorable.services.api.mock_store import MockSheetStore
from memorable.services.api.sheets import SheetService

__all__ = [
    "MemorableClient",
    "get_api_client",
    "close_api_client",
    "SheetService",
    "MockSheetStore",
    "MemorableAPIError",
    "InvalidURLError",
    "APINetworkError",
    "APIServerError",
    "APIDecodingError",
    "SheetNotFoundError",
]
