# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the unit tests:
- Sample server payloads
- Document factories
- An API client wired to httpx.MockTransport
"""

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import pytest

from memorable.core.config import APISettings, clear_settings_cache
from memorable.domains.documents.models import (
    DOCUMENT_TYPES,
    Document,
    FileType,
)
from memorable.services.api.client import MemorableClient

TEST_BASE_URL = "https://memorable.test"
BASE_TIME = datetime(2024, 7, 3, 10, 15, 30, tzinfo=timezone.utc)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires a live server)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Clear the settings cache before and after a test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def sample_user_id() -> str:
    """Provide a sample user ID for testing."""
    return "42"


@pytest.fixture
def sample_worksheets_payload() -> list[dict[str, Any]]:
    """Provide a worksheet list as the server returns it."""
    return [
        {
            "worksheetId": 1,
            "name": "Photosynthesis",
            "category": "Science",
            "isBookmarked": True,
            "createdDate": "2024-07-01T09:00:00.123456",
        },
        {
            "worksheetId": 2,
            "name": "Quadratics",
            "category": "Math",
            "isBookmarked": False,
            "createdDate": "2024-07-02T09:00:00",
        },
    ]


@pytest.fixture
def sample_worksheet_detail_payload() -> dict[str, Any]:
    """Provide a worksheet detail as the server returns it."""
    return {
        "worksheetId": 1,
        "name": "Photosynthesis",
        "category": "Science",
        "content": "Plants turn ___ into ___.",
        "answers": ["light", "sugar"],
        "isCompleteAllBlanks": [True, False],
        "isAddWorksheet": True,
        "isMakeTestSheet": False,
        "recentDate": "2024-07-03T08:00:00.5Z",
    }


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """Provide a factory for list documents of any kind.

    ``age_days`` moves the creation date back from a fixed base time.
    """

    def _make(
        file_type: FileType,
        sheet_id: int,
        category: str = "Math",
        is_bookmarked: bool = False,
        age_days: int = 0,
        name: str | None = None,
    ) -> Document:
        return DOCUMENT_TYPES[file_type](
            id=sheet_id,
            name=name or f"{file_type.value} {sheet_id}",
            category=category,
            is_bookmarked=is_bookmarked,
            created_date=BASE_TIME - timedelta(days=age_days),
        )

    return _make


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], MemorableClient]:
    """Provide a factory for clients that answer through a request handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> MemorableClient:
        return MemorableClient(
            base_url=TEST_BASE_URL,
            settings=APISettings(),
            transport=httpx.MockTransport(handler),
        )

    return _make
