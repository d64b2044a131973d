# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the document library controller."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from memorable.domains.documents.library import DocumentLibrary
from memorable.domains.documents.listing import ALL_CATEGORY, DisplayType
from memorable.domains.documents.models import Document, FileType
from memorable.services.api.exceptions import APIServerError


@pytest.fixture
def documents(make_document) -> list[Document]:
    """A small mixed library."""
    return [
        make_document(FileType.WORKSHEET, 1, "Math", is_bookmarked=True, age_days=2),
        make_document(FileType.TESTSHEET, 1, "Science", age_days=1),
        make_document(FileType.WRONGSHEET, 1, "Math", is_bookmarked=True, age_days=0),
    ]


@pytest.fixture
def mock_service(documents: list[Document]) -> MagicMock:
    """Create a mock sheet service."""
    service = MagicMock()
    service.get_documents = AsyncMock(return_value=documents)
    service.toggle_bookmark = AsyncMock()
    service.delete_document = AsyncMock(return_value=None)
    service.get_detail = AsyncMock()
    return service


class TestRefresh:
    """Tests for DocumentLibrary.refresh."""

    @pytest.mark.asyncio
    async def test_feeds_both_views(self, mock_service: MagicMock) -> None:
        library = DocumentLibrary(mock_service, "42")

        loaded = await library.refresh()

        mock_service.get_documents.assert_awaited_once_with("42")
        assert len(loaded) == 3
        assert len(library.documents.filtered) == 3
        assert [d.key for d in library.bookmarks.documents] == [
            (FileType.WRONGSHEET, 1),
            (FileType.WORKSHEET, 1),
        ]

    @pytest.mark.asyncio
    async def test_keeps_display_type_and_category(self, mock_service: MagicMock) -> None:
        library = DocumentLibrary(mock_service, "42", DisplayType.WORKSHEET)
        await library.refresh()
        library.documents.select_category("Math")

        await library.refresh()

        assert library.documents.display_type is DisplayType.WORKSHEET
        assert library.documents.category == "Math"
        assert [d.key for d in library.documents.filtered] == [(FileType.WORKSHEET, 1)]

    @pytest.mark.asyncio
    async def test_vanished_category_falls_back_to_all(
        self, mock_service: MagicMock, documents: list[Document]
    ) -> None:
        """Test that a category with no documents left resets the filter."""
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        library.documents.select_category("Science")
        mock_service.get_documents.return_value = [documents[0], documents[2]]

        await library.refresh()

        assert library.documents.category == ALL_CATEGORY
        assert len(library.documents.filtered) == 2

    @pytest.mark.asyncio
    async def test_failure_leaves_views_untouched(self, mock_service: MagicMock) -> None:
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        mock_service.get_documents.side_effect = APIServerError(status_code=500)

        with pytest.raises(APIServerError):
            await library.refresh()

        assert len(library.documents.documents) == 3


class TestToggleBookmark:
    """Tests for DocumentLibrary.toggle_bookmark."""

    @pytest.mark.asyncio
    async def test_updates_both_views(self, mock_service: MagicMock) -> None:
        """Test that the toggled document is swapped into both views."""
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        target = library.bookmarks.documents[0]
        mock_service.toggle_bookmark.return_value = target.model_copy(
            update={"is_bookmarked": False}
        )

        updated = await library.toggle_bookmark(target)

        mock_service.toggle_bookmark.assert_awaited_once_with(FileType.WRONGSHEET, 1)
        assert updated.is_bookmarked is False
        assert next(
            d for d in library.documents.documents if d.key == target.key
        ).is_bookmarked is False
        assert library.bookmarks.documents[0].is_bookmarked is False

    @pytest.mark.asyncio
    async def test_failed_toggle_changes_nothing(self, mock_service: MagicMock) -> None:
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        target = library.documents.filtered[0]
        mock_service.toggle_bookmark.side_effect = APIServerError(status_code=500)

        with pytest.raises(APIServerError):
            await library.toggle_bookmark(target)

        assert library.documents.filtered[0].is_bookmarked == target.is_bookmarked


class TestDeleteDocuments:
    """Tests for DocumentLibrary.delete_documents."""

    @pytest.mark.asyncio
    async def test_removes_from_both_views(
        self, mock_service: MagicMock, documents: list[Document]
    ) -> None:
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()

        count = await library.delete_documents([documents[0], documents[1]])

        assert count == 2
        assert mock_service.delete_document.await_count == 2
        assert [d.key for d in library.documents.documents] == [(FileType.WRONGSHEET, 1)]
        assert [d.key for d in library.bookmarks.documents] == [(FileType.WRONGSHEET, 1)]

    @pytest.mark.asyncio
    async def test_partial_failure_removes_deleted_only(
        self, mock_service: MagicMock, documents: list[Document]
    ) -> None:
        """Test that documents deleted before a failure still leave the views."""
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        mock_service.delete_document.side_effect = [None, APIServerError(status_code=500)]

        with pytest.raises(APIServerError):
            await library.delete_documents(documents)

        remaining = [d.key for d in library.documents.documents]
        assert (FileType.WORKSHEET, 1) not in remaining
        assert len(remaining) == 2


class TestOpenAndRename:
    """Tests for opening and renaming."""

    @pytest.mark.asyncio
    async def test_open_saves_state(self, mock_service: MagicMock) -> None:
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        library.documents.select_category("Math")
        target = library.documents.filtered[0]

        await library.open_document(target)
        library.documents.reset_category()

        mock_service.get_detail.assert_awaited_once_with(target.file_type, target.id)
        assert library.documents.restore_state() is True
        assert library.documents.category == "Math"

    @pytest.mark.asyncio
    async def test_rename_is_local(self, mock_service: MagicMock) -> None:
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        target = library.documents.filtered[0]

        renamed = library.rename_document(target, "New name")

        assert renamed.name == "New name"
        assert library.documents.filtered[0].name == "New name"
        mock_service.toggle_bookmark.assert_not_called()
        mock_service.delete_document.assert_not_called()

    @pytest.mark.asyncio
    async def test_rename_reaches_bookmarks(self, mock_service: MagicMock) -> None:
        """Test that a renamed bookmarked document shows its new name in both views."""
        library = DocumentLibrary(mock_service, "42")
        await library.refresh()
        library.bookmarks.filter_by(DisplayType.WORKSHEET)
        target = library.bookmarks.filtered[0]

        library.rename_document(target, "Renamed")

        assert library.bookmarks.filtered[0].name == "Renamed"
        renamed = [d for d in library.bookmarks.documents if d.key == target.key]
        assert [d.name for d in renamed] == ["Renamed"]
        assert len(library.bookmarks.documents) == 2
