# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the command-line front end."""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from rich.console import Console

from memorable.__main__ import build_parser, run
from memorable.domains.documents.models import Document, FileType
from memorable.services.api.mock_store import MockSheetStore


@pytest.fixture
def console() -> Generator[Console, None, None]:
    """Replace the CLI console with a recording one."""
    recording = Console(width=120, record=True, color_system=None)
    with patch("memorable.__main__.console", recording):
        yield recording


@pytest.fixture
def documents(make_document) -> list[Document]:
    return [
        make_document(FileType.WORKSHEET, 1, "Math", is_bookmarked=True, name="Algebra"),
        make_document(FileType.WRONGSHEET, 2, "Science", age_days=1, name="Cells review"),
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


class TestParser:
    """Tests for build_parser."""

    def test_list_defaults(self) -> None:
        args = build_parser().parse_args(["list", "--user-id", "42"])

        assert args.command == "list"
        assert args.user_id == "42"
        assert args.type == "all"
        assert args.base_url is None

    def test_sheet_commands_take_kind_and_id(self) -> None:
        args = build_parser().parse_args(["--base-url", "http://x", "open", "testsheet", "3"])

        assert args.file_type == "testsheet"
        assert args.sheet_id == 3
        assert args.base_url == "http://x"

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["delete", "notebook", "1"])


class TestRun:
    """Tests for run."""

    @pytest.mark.asyncio
    async def test_list_prints_documents(self, console: Console, mock_service: MagicMock) -> None:
        args = build_parser().parse_args(["list", "--user-id", "42", "--category", "Math"])

        code = await run(args, mock_service)

        text = console.export_text()
        assert code == 0
        assert "Algebra" in text
        assert "Cells review" not in text
        mock_service.get_documents.assert_awaited_once_with("42")

    @pytest.mark.asyncio
    async def test_list_unknown_category_warns(
        self, console: Console, mock_service: MagicMock
    ) -> None:
        args = build_parser().parse_args(["list", "--user-id", "42", "--category", "Art"])

        code = await run(args, mock_service)

        text = console.export_text()
        assert code == 0
        assert "Unknown category 'Art'" in text
        assert "Cells review" in text

    @pytest.mark.asyncio
    async def test_bookmarks_filtered_by_type(
        self, console: Console, mock_service: MagicMock
    ) -> None:
        args = build_parser().parse_args(["bookmarks", "--user-id", "42", "--type", "worksheet"])

        code = await run(args, mock_service)

        text = console.export_text()
        assert code == 0
        assert "Algebra" in text

    @pytest.mark.asyncio
    async def test_missing_user_id(self, console: Console, mock_service: MagicMock) -> None:
        """Test that listing without a user id fails with exit code 2."""
        args = build_parser().parse_args(["list"])

        with patch("memorable.__main__.get_settings") as mock_settings:
            mock_settings.return_value.default_user_id = None
            code = await run(args, mock_service)

        assert code == 2
        assert "--user-id is required" in console.export_text()
        mock_service.get_documents.assert_not_called()

    @pytest.mark.asyncio
    async def test_user_id_from_settings(self, console: Console, mock_service: MagicMock) -> None:
        args = build_parser().parse_args(["list"])

        with patch("memorable.__main__.get_settings") as mock_settings:
            mock_settings.return_value.default_user_id = "7"
            code = await run(args, mock_service)

        assert code == 0
        mock_service.get_documents.assert_awaited_once_with("7")

    @pytest.mark.asyncio
    async def test_open_renders_detail(self, console: Console, mock_service: MagicMock) -> None:
        mock_service.get_detail.return_value = MockSheetStore().get_wrongsheet(1)
        args = build_parser().parse_args(["open", "wrongsheet", "1"])

        code = await run(args, mock_service)

        assert code == 0
        mock_service.get_detail.assert_awaited_once_with(FileType.WRONGSHEET, 1)
        assert "Wrongsheet 1" in console.export_text()

    @pytest.mark.asyncio
    async def test_bookmark_prints_new_state(
        self, console: Console, mock_service: MagicMock, documents: list[Document]
    ) -> None:
        mock_service.toggle_bookmark.return_value = documents[1].model_copy(
            update={"is_bookmarked": True}
        )
        args = build_parser().parse_args(["bookmark", "wrongsheet", "2"])

        code = await run(args, mock_service)

        assert code == 0
        mock_service.toggle_bookmark.assert_awaited_once_with(FileType.WRONGSHEET, 2)
        assert "★ Cells review" in console.export_text()

    @pytest.mark.asyncio
    async def test_delete(self, console: Console, mock_service: MagicMock) -> None:
        args = build_parser().parse_args(["delete", "worksheet", "1"])

        code = await run(args, mock_service)

        assert code == 0
        mock_service.delete_document.assert_awaited_once_with(FileType.WORKSHEET, 1)
        assert "Deleted" in console.export_text()

    @pytest.mark.asyncio
    async def test_bracketed_names_print_literally(
        self, console: Console, mock_service: MagicMock, documents: list[Document]
    ) -> None:
        """Test that a name or category that looks like markup does not break output."""
        mock_service.toggle_bookmark.return_value = documents[0].model_copy(
            update={"name": "notes [/b]"}
        )
        bookmark_args = build_parser().parse_args(["bookmark", "worksheet", "1"])
        list_args = build_parser().parse_args(["list", "--user-id", "42", "--category", "[/x]"])

        assert await run(bookmark_args, mock_service) == 0
        assert await run(list_args, mock_service) == 0

        text = console.export_text()
        assert "★ notes [/b]" in text
        assert "Unknown category '[/x]'" in text
