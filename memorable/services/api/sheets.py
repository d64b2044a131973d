# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Sheet service: the document API used by the library and the CLI.

Worksheets live on the Memorable server and go through MemorableClient.
Test sheets and wrong-answer sheets are served from MockSheetStore until
the server grows those endpoints; their methods are async all the same so
callers do not care where a family lives.

Example:
    service = SheetService()
    documents = await service.get_documents(user_id="42")
    updated = await service.toggle_bookmark(FileType.WORKSHEET, 3)
"""

import asyncio
import logging
from typing import Any

from memorable.domains.documents.models import (
    Document,
    FileType,
    SheetDetail,
    Testsheet,
    TestsheetDetail,
    Worksheet,
    WorksheetDetail,
    Wrongsheet,
    WrongsheetDetail,
)
from memorable.domains.documents.schemas import (
    CreateWorksheetRequest,
    CreateWrongsheetRequest,
    UpdateTestsheetRequest,
    WrongsheetQuestion,
)
from memorable.services.api.client import MemorableClient, get_api_client
from memorable.services.api.exceptions import MemorableAPIError
from memorable.services.api.mock_store import MockSheetStore

logger = logging.getLogger(__name__)


class SheetService:
    """Fetches and mutates worksheets, test sheets and wrong-answer sheets.

    Attributes:
        client: HTTP client for the worksheet endpoints.
        store: In-memory backing for test and wrong-answer sheets.
    """

    def __init__(
        self,
        client: MemorableClient | None = None,
        store: MockSheetStore | None = None,
    ) -> None:
        self.client = client or get_api_client()
        self.store = store or MockSheetStore()

    # =========================================================================
    # Worksheets
    # =========================================================================

    async def get_worksheets(self, user_id: str) -> list[Worksheet]:
        """List a user's worksheets."""
        worksheets = await self.client.get_data(f"/api/worksheet/user/{user_id}", list[Worksheet])
        logger.info("Fetched %d worksheets for user %s", len(worksheets), user_id)
        return worksheets

    async def get_worksheet(self, worksheet_id: int) -> WorksheetDetail:
        """Fetch worksheet text and answers."""
        return await self.client.get_data(f"/api/worksheet/ws/{worksheet_id}", WorksheetDetail)

    async def get_most_recent_worksheet(self, user_id: str) -> WorksheetDetail:
        """Fetch the worksheet the user opened last."""
        return await self.client.get_data(f"/api/worksheet/recentDate/{user_id}", WorksheetDetail)

    async def create_worksheet(
        self,
        user_id: str,
        name: str,
        category: str,
        content: str,
    ) -> WorksheetDetail:
        """Create a worksheet from raw text."""
        body = CreateWorksheetRequest(
            user_id=user_id,
            name=name,
            category=category,
            content=content,
        )
        detail = await self.client.post_data("/api/worksheet", body, WorksheetDetail)
        logger.info("Created worksheet %d for user %s", detail.worksheet_id, user_id)
        return detail

    async def toggle_worksheet_bookmark(self, worksheet_id: int) -> Worksheet:
        """Flip a worksheet's bookmark on the server and return the new state."""
        return await self.client.update_data(
            f"/api/worksheet/{worksheet_id}",
            response_type=Worksheet,
        )

    async def update_worksheet_recent_date(self, worksheet_id: int) -> None:
        """Mark a worksheet as used just now."""
        await self.client.update_data(f"/api/worksheet/recentDate/{worksheet_id}")

    async def delete_worksheet(self, worksheet_id: int) -> None:
        """Delete a worksheet on the server."""
        await self.client.delete_data(f"/api/worksheet/{worksheet_id}")
        logger.info("Deleted worksheet %d", worksheet_id)

    # =========================================================================
    # Test sheets (mock-backed)
    # =========================================================================

    async def get_testsheets(self, user_id: str) -> list[Testsheet]:
        return self.store.list_testsheets()

    async def get_testsheet(self, testsheet_id: int) -> TestsheetDetail:
        return self.store.get_testsheet(testsheet_id)

    async def create_testsheet(self, worksheet_id: int) -> TestsheetDetail:
        return self.store.create_testsheet(worksheet_id)

    async def update_testsheet(
        self,
        testsheet_id: int,
        user_answers1: list[str],
        user_answers2: list[str],
    ) -> TestsheetDetail:
        """Submit answers for grading."""
        body = UpdateTestsheetRequest(user_answers1=user_answers1, user_answers2=user_answers2)
        return self.store.update_testsheet(testsheet_id, body.user_answers1, body.user_answers2)

    async def toggle_testsheet_bookmark(self, testsheet_id: int) -> Testsheet:
        return self.store.toggle_testsheet_bookmark(testsheet_id)

    async def delete_testsheet(self, testsheet_id: int) -> None:
        self.store.delete_testsheet(testsheet_id)

    # =========================================================================
    # Wrong-answer sheets (mock-backed)
    # =========================================================================

    async def get_wrongsheets(self, user_id: str) -> list[Wrongsheet]:
        return self.store.list_wrongsheets()

    async def get_wrongsheet(self, wrongsheet_id: int) -> WrongsheetDetail:
        return self.store.get_wrongsheet(wrongsheet_id)

    async def create_wrongsheet(
        self,
        questions: list[WrongsheetQuestion | dict[str, Any]],
    ) -> WrongsheetDetail:
        """Collect questions into a new wrong-answer sheet.

        Raises:
            pydantic.ValidationError: If no questions are given or one lacks
                ``question`` or ``answer``.
        """
        body = CreateWrongsheetRequest(questions=questions)
        return self.store.create_wrongsheet(body.questions)

    async def toggle_wrongsheet_bookmark(self, wrongsheet_id: int) -> Wrongsheet:
        return self.store.toggle_wrongsheet_bookmark(wrongsheet_id)

    async def delete_wrongsheet(self, wrongsheet_id: int) -> None:
        self.store.delete_wrongsheet(wrongsheet_id)

    # =========================================================================
    # Any document
    # =========================================================================

    async def get_documents(self, user_id: str) -> list[Document]:
        """Fetch all three families concurrently and merge them.

        The result lists worksheets, then test sheets, then wrong-answer
        sheets. If any fetch fails, the first failure in that order is
        raised and nothing is returned.

        Raises:
            MemorableAPIError: The first failing fetch's error.
        """
        results = await asyncio.gather(
            self.get_worksheets(user_id),
            self.get_testsheets(user_id),
            self.get_wrongsheets(user_id),
            return_exceptions=True,
        )

        documents: list[Document] = []
        for result in results:
            if isinstance(result, BaseException):
                logger.error("Failed to load documents for user %s: %s", user_id, str(result))
                raise result
            documents.extend(result)

        logger.info("Loaded %d documents for user %s", len(documents), user_id)
        return documents

    async def toggle_bookmark(self, file_type: FileType, sheet_id: int) -> Document:
        """Flip the bookmark of any document kind."""
        if file_type is FileType.WORKSHEET:
            return await self.toggle_worksheet_bookmark(sheet_id)
        if file_type is FileType.TESTSHEET:
            return await self.toggle_testsheet_bookmark(sheet_id)
        return await self.toggle_wrongsheet_bookmark(sheet_id)

    async def delete_document(self, file_type: FileType, sheet_id: int) -> None:
        """Delete any document kind."""
        if file_type is FileType.WORKSHEET:
            await self.delete_worksheet(sheet_id)
        elif file_type is FileType.TESTSHEET:
            await self.delete_testsheet(sheet_id)
        else:
            await self.delete_wrongsheet(sheet_id)

    async def get_detail(self, file_type: FileType, sheet_id: int) -> SheetDetail:
        """Fetch the detail behind a list item.

        Opening a worksheet also stamps its recent date; a failure there is
        logged and does not keep the worksheet from opening.
        """
        if file_type is FileType.WORKSHEET:
            detail = await self.get_worksheet(sheet_id)
            try:
                await self.update_worksheet_recent_date(sheet_id)
            except MemorableAPIError as e:
                logger.warning("Could not update recent date of worksheet %d: %s", sheet_id, e)
            return detail
        if file_type is FileType.TESTSHEET:
            return await self.get_testsheet(sheet_id)
        return await self.get_wrongsheet(sheet_id)
