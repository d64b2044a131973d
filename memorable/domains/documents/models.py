# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for the documents domain.

This module defines Pydantic models and enums for:
- Document kinds (worksheet, test sheet, wrong-answer sheet)
- List summaries sharing the Document shape
- Detail payloads returned when a document is opened

Field names are snake_case; the server's camelCase keys are declared as
aliases, so models validate server JSON and dump back to it with
``model_dump(by_alias=True)``.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from memorable.utils.datetime import ensure_utc, parse_sheet_date

TESTSHEET_DEFAULT_NAME = "나만의 시험지"


class FileType(str, Enum):
    """Document kinds shown in the library."""

    WORKSHEET = "worksheet"
    TESTSHEET = "testsheet"
    WRONGSHEET = "wrongsheet"

    @property
    def label(self) -> str:
        """Display label used in the app's filter buttons."""
        return FILE_TYPE_LABELS[self]


FILE_TYPE_LABELS: dict[FileType, str] = {
    FileType.WORKSHEET: "빈칸학습지",
    FileType.TESTSHEET: TESTSHEET_DEFAULT_NAME,
    FileType.WRONGSHEET: "오답노트",
}


def _coerce_sheet_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        return parse_sheet_date(value)
    return value


class SheetModel(BaseModel):
    """Base for every model exchanged with the server."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Document(SheetModel):
    """Shared shape of a list item.

    Numeric ids are only unique within a kind, so documents are identified
    across kinds by ``key``.

    Attributes:
        id: Server id of the sheet.
        name: Display name.
        category: Free-form subject category used by the category filter.
        is_bookmarked: Whether the sheet is in the user's bookmarks.
        created_date: Creation time, timezone-aware UTC.
    """

    file_type: ClassVar[FileType]

    id: int
    name: str
    category: str
    is_bookmarked: bool
    created_date: datetime

    @field_validator("created_date", mode="before")
    @classmethod
    def parse_created_date(cls, value: Any) -> Any:
        """Decode server timestamps through the date fallback chain."""
        return _coerce_sheet_date(value)

    @property
    def key(self) -> tuple[FileType, int]:
        """Identity of the document across all kinds."""
        return (self.file_type, self.id)


class Worksheet(Document):
    """Blank-filling worksheet summary."""

    file_type: ClassVar[FileType] = FileType.WORKSHEET

    id: int = Field(alias="worksheetId")
    is_bookmarked: bool = Field(
        alias="isBookmarked",
        validation_alias=AliasChoices("isBookmarked", "worksheetBookmark"),
    )
    created_date: datetime = Field(
        alias="createdDate",
        validation_alias=AliasChoices("createdDate", "worksheetCreateDate"),
    )


class Testsheet(Document):
    """Self-made test sheet summary."""

    __test__ = False

    file_type: ClassVar[FileType] = FileType.TESTSHEET

    id: int = Field(alias="testsheetId")
    name: str = TESTSHEET_DEFAULT_NAME
    is_bookmarked: bool = Field(alias="testsheetBookmark")
    created_date: datetime = Field(alias="testsheetCreateDate")

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, value: Any) -> Any:
        # The server sends null for unnamed test sheets
        return TESTSHEET_DEFAULT_NAME if value is None else value


class Wrongsheet(Document):
    """Wrong-answer sheet summary."""

    file_type: ClassVar[FileType] = FileType.WRONGSHEET

    id: int = Field(alias="wrongsheetId")
    is_bookmarked: bool = Field(alias="wrongsheetBookmark")
    created_date: datetime = Field(alias="wrongsheetCreate_date")


DOCUMENT_TYPES: dict[FileType, type[Document]] = {
    FileType.WORKSHEET: Worksheet,
    FileType.TESTSHEET: Testsheet,
    FileType.WRONGSHEET: Wrongsheet,
}


# =============================================================================
# Detail Models
# =============================================================================


class Question(SheetModel):
    """A single question on a test or wrong-answer sheet."""

    question_id: int = Field(alias="questionId")
    question: str
    answer: str
    user_answer: str | None = Field(default=None, alias="userAnswer")


class WorksheetDetail(SheetModel):
    """Worksheet text and answers, returned when a worksheet is opened.

    Attributes:
        worksheet_id: Server id of the worksheet.
        content: Worksheet text with the blanks.
        answers: Expected answers, one per blank.
        is_complete_all_blanks: Per-attempt flag telling whether every blank was filled.
        is_add_worksheet: Whether a second attempt was added.
        is_make_test_sheet: Whether a test sheet was generated from it.
        recent_date: Last time the worksheet was opened, if known.
    """

    worksheet_id: int = Field(alias="worksheetId")
    name: str
    category: str
    content: str = ""
    answers: list[str] = Field(default_factory=list)
    is_complete_all_blanks: list[bool] = Field(default_factory=list, alias="isCompleteAllBlanks")
    is_add_worksheet: bool = Field(default=False, alias="isAddWorksheet")
    is_make_test_sheet: bool = Field(default=False, alias="isMakeTestSheet")
    recent_date: datetime | None = Field(default=None, alias="recentDate")

    @field_validator("recent_date", mode="before")
    @classmethod
    def parse_recent_date(cls, value: Any) -> Any:
        """Decode server timestamps through the date fallback chain."""
        return _coerce_sheet_date(value)


class TestsheetDetail(SheetModel):
    """Test sheet questions and, once graded, the results.

    ``score`` holds one count of correct answers per question group;
    ``is_correct`` is per question, group 1 followed by group 2.
    """

    __test__ = False

    testsheet_id: int = Field(alias="testsheetId")
    name: str
    category: str
    re_extracted: bool = Field(
        default=False,
        alias="reExtracted",
        validation_alias=AliasChoices("reExtracted", "isReExtracted"),
    )
    is_complete_all_blanks: list[bool] = Field(default_factory=list, alias="isCompleteAllBlanks")
    questions1: list[Question] = Field(default_factory=list)
    questions2: list[Question] = Field(default_factory=list)
    score: list[int] | None = None
    is_correct: list[bool] | None = Field(default=None, alias="isCorrect")

    @property
    def questions(self) -> list[Question]:
        """Both question groups in order."""
        return [*self.questions1, *self.questions2]


class TestsheetGrade(SheetModel):
    """Grading result of a submitted test sheet."""

    __test__ = False

    score: list[int] | None = None
    is_correct: list[bool] | None = Field(default=None, alias="isCorrect")


class WrongsheetDetail(SheetModel):
    """Wrong-answer sheet with its questions."""

    wrongsheet_id: int = Field(alias="wrongsheetId")
    name: str
    category: str
    questions: list[Question] = Field(default_factory=list)


SheetDetail = WorksheetDetail | TestsheetDetail | WrongsheetDetail
