# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Documents domain: the study sheets a user keeps in their library.

This domain provides:
- Document models for worksheets, test sheets and wrong-answer sheets
- Request schemas for the Memorable API
- List-view state (category/type filtering, bookmarks, editing toggles)
- DocumentLibrary, which binds the sheet service to the list views

Usage:
    from memorable.domains.documents import DocumentLibrary
    from memorable.services.api import SheetService

    library = DocumentLibrary(SheetService(), user_id="42")
    await library.refresh()
    for document in library.documents.filtered:
        print(document.name)
"""

from memorable.domains.documents.library import DocumentLibrary
from memorable.domains.documents.listing import (
    ALL_CATEGORY,
    BookmarkListView,
    DisplayType,
    DocumentListView,
)
from memorable.domains.documents.models import (
    Document,
    FileType,
    Question,
    Testsheet,
    TestsheetDetail,
    TestsheetGrade,
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

__all__ = [
    # Enums
    "FileType",
    "DisplayType",
    "ALL_CATEGORY",
    # Models
    "Document",
    "Worksheet",
    "Testsheet",
    "Wrongsheet",
    "Question",
    "WorksheetDetail",
    "TestsheetDetail",
    "TestsheetGrade",
    "WrongsheetDetail",
    # Schemas
    "CreateWorksheetRequest",
    "UpdateTestsheetRequest",
    "CreateWrongsheetRequest",
    "WrongsheetQuestion",
    # Views
    "DocumentListView",
    "BookmarkListView",
    "DocumentLibrary",
]
