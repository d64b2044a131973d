# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Document library controller.

DocumentLibrary binds the sheet service to the two list views of one user.
Server calls go first; the views only change once a call succeeds, so a
failed toggle or delete leaves what the user sees untouched.
"""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from memorable.domains.documents.listing import (
    ALL_CATEGORY,
    BookmarkListView,
    DisplayType,
    DocumentListView,
)
from memorable.domains.documents.models import Document, SheetDetail

if TYPE_CHECKING:
    from memorable.services.api.sheets import SheetService

logger = logging.getLogger(__name__)


class DocumentLibrary:
    """A user's documents, as shown by the library and bookmark screens.

    Attributes:
        service: Sheet service used for every server call.
        user_id: Owner of the documents.
        documents: Category-filtered list view.
        bookmarks: Bookmark list view.

    Example:
        library = DocumentLibrary(SheetService(), user_id="42")
        await library.refresh()
        await library.toggle_bookmark(library.documents.filtered[0])
    """

    def __init__(
        self,
        service: "SheetService",
        user_id: str,
        display_type: DisplayType = DisplayType.ALL,
    ) -> None:
        self.service = service
        self.user_id = user_id
        self.documents = DocumentListView()
        self.documents.display_type = display_type
        self.bookmarks = BookmarkListView()

    async def refresh(self) -> list[Document]:
        """Reload every document and feed both views.

        The document view keeps its display type and category; a category
        that no longer has documents falls back to ALL_CATEGORY.

        Returns:
            The merged document list.
        """
        loaded = await self.service.get_documents(self.user_id)

        category = self.documents.category
        self.documents.set_documents(loaded, category, self.documents.display_type)
        if category not in self.documents.categories:
            logger.debug("Category %s disappeared, showing all", category)
            self.documents.select_category(ALL_CATEGORY)
        self.bookmarks.set_documents(loaded)

        logger.info("Library refreshed for user %s: %d documents", self.user_id, len(loaded))
        return loaded

    async def toggle_bookmark(self, document: Document) -> Document:
        """Flip a document's bookmark and update both views."""
        updated = await self.service.toggle_bookmark(document.file_type, document.id)
        self.documents.apply_bookmark_update(updated)
        self.bookmarks.apply_bookmark_update(updated)
        logger.info(
            "Bookmark of %s %d is now %s",
            updated.file_type.value,
            updated.id,
            updated.is_bookmarked,
        )
        return updated

    async def delete_documents(self, documents: Iterable[Document]) -> int:
        """Delete documents on the server, then drop them from the views.

        Deletion stops at the first failure; documents deleted before it are
        still removed from the views before the error propagates.

        Returns:
            Number of documents deleted.
        """
        deleted: list[Document] = []
        try:
            for document in documents:
                await self.service.delete_document(document.file_type, document.id)
                deleted.append(document)
        finally:
            self.documents.remove_documents(deleted)
            self.bookmarks.remove_documents(deleted)
        return len(deleted)

    def rename_document(self, document: Document, new_name: str) -> Document:
        """Rename a document in the views.

        The server has no rename endpoint, so this is local only.

        Raises:
            ValueError: If the new name is blank.
        """
        renamed = self.documents.rename_document(document, new_name)
        self.bookmarks.replace_document(renamed)
        return renamed

    async def open_document(self, document: Document) -> SheetDetail:
        """Remember the view state and fetch the document's detail."""
        self.documents.save_state()
        return await self.service.get_detail(document.file_type, document.id)
