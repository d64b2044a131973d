# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""List-view state for the document library.

These classes hold what a list screen shows, without any UI toolkit:
- DocumentListView: every document of one display type, filtered by category
- BookmarkListView: bookmarked documents, filtered by kind

Both keep a full list and a filtered (visible) list. Mutations such as a
bookmark toggle or a rename are applied to both by document ``key``, since
numeric ids repeat across kinds.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from memorable.domains.documents.models import Document, FileType

logger = logging.getLogger(__name__)

ALL_CATEGORY = "전체보기"


class DisplayType(str, Enum):
    """Which document kinds a list shows."""

    ALL = "all"
    WORKSHEET = "worksheet"
    TESTSHEET = "testsheet"
    WRONGSHEET = "wrongsheet"

    @property
    def file_type(self) -> FileType | None:
        """The kind this display type selects, or None for ALL."""
        if self is DisplayType.ALL:
            return None
        return FileType(self.value)

    def matches(self, document: Document) -> bool:
        """Check whether a document is shown under this display type."""
        return self is DisplayType.ALL or document.file_type is self.file_type


def newest_first(documents: Iterable[Document]) -> list[Document]:
    """Sort documents by creation date, newest first, keeping ties in order."""
    return sorted(documents, key=lambda document: document.created_date, reverse=True)


def _replace_by_key(documents: list[Document], document: Document) -> bool:
    for index, existing in enumerate(documents):
        if existing.key == document.key:
            documents[index] = document
            return True
    return False


class DocumentListView:
    """Category-filtered document list with editing state.

    Attributes:
        category: Selected category, ALL_CATEGORY for no filter.
        display_type: Kinds of document shown.
        is_editing: Whether rows are selectable for delete/rename.
        is_modifying: Whether editing is a rename, which allows one selected row.

    Example:
        view = DocumentListView()
        view.set_documents(documents, display_type=DisplayType.WORKSHEET)
        view.select_category("Math")
        for document in view.filtered:
            print(document.name)
    """

    def __init__(self) -> None:
        self.category = ALL_CATEGORY
        self.display_type = DisplayType.ALL
        self.is_editing = False
        self.is_modifying = False
        self._source: list[Document] = []
        self._documents: list[Document] = []
        self._filtered: list[Document] = []
        self._categories: list[str] = [ALL_CATEGORY]
        self._selected: list[tuple[FileType, int]] = []
        self._saved_state: tuple[DisplayType, str] | None = None

    @property
    def documents(self) -> list[Document]:
        """Every document of the current display type, newest first."""
        return list(self._documents)

    @property
    def filtered(self) -> list[Document]:
        """Documents visible under the current category."""
        return list(self._filtered)

    @property
    def categories(self) -> list[str]:
        """ALL_CATEGORY followed by the documents' categories in sorted order."""
        return list(self._categories)

    def set_documents(
        self,
        documents: Iterable[Document],
        category: str = ALL_CATEGORY,
        display_type: DisplayType = DisplayType.ALL,
    ) -> None:
        """Replace the list contents.

        Args:
            documents: Documents of any kind.
            category: Category to filter by.
            display_type: Kinds to keep.
        """
        self._source = list(documents)
        self.display_type = display_type
        self._documents = newest_first(d for d in self._source if display_type.matches(d))
        found = {d.category for d in self._documents} - {ALL_CATEGORY}
        self._categories = [ALL_CATEGORY, *sorted(found)]
        self.category = category
        self._apply_filter()

    def set_display_type(self, display_type: DisplayType) -> None:
        """Switch kinds, keeping the selected category."""
        self.set_documents(self._source, self.category, display_type)

    def _apply_filter(self) -> None:
        if self.category == ALL_CATEGORY:
            self._filtered = list(self._documents)
        else:
            self._filtered = [d for d in self._documents if d.category == self.category]

    def select_category(self, category: str) -> bool:
        """Filter by a category.

        Returns:
            False, leaving the filter unchanged, if the category is not listed.
        """
        if category not in self._categories:
            logger.debug("Ignoring unknown category: %s", category)
            return False
        self.category = category
        self._apply_filter()
        return True

    def reset_category(self) -> None:
        """Show every category."""
        self.select_category(ALL_CATEGORY)

    def save_state(self) -> None:
        """Remember display type and category, e.g. before opening a document."""
        self._saved_state = (self.display_type, self.category)

    def restore_state(self) -> bool:
        """Reapply the state remembered by save_state().

        Returns:
            False if nothing was saved.
        """
        if self._saved_state is None:
            return False
        display_type, category = self._saved_state
        self.set_documents(self._source, category, display_type)
        return True

    def apply_bookmark_update(self, document: Document) -> bool:
        """Swap in a document returned by a bookmark toggle.

        Returns:
            True if a document with the same key was listed.
        """
        _replace_by_key(self._source, document)
        _replace_by_key(self._filtered, document)
        return _replace_by_key(self._documents, document)

    def remove_documents(self, documents: Iterable[Document]) -> int:
        """Drop documents from every list.

        Returns:
            Number of documents removed from the displayed list.
        """
        keys = {d.key for d in documents}
        before = len(self._documents)
        self._source = [d for d in self._source if d.key not in keys]
        self._documents = [d for d in self._documents if d.key not in keys]
        self._filtered = [d for d in self._filtered if d.key not in keys]
        self._selected = [key for key in self._selected if key not in keys]
        return before - len(self._documents)

    def rename_document(self, document: Document, new_name: str) -> Document:
        """Rename a listed document.

        Args:
            document: Document to rename.
            new_name: New display name; surrounding whitespace is dropped.

        Returns:
            The renamed copy now held by the lists.

        Raises:
            ValueError: If the new name is blank.
            KeyError: If the document is not listed.
        """
        name = new_name.strip()
        if not name:
            raise ValueError("New file name must not be empty")

        renamed = document.model_copy(update={"name": name})
        if not _replace_by_key(self._documents, renamed):
            raise KeyError(document.key)
        _replace_by_key(self._source, renamed)
        _replace_by_key(self._filtered, renamed)
        return renamed

    # =========================================================================
    # Editing state
    # =========================================================================

    def toggle_editing(self) -> bool:
        """Enter or leave editing mode.

        Leaving editing mode also ends modifying mode and clears the selection.

        Returns:
            The new editing state.
        """
        self.is_editing = not self.is_editing
        if not self.is_editing:
            self.is_modifying = False
            self._selected.clear()
        return self.is_editing

    def begin_modifying(self) -> None:
        """Enter rename mode, where at most one row is selected."""
        self.is_editing = True
        self.is_modifying = True
        del self._selected[1:]

    def select(self, document: Document) -> None:
        """Select a row while editing; in rename mode it replaces the selection."""
        if not self.is_editing:
            return
        if self.is_modifying:
            self._selected = [document.key]
        elif document.key not in self._selected:
            self._selected.append(document.key)

    def deselect(self, document: Document) -> None:
        if document.key in self._selected:
            self._selected.remove(document.key)

    @property
    def selected_documents(self) -> list[Document]:
        """Selected documents in selection order."""
        by_key = {d.key: d for d in self._filtered}
        return [by_key[key] for key in self._selected if key in by_key]


class BookmarkListView:
    """Bookmarked documents, filterable by kind.

    A document whose bookmark is toggled off stays listed (with its new
    state) until the next set_documents().
    """

    def __init__(self) -> None:
        self.display_type = DisplayType.ALL
        self._documents: list[Document] = []
        self._filtered: list[Document] = []

    @property
    def documents(self) -> list[Document]:
        return list(self._documents)

    @property
    def filtered(self) -> list[Document]:
        return list(self._filtered)

    def set_documents(self, documents: Iterable[Document]) -> None:
        """Keep the bookmarked documents, newest first, and show all kinds."""
        self._documents = newest_first(d for d in documents if d.is_bookmarked)
        self.display_type = DisplayType.ALL
        self._filtered = list(self._documents)

    def filter_by(self, display_type: DisplayType) -> None:
        """Show only one kind, or every kind for DisplayType.ALL."""
        self.display_type = display_type
        self._filtered = [d for d in self._documents if display_type.matches(d)]

    def apply_bookmark_update(self, document: Document) -> bool:
        """Swap in a document returned by a bookmark toggle.

        Returns:
            True if a document with the same key was listed.
        """
        _replace_by_key(self._filtered, document)
        return _replace_by_key(self._documents, document)

    def replace_document(self, document: Document) -> bool:
        """Swap in an edited copy of a listed document, such as a renamed one.

        Returns:
            True if a document with the same key was listed.
        """
        return self.apply_bookmark_update(document)

    def remove_documents(self, documents: Iterable[Document]) -> int:
        """Drop documents from both lists.

        Returns:
            Number of documents removed from the full list.
        """
        keys = {d.key for d in documents}
        before = len(self._documents)
        self._documents = [d for d in self._documents if d.key not in keys]
        self._filtered = [d for d in self._filtered if d.key not in keys]
        return before - len(self._documents)
