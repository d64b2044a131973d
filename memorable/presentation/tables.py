# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Rich renderables for the document library.

Each list view becomes a table with one row per visible document:

    ★  Name         Category  Type         Created
    ★  Testsheet 1  Math      나만의 시험지  2024.07.03
"""

from collections.abc import Iterable

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from memorable.domains.documents.listing import ALL_CATEGORY, BookmarkListView, DocumentListView
from memorable.domains.documents.models import (
    Document,
    FileType,
    Question,
    SheetDetail,
    TestsheetDetail,
    WorksheetDetail,
    WrongsheetDetail,
)
from memorable.utils.datetime import format_sheet_date

BOOKMARKED = "★"
NOT_BOOKMARKED = "☆"


def _document_table(title: str, documents: Iterable[Document]) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column(BOOKMARKED, justify="center", style="yellow", width=2)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Created", justify="right")

    for document in documents:
        table.add_row(
            BOOKMARKED if document.is_bookmarked else NOT_BOOKMARKED,
            str(document.id),
            escape(document.name),
            escape(document.category),
            document.file_type.label,
            format_sheet_date(document.created_date),
        )
    return table


def render_documents(view: DocumentListView) -> Table:
    """Render the visible rows of a document list view."""
    title = view.category
    if view.category != ALL_CATEGORY:
        title = f"{ALL_CATEGORY} › {escape(view.category)}"
    table = _document_table(title, view.filtered)
    table.caption = " · ".join(escape(category) for category in view.categories)
    return table


def render_bookmarks(view: BookmarkListView) -> Table:
    """Render the visible rows of a bookmark list view."""
    file_type = view.display_type.file_type
    title = file_type.label if file_type else ALL_CATEGORY
    return _document_table(f"{BOOKMARKED} {title}", view.filtered)


def _question_lines(questions: list[Question], is_correct: list[bool] | None = None) -> list[str]:
    lines = []
    for index, question in enumerate(questions):
        mark = ""
        if is_correct is not None and index < len(is_correct):
            mark = "[green]O[/green] " if is_correct[index] else "[red]X[/red] "
        answer = escape(question.user_answer) if question.user_answer is not None else "-"
        lines.append(
            f"{mark}{question.question_id}. {escape(question.question)} → {answer} "
            f"({escape(question.answer)})"
        )
    return lines


def render_detail(detail: SheetDetail) -> Panel:
    """Render a summary panel for an opened document."""
    if isinstance(detail, WorksheetDetail):
        body = [
            f"Category: [cyan]{escape(detail.category)}[/cyan]",
            f"Blanks: {len(detail.answers)}",
            f"Completed attempts: {sum(detail.is_complete_all_blanks)}/{len(detail.is_complete_all_blanks)}",
            "",
            escape(detail.content),
        ]
        return Panel("\n".join(body), title=escape(detail.name), subtitle=FileType.WORKSHEET.label)

    if isinstance(detail, TestsheetDetail):
        body = [f"Category: [cyan]{escape(detail.category)}[/cyan]"]
        if detail.score is not None:
            total = f"{sum(detail.score)}/{len(detail.questions)}"
            body.append(f"Score: [bold]{total}[/bold] ({', '.join(map(str, detail.score))})")
        body.append("")
        body.extend(_question_lines(detail.questions, detail.is_correct))
        return Panel("\n".join(body), title=escape(detail.name), subtitle=FileType.TESTSHEET.label)

    if isinstance(detail, WrongsheetDetail):
        body = [f"Category: [cyan]{escape(detail.category)}[/cyan]", ""]
        body.extend(_question_lines(detail.questions))
        return Panel("\n".join(body), title=escape(detail.name), subtitle=FileType.WRONGSHEET.label)

    raise TypeError(f"Unsupported detail type: {type(detail).__name__}")
