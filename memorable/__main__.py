# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Command-line front end for the Memorable library.

Usage:
    python -m memorable list --user-id 42 --category Math
    python -m memorable bookmarks --user-id 42 --type testsheet
    python -m memorable open worksheet 3
    python -m memorable bookmark testsheet 2
    python -m memorable delete wrongsheet 1
"""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.markup import escape

from memorable.core.config import get_settings
from memorable.domains.documents.library import DocumentLibrary
from memorable.domains.documents.listing import ALL_CATEGORY, DisplayType
from memorable.domains.documents.models import FileType
from memorable.presentation.tables import (
    BOOKMARKED,
    NOT_BOOKMARKED,
    render_bookmarks,
    render_detail,
    render_documents,
)
from memorable.services.api.client import MemorableClient
from memorable.services.api.exceptions import MemorableAPIError
from memorable.services.api.sheets import SheetService
from memorable.utils.logging import bind_context, clear_context, get_logger, setup_logging

console = Console()
logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every subcommand."""
    parser = argparse.ArgumentParser(
        prog="memorable",
        description="Browse and manage Memorable study sheets.",
    )
    parser.add_argument("--base-url", help="Memorable server URL (default: from settings)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    display_types = [t.value for t in DisplayType]
    file_types = [t.value for t in FileType]

    list_parser = subparsers.add_parser("list", help="List documents, filtered by category")
    list_parser.add_argument("--user-id", help="Owner of the documents")
    list_parser.add_argument("--category", default=ALL_CATEGORY, help="Category filter")
    list_parser.add_argument("--type", choices=display_types, default=DisplayType.ALL.value)

    bookmarks_parser = subparsers.add_parser("bookmarks", help="List bookmarked documents")
    bookmarks_parser.add_argument("--user-id", help="Owner of the documents")
    bookmarks_parser.add_argument("--type", choices=display_types, default=DisplayType.ALL.value)

    for name, help_text in (
        ("open", "Show a document"),
        ("bookmark", "Toggle a document's bookmark"),
        ("delete", "Delete a document"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("file_type", choices=file_types)
        sub.add_argument("sheet_id", type=int)

    return parser


async def run(args: argparse.Namespace, service: SheetService) -> int:
    """Execute a parsed command against a sheet service.

    Returns:
        Process exit code.
    """
    if args.command in ("list", "bookmarks"):
        user_id = args.user_id or get_settings().default_user_id
        if not user_id:
            console.print("[red]Error:[/red] --user-id is required (or set DEFAULT_USER_ID)")
            return 2
        bind_context(user_id=user_id)

        library = DocumentLibrary(service, user_id, DisplayType(args.type))
        await library.refresh()

        if args.command == "list":
            if not library.documents.select_category(args.category):
                console.print(f"[yellow]Unknown category '{escape(args.category)}', showing all[/yellow]")
            console.print(render_documents(library.documents))
        else:
            library.bookmarks.filter_by(DisplayType(args.type))
            console.print(render_bookmarks(library.bookmarks))
        return 0

    file_type = FileType(args.file_type)

    if args.command == "open":
        detail = await service.get_detail(file_type, args.sheet_id)
        console.print(render_detail(detail))
    elif args.command == "bookmark":
        updated = await service.toggle_bookmark(file_type, args.sheet_id)
        star = BOOKMARKED if updated.is_bookmarked else NOT_BOOKMARKED
        console.print(f"{star} {escape(updated.name)}")
    elif args.command == "delete":
        await service.delete_document(file_type, args.sheet_id)
        console.print(f"Deleted {file_type.label} {args.sheet_id}")
    return 0


async def _main(args: argparse.Namespace) -> int:
    async with MemorableClient(base_url=args.base_url) as client:
        try:
            return await run(args, SheetService(client=client))
        except MemorableAPIError as e:
            logger.error("Command failed", command=args.command, error_type=type(e).__name__)
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            return 1
        finally:
            clear_context()


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``memorable`` script."""
    args = build_parser().parse_args(argv)
    setup_logging(get_settings())
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
