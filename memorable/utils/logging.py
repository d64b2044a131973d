# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Log setup for the Memorable client.

The API client logs each request and its outcome by method and URL. The
sheet service logs document loads and worksheet creates and deletes. The
library logs refreshes and bookmark toggles, and the mock sheet store
logs the sheets it creates and grades. The CLI binds the user id as
context and logs a failed command as a structured event.

Events go to stderr so they never mix with the tables printed on stdout.
A development or debug run gets readable console lines; any other
environment gets one JSON object per event.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from memorable.core.config.settings import Settings

# httpx logs every request at INFO; the API client reports failures itself
NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "asyncio")

PACKAGE_LOGGER = "memorable"


def _renderer(settings: "Settings") -> list[Processor]:
    if settings.is_development or settings.debug:
        return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(settings: "Settings") -> None:
    """Route structlog and stdlib logging for a CLI run.

    Args:
        settings: Supplies log_level, and environment/debug to pick the
            console or JSON rendering.
    """
    level: int = logging.getLevelName(settings.log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        *_renderer(settings),
    ]
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    # Modules that log through logging.getLogger (client, service, store)
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        level=level,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger the CLI uses for command events."""
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Attach fields, such as the user id of the running command, to every later event.

    Example:
        >>> bind_context(user_id="42")
        >>> get_logger(__name__).info("Listing documents", category="Math")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop the fields bound for the finished command."""
    structlog.contextvars.clear_contextvars()
