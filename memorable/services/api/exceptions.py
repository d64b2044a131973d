# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Custom exceptions for the Memorable API client.

This module defines the exception hierarchy for API operations:
- MemorableAPIError: Base exception for all API-related errors
- InvalidURLError: The endpoint does not form a valid URL
- APINetworkError: The server could not be reached
- APIServerError: The server answered with a non-2xx status
- APIDecodingError: The response body did not match the expected model
- SheetNotFoundError: A mock-backed sheet id does not exist
"""

from typing import Any


class MemorableAPIError(Exception):
    """Base exception for all Memorable API errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation with details if available."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class InvalidURLError(MemorableAPIError):
    """Raised when base URL and endpoint do not form a valid URL."""

    def __init__(self, url: str, details: dict[str, Any] | None = None):
        self.url = url
        super().__init__(f"Invalid URL: {url}", details)


class APINetworkError(MemorableAPIError):
    """Raised when the request never got an HTTP response.

    The underlying httpx error is chained as ``__cause__``.
    """


class APIServerError(MemorableAPIError):
    """Raised when the server answers with a status outside 200..299.

    Attributes:
        status_code: HTTP status code from the response.
        response_body: Raw response body if available.
    """

    def __init__(
        self,
        status_code: int,
        message: str = "Server error",
        response_body: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message, details)

    def __str__(self) -> str:
        """Return string representation with status code."""
        base = f"[{self.status_code}] {self.message}"
        if self.details:
            base = f"{base} - Details: {self.details}"
        return base


class APIDecodingError(MemorableAPIError):
    """Raised when a response body cannot be decoded into the expected model.

    The JSON or pydantic validation error is chained as ``__cause__``.

    Attributes:
        target: Name of the type the body was decoded into.
    """

    def __init__(
        self,
        message: str,
        target: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.target = target
        super().__init__(message, details)

    def __str__(self) -> str:
        """Return string representation with the decode target."""
        base = self.message
        if self.target:
            base = f"[{self.target}] {base}"
        return base


class SheetNotFoundError(MemorableAPIError):
    """Raised when a mock-backed sheet does not exist.

    Attributes:
        file_type: Kind of the sheet that was looked up.
        sheet_id: Id that was not found.
    """

    def __init__(self, file_type: str, sheet_id: int):
        self.file_type = file_type
        self.sheet_id = sheet_id
        super().__init__(f"{file_type} {sheet_id} not found")
