# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Async HTTP client for the Memorable REST API.

Every endpoint is a path appended to the configured base URL. Responses
follow one pattern:
- transport failure -> APINetworkError
- status outside 200..299 -> APIServerError
- body that does not decode into the requested type -> APIDecodingError

Example:
    async with MemorableClient() as client:
        worksheets = await client.get_data(
            "/api/worksheet/user/42",
            list[Worksheet],
        )
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from memorable.core.config.settings import APISettings, get_settings
from memorable.services.api.exceptions import (
    APIDecodingError,
    APINetworkError,
    APIServerError,
    InvalidURLError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _type_name(response_type: Any) -> str:
    if isinstance(response_type, type):
        return response_type.__name__
    return str(response_type)


def _encode_body(body: BaseModel | dict[str, Any] | None) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True, mode="json")
    return body


class MemorableClient:
    """Async client for the Memorable server.

    Attributes:
        base_url: Root URL every endpoint is appended to.
        timeout: Request timeout in seconds.

    Example:
        client = MemorableClient(base_url="https://memorable-pard.site")
        detail = await client.get_data("/api/worksheet/ws/3", WorksheetDetail)
        await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        settings: APISettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server root URL. Defaults to the configured one.
            timeout: Request timeout in seconds. Defaults to the configured one.
            settings: API settings to read defaults from.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        settings = settings or get_settings().api
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
            transport=transport,
        )

    async def __aenter__(self) -> "MemorableClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def build_url(self, endpoint: str) -> str:
        """Join the base URL and an endpoint path.

        Raises:
            InvalidURLError: If the result is not an absolute http(s) URL.
        """
        url = f"{self.base_url}{endpoint}"
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise InvalidURLError(url) from e

        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise InvalidURLError(url)
        return url

    async def _request(
        self,
        method: str,
        endpoint: str,
        body: BaseModel | dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = self.build_url(endpoint)
        logger.debug("Requesting %s %s", method, url)

        try:
            response = await self._client.request(method, url, json=_encode_body(body))
        except httpx.RequestError as e:
            logger.error("Network error on %s %s: %s", method, url, str(e))
            raise APINetworkError(
                message=f"Failed to reach Memorable API: {str(e)}",
                details={"url": url, "error_type": type(e).__name__},
            ) from e

        if not response.is_success:
            logger.error(
                "Server response failure: %s %s -> %d",
                method,
                url,
                response.status_code,
            )
            raise APIServerError(
                status_code=response.status_code,
                response_body=response.text,
                details={"url": url},
            )

        logger.info("Server response success: %s %s -> %d", method, url, response.status_code)
        return response

    def _decode(self, response: httpx.Response, response_type: Any) -> Any:
        name = _type_name(response_type)
        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            logger.error("Decoding error for %s: %s", name, str(e))
            raise APIDecodingError(
                message=f"Failed to decode response ({e.error_count()} errors)",
                target=name,
                details={"url": str(response.request.url)},
            ) from e

    async def get_data(self, endpoint: str, response_type: type[T] | Any) -> T:
        """GET an endpoint and decode the body.

        Args:
            endpoint: Path appended to the base URL.
            response_type: Type to decode into, e.g. ``list[Worksheet]``.

        Returns:
            The decoded body.

        Raises:
            APINetworkError: If the server is unreachable.
            APIServerError: If the status is not 2xx.
            APIDecodingError: If the body does not match response_type.
        """
        response = await self._request("GET", endpoint)
        return self._decode(response, response_type)

    async def post_data(
        self,
        endpoint: str,
        body: BaseModel | dict[str, Any],
        response_type: type[T] | Any,
    ) -> T:
        """POST a JSON body and decode the response.

        Raises:
            APINetworkError: If the server is unreachable.
            APIServerError: If the status is not 2xx.
            APIDecodingError: If the body does not match response_type.
        """
        response = await self._request("POST", endpoint, body)
        return self._decode(response, response_type)

    async def update_data(
        self,
        endpoint: str,
        body: BaseModel | dict[str, Any] | None = None,
        response_type: type[T] | Any | None = None,
    ) -> T | None:
        """PATCH an endpoint, optionally decoding the response.

        Returns:
            The decoded body, or None when no response_type is given.
        """
        response = await self._request("PATCH", endpoint, body)
        if response_type is None:
            return None
        return self._decode(response, response_type)

    async def delete_data(self, endpoint: str) -> None:
        """DELETE an endpoint.

        Raises:
            APINetworkError: If the server is unreachable.
            APIServerError: If the status is not 2xx.
        """
        await self._request("DELETE", endpoint)


_api_client: MemorableClient | None = None


def get_api_client() -> MemorableClient:
    """Get the process-wide client, creating it from settings on first use."""
    global _api_client
    if _api_client is None:
        _api_client = MemorableClient()
    return _api_client


async def close_api_client() -> None:
    """Close and forget the process-wide client."""
    global _api_client
    if _api_client is not None:
        await _api_client.close()
        _api_client = None
