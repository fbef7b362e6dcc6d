"""Defines a base client for the authentication API."""

import logging
import os
from types import TracebackType
from typing import Any, Mapping, Self, Type

import httpx

from authapi.conf import DEFAULT_TIMEOUT_SECONDS
from authapi.errors import ArgumentError

logger = logging.getLogger(__name__)


def verbose_error() -> bool:
    return os.environ.get("AUTHAPI_VERBOSE_ERROR", "0") == "1"


def is_json(content_type: str) -> bool:
    """Matches ``application/json`` and structured suffixes like ``+json``."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class BaseClient:
    def __init__(
        self,
        base_url: str,
        *,
        headers: Mapping[str, str] | None = None,
        client_id: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not isinstance(base_url, str):
            raise ArgumentError("base_url field is required")
        self.base_url = base_url.rstrip("/")
        self.headers: dict[str, str] = dict(headers or {})
        self.client_id = client_id
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.AsyncClient | None = None

    async def get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
            )
        return self._client

    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        headers: Mapping[str, str] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        kwargs: dict[str, Any] = {"headers": httpx.Headers(self.headers if headers is None else headers)}
        if data is not None:
            kwargs["json"] = data

        client = await self.get_client()
        logger.debug("%s %s%s", method, self.base_url, endpoint)
        response = await client.request(method, endpoint, **kwargs)

        if response.is_error:
            self._log_error(response)
            response.raise_for_status()

        if is_json(response.headers.get("content-type", "")):
            return response.json()
        return response.text

    def _log_error(self, response: httpx.Response) -> None:
        if not verbose_error():
            logger.info("Use AUTHAPI_VERBOSE_ERROR=1 to see the full error message")

        logger.error("Got error %d from %s", response.status_code, response.request.url)
        if not verbose_error():
            return
        try:
            error_json = response.json()
        except ValueError:
            logger.error("  %s", response.text)
            return
        if isinstance(error_json, Mapping):
            for key, value in error_json.items():
                logger.error("  [%s] %s", key, value)
        else:
            logger.error("  %s", error_json)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
