"""HTTP transport for FogAtlas API calls."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from fogatlasctl.errors import APIError, RequestError

logger = logging.getLogger(__name__)


class FogAtlasTransport:
    """Async JSON transport over plain HTTP.

    Every call is a single attempt; failures surface immediately as
    ``RequestError`` (transport) or ``APIError`` (HTTP status >= 400).
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_http_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._client.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        method_upper = method.upper()
        headers = {"Accept": "application/json"}
        if json_data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s params=%s", method_upper, path, dict(params) if params else {})
        try:
            response = await self._client.request(
                method_upper,
                path.lstrip("/"),
                params=params,
                json=json_data,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise RequestError(f"request failed: {exc}") from exc

        logger.debug("%s %s -> %s", method_upper, path, response.status_code)
        if response.status_code >= 400:
            raise APIError(
                status_code=response.status_code,
                message=response.reason_phrase or "request failed",
                body=response.text.strip() or None,
            )

        if response.status_code == 204 or not response.text.strip():
            return {}

        try:
            decoded = response.json()
        except ValueError as exc:
            raise RequestError("response was not valid JSON") from exc

        if not isinstance(decoded, dict):
            raise RequestError("response payload must be a JSON object")
        return decoded
