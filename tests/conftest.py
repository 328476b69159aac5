from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from fogatlasctl.client import AsyncFogAtlasClient

BASE_PATH = "/api/v2.0.0"

Responder = Callable[[httpx.Request], httpx.Response]


def _api_path(request: httpx.Request) -> str:
    raw = request.url.raw_path.decode("ascii").split("?", 1)[0]
    return raw.removeprefix(BASE_PATH)


class FakeFogAtlas:
    """In-memory stand-in for the FogAtlas API recording every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Responder] = {}

    def on(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        *,
        status: int = 200,
        responder: Responder | None = None,
    ) -> None:
        def _static(_request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json=payload if payload is not None else {})

        self._routes[(method.upper(), path)] = responder or _static

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = _api_path(request)
        responder = self._routes.get((request.method, path))
        if responder is not None:
            return responder(request)
        if request.method == "GET":
            return httpx.Response(404, json={"message": "not found"})
        return httpx.Response(200, json={})

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(req.method, _api_path(req)) for req in self.requests]

    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(req.content) for req in self.requests if req.content]

    def client(self) -> AsyncFogAtlasClient:
        http_client = httpx.AsyncClient(
            base_url=f"http://fogatlas.test:8080{BASE_PATH}",
            transport=httpx.MockTransport(self.handler),
        )
        return AsyncFogAtlasClient(endpoint="fogatlas.test:8080", http_client=http_client)


@pytest.fixture()
def api() -> FakeFogAtlas:
    return FakeFogAtlas()
