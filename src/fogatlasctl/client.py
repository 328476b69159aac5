from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from fogatlasctl.http import FogAtlasTransport
from fogatlasctl.services import (
    ApplicationsService,
    DeploymentsService,
    DynamicNodesService,
    ExternalEndpointsService,
    MicroservicesService,
    NodesService,
    RegionsService,
    RelationshipsService,
)
from fogatlasctl.settings import RuntimeSettings

JsonObject = dict[str, Any]


class AsyncFogAtlasClient:
    """Async FogAtlas API client."""

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        base_path: str | None = None,
        request_timeout_seconds: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        runtime = RuntimeSettings()
        if base_path is not None:
            runtime.base_path = base_path
        self.endpoint = endpoint or runtime.endpoint
        self.base_url = runtime.base_url(self.endpoint)
        self.request_timeout_seconds = (
            request_timeout_seconds if request_timeout_seconds is not None else runtime.request_timeout_seconds
        )

        self._transport = FogAtlasTransport(
            base_url=self.base_url,
            timeout=self.request_timeout_seconds,
            http_client=http_client,
        )

        self.applications = ApplicationsService(self)
        self.deployments = DeploymentsService(self)
        self.microservices = MicroservicesService(self)
        self.nodes = NodesService(self)
        self.regions = RegionsService(self)
        self.relationships = RelationshipsService(self)
        self.externalendpoints = ExternalEndpointsService(self)
        self.dynamicnodes = DynamicNodesService(self)

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_data: Mapping[str, Any] | None = None,
    ) -> JsonObject:
        return await self._transport.request_json(method, path, params=params, json_data=json_data)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> AsyncFogAtlasClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
