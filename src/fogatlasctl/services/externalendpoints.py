from __future__ import annotations

from fogatlasctl.models.externalendpoints import ExternalEndpoint, ExternalEndpointListResponse
from fogatlasctl.services.base import ResourceService


class ExternalEndpointsService(ResourceService[ExternalEndpoint, ExternalEndpointListResponse]):
    """External endpoint API operations."""

    path = "externalendpoints"
    item_model = ExternalEndpoint
    list_model = ExternalEndpointListResponse

    async def list(self, *, region_id: str | None = None) -> ExternalEndpointListResponse:
        params = {"region_id": region_id} if region_id else None
        return await self._list(params=params)
