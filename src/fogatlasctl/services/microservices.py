from __future__ import annotations

from fogatlasctl.models.microservices import Microservice, MicroserviceListResponse
from fogatlasctl.services.base import ResourceService


class MicroservicesService(ResourceService[Microservice, MicroserviceListResponse]):
    """Microservice API operations."""

    path = "microservices"
    item_model = Microservice
    list_model = MicroserviceListResponse

    async def list(self, *, node_id: str | None = None) -> MicroserviceListResponse:
        params = {"node_id": node_id} if node_id else None
        return await self._list(params=params)
