from __future__ import annotations

from fogatlasctl.models.regions import Region, RegionListResponse
from fogatlasctl.services.base import ResourceService


class RegionsService(ResourceService[Region, RegionListResponse]):
    """Region API operations."""

    path = "regions"
    item_model = Region
    list_model = RegionListResponse

    async def list(self) -> RegionListResponse:
        return await self._list()
