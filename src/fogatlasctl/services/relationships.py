from __future__ import annotations

from fogatlasctl.models.relationships import Relationship, RelationshipListResponse
from fogatlasctl.services.base import ResourceService


class RelationshipsService(ResourceService[Relationship, RelationshipListResponse]):
    """Relationship (region-to-region link) API operations."""

    path = "relationships"
    item_model = Relationship
    list_model = RelationshipListResponse

    async def list(self, *, region_id: str | None = None) -> RelationshipListResponse:
        params = {"region_id": region_id} if region_id else None
        return await self._list(params=params)
