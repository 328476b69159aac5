from __future__ import annotations

from fogatlasctl.models.nodes import DynamicNode, DynamicNodeListResponse, Node, NodeListResponse
from fogatlasctl.services.base import ResourceService


def _region_filter(region_id: str | None) -> dict[str, str] | None:
    return {"region_id": region_id} if region_id else None


class NodesService(ResourceService[Node, NodeListResponse]):
    """Node API operations."""

    path = "nodes"
    item_model = Node
    list_model = NodeListResponse

    async def list(self, *, region_id: str | None = None) -> NodeListResponse:
        return await self._list(params=_region_filter(region_id))


class DynamicNodesService(ResourceService[DynamicNode, DynamicNodeListResponse]):
    """Dynamic node API operations."""

    path = "dynamicnodes"
    item_model = DynamicNode
    list_model = DynamicNodeListResponse

    async def list(self, *, region_id: str | None = None) -> DynamicNodeListResponse:
        return await self._list(params=_region_filter(region_id))
