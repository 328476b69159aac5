"""Registry of the resource kinds managed by the FogAtlas API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fogatlasctl.constants import (
    APPLICATIONS,
    DEPLOYMENTS,
    DYNAMIC_NODES,
    EXTERNAL_ENDPOINTS,
    MICROSERVICES,
    NODES,
    REGIONS,
    RELATIONSHIPS,
)
from fogatlasctl.errors import unknown_resource
from fogatlasctl.models import (
    Application,
    BulkDescriptor,
    Deployment,
    DynamicNode,
    ExternalEndpoint,
    FogAtlasModel,
    Microservice,
    Node,
    Region,
    Relationship,
)


@dataclass(frozen=True, slots=True)
class ResourceKind:
    """How one resource token maps onto the client and its payloads.

    ``key_field`` addresses existing items (get/delete/deleteAll) while
    ``bulk_key_field`` is read from item bodies during ``putAll``.
    ``list_filter`` names the option that narrows list fetches for ``get``;
    ``purge_filter`` the one honoured by ``deleteAll``.
    """

    token: str
    label: str
    item_model: type[FogAtlasModel]
    key_field: str = "id"
    bulk_key_field: str = "id"
    list_filter: str | None = None
    purge_filter: str | None = None
    descriptor_field: str | None = None

    def service(self, client: Any) -> Any:
        return getattr(client, self.token)

    def items(self, listing: FogAtlasModel) -> list[Any]:
        return list(getattr(listing, self.token))

    def key_of(self, item: FogAtlasModel) -> str:
        return str(getattr(item, self.key_field) or "")

    def bulk_key_of(self, item: FogAtlasModel) -> str:
        return str(getattr(item, self.bulk_key_field) or "")

    def bulk_items(self, descriptor: BulkDescriptor) -> list[Any]:
        return list(getattr(descriptor, self.descriptor_field or self.token))


RESOURCE_KINDS: dict[str, ResourceKind] = {
    APPLICATIONS: ResourceKind(APPLICATIONS, "applications", Application),
    DEPLOYMENTS: ResourceKind(
        DEPLOYMENTS,
        "deployments",
        Deployment,
        key_field="name",
        bulk_key_field="name",
        list_filter="status",
    ),
    # Bulk files key microservices by name, single puts by the --id value.
    MICROSERVICES: ResourceKind(
        MICROSERVICES,
        "microservices",
        Microservice,
        bulk_key_field="name",
        list_filter="node_id",
    ),
    NODES: ResourceKind(NODES, "nodes", Node, list_filter="region_id"),
    REGIONS: ResourceKind(REGIONS, "regions", Region),
    RELATIONSHIPS: ResourceKind(RELATIONSHIPS, "relationships", Relationship, list_filter="region_id"),
    EXTERNAL_ENDPOINTS: ResourceKind(
        EXTERNAL_ENDPOINTS,
        "external endpoints",
        ExternalEndpoint,
        list_filter="region_id",
    ),
    DYNAMIC_NODES: ResourceKind(
        DYNAMIC_NODES,
        "dynamicnodes",
        DynamicNode,
        list_filter="region_id",
        purge_filter="region_id",
        descriptor_field="dynamic_nodes",
    ),
}

# Upsert order used by putAll.
BULK_ORDER = (
    APPLICATIONS,
    REGIONS,
    DEPLOYMENTS,
    MICROSERVICES,
    NODES,
    RELATIONSHIPS,
    EXTERNAL_ENDPOINTS,
    DYNAMIC_NODES,
)


def resolve_kind(resource: str) -> ResourceKind:
    kind = RESOURCE_KINDS.get(resource)
    if kind is None:
        raise unknown_resource(resource)
    return kind
