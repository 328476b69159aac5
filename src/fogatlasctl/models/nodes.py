from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel


class Node(FogAtlasModel):
    id: str = ""
    architecture: str = ""
    version: str = ""
    distribution: str = ""
    region_id: str = ""
    cpu_capacity: str = ""
    cpu_available: str = ""
    memory_capacity: str = ""
    memory_available: str = ""
    disk_capacity: str = ""
    disk_available: str = ""
    status: str = ""


class NodeListResponse(FogAtlasModel):
    nodes: list[Node] = Field(default_factory=list)


class DynamicNode(FogAtlasModel):
    """Node whose network address is assigned at runtime."""

    id: str = ""
    ip_address: str = ""
    node_id: str = ""
    region_id: str = ""


class DynamicNodeListResponse(FogAtlasModel):
    dynamicnodes: list[DynamicNode] = Field(default_factory=list)
