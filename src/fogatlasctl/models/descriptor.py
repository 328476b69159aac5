from __future__ import annotations

from pydantic import AliasChoices, Field

from fogatlasctl.models.applications import Application
from fogatlasctl.models.common import FogAtlasModel
from fogatlasctl.models.deployments import Deployment
from fogatlasctl.models.externalendpoints import ExternalEndpoint
from fogatlasctl.models.microservices import Microservice
from fogatlasctl.models.nodes import DynamicNode, Node
from fogatlasctl.models.regions import Region
from fogatlasctl.models.relationships import Relationship


class BulkDescriptor(FogAtlasModel):
    """Resources to upsert with a single ``putAll`` invocation.

    Existing descriptor files use the singular ``dynamicnode`` key for dynamic
    nodes; it is kept as the wire name, with ``dynamicnodes`` accepted too.
    """

    applications: list[Application] = Field(default_factory=list)
    microservices: list[Microservice] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
    nodes: list[Node] = Field(default_factory=list)
    regions: list[Region] = Field(default_factory=list)
    externalendpoints: list[ExternalEndpoint] = Field(default_factory=list)
    dynamic_nodes: list[DynamicNode] = Field(
        default_factory=list,
        alias="dynamicnode",
        validation_alias=AliasChoices("dynamicnode", "dynamicnodes"),
    )
    deployments: list[Deployment] = Field(default_factory=list)

    def item_count(self) -> int:
        return (
            len(self.applications)
            + len(self.microservices)
            + len(self.relationships)
            + len(self.nodes)
            + len(self.regions)
            + len(self.externalendpoints)
            + len(self.dynamic_nodes)
            + len(self.deployments)
        )
