from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel


class DeploymentMicroservice(FogAtlasModel):
    """Placement requirements of one microservice inside a deployment."""

    name: str = ""
    description: str = ""
    cpu_required: str = ""
    memory_required: str = ""
    disk_required: str = ""
    region_id: str = ""
    region_required: str = ""
    price_required: float = 0.0
    price_computed: float = 0.0
    deployment_descriptor: str = ""


class Dataflow(FogAtlasModel):
    source_id: str = ""
    destination_id: str = ""
    bandwidth_required: int = 0
    latency_required: int = 0


class Deployment(FogAtlasModel):
    name: str = ""
    description: str = ""
    status: str = ""
    externalendpoint_id: str = ""
    microservices: list[DeploymentMicroservice] = Field(default_factory=list)
    dataflows: list[Dataflow] = Field(default_factory=list)


class DeploymentListResponse(FogAtlasModel):
    deployments: list[Deployment] = Field(default_factory=list)
