from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel


class Microservice(FogAtlasModel):
    id: str = ""
    name: str = ""
    description: str = ""
    application_id: str = ""
    node_id: str = ""
    region_id: str = ""
    status: str = ""


class MicroserviceListResponse(FogAtlasModel):
    microservices: list[Microservice] = Field(default_factory=list)
