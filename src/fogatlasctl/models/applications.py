from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel


class ApplicationMicroservice(FogAtlasModel):
    microservice_id: str = ""


class Application(FogAtlasModel):
    id: str = ""
    name: str = ""
    description: str = ""
    status: str = ""
    microservices: list[ApplicationMicroservice] = Field(default_factory=list)


class ApplicationListResponse(FogAtlasModel):
    applications: list[Application] = Field(default_factory=list)
