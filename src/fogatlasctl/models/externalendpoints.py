from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel


class ExternalEndpoint(FogAtlasModel):
    id: str = ""
    name: str = ""
    description: str = ""
    type: str = ""
    location: str = ""
    region_id: str = ""
    ip_address: str = ""


class ExternalEndpointListResponse(FogAtlasModel):
    externalendpoints: list[ExternalEndpoint] = Field(default_factory=list)
