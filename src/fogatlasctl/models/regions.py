from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel, PriceComponent


class RegionPrices(FogAtlasModel):
    cpu: PriceComponent = Field(default_factory=PriceComponent)
    memory: PriceComponent = Field(default_factory=PriceComponent)
    disk: PriceComponent = Field(default_factory=PriceComponent)


class RegionRelationship(FogAtlasModel):
    relationship_id: str = ""


class Region(FogAtlasModel):
    id: str = ""
    description: str = ""
    location: str = ""
    tier: int = 0
    prices: RegionPrices | None = None
    relationships: list[RegionRelationship] = Field(default_factory=list)


class RegionListResponse(FogAtlasModel):
    regions: list[Region] = Field(default_factory=list)
