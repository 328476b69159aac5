from __future__ import annotations

from pydantic import Field

from fogatlasctl.models.common import FogAtlasModel, PriceComponent


class RelationshipPrices(FogAtlasModel):
    bandwidth: PriceComponent = Field(default_factory=PriceComponent)
    latency: PriceComponent = Field(default_factory=PriceComponent)


class Relationship(FogAtlasModel):
    id: str = ""
    endpoint_a: str = ""
    endpoint_b: str = ""
    region_id: str = ""
    bandwidth_capacity: int = 0
    bandwidth_available: int = 0
    latency: int = 0
    prices: RelationshipPrices | None = None
    status: str = ""


class RelationshipListResponse(FogAtlasModel):
    relationships: list[Relationship] = Field(default_factory=list)
