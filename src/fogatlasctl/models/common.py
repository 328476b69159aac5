from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class FogAtlasModel(BaseModel):
    """Base model with permissive extra handling for upstream compatibility."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # The API sends null for unset fields; treat it like a missing key.
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize only what was provided, unknown fields included."""

        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class PriceComponent(FogAtlasModel):
    min_price: float = 0.0
    max_price: float = 0.0
    scarcity: float = 0.0
    unit_price: float = 0.0


class PatchStatus(FogAtlasModel):
    status: str


class OperationResult(FogAtlasModel):
    """Body returned by put/patch/delete calls."""

    error: str = ""
