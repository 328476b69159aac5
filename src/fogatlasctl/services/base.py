from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from fogatlasctl.errors import RequestError
from fogatlasctl.models.common import FogAtlasModel, OperationResult

ItemT = TypeVar("ItemT", bound=FogAtlasModel)
ListT = TypeVar("ListT", bound=FogAtlasModel)
ModelT = TypeVar("ModelT", bound=FogAtlasModel)


def _validate(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RequestError(f"unexpected response payload: {exc}") from exc


class ServiceBase:
    """Base type for service classes bound to a FogAtlas client instance."""

    def __init__(self, client: Any) -> None:
        self._client = client


class ResourceService(ServiceBase, Generic[ItemT, ListT]):
    """CRUD operations shared by every FogAtlas resource collection."""

    path: ClassVar[str]
    item_model: ClassVar[type[FogAtlasModel]]
    list_model: ClassVar[type[FogAtlasModel]]

    def _item_path(self, identifier: str) -> str:
        return f"/{self.path}/{quote(identifier, safe='')}"

    async def _list(self, *, params: dict[str, str] | None = None) -> ListT:
        data = await self._client._request_json("GET", f"/{self.path}", params=params or None)
        return _validate(self.list_model, data)  # type: ignore[return-value]

    async def get(self, identifier: str) -> ItemT:
        data = await self._client._request_json("GET", self._item_path(identifier))
        return _validate(self.item_model, data)  # type: ignore[return-value]

    async def put(self, identifier: str, item: ItemT) -> OperationResult:
        data = await self._client._request_json(
            "PUT",
            self._item_path(identifier),
            json_data=item.to_payload(),
        )
        return _validate(OperationResult, data)

    async def delete(self, identifier: str) -> OperationResult:
        data = await self._client._request_json("DELETE", self._item_path(identifier))
        return _validate(OperationResult, data)

    async def _patch(self, identifier: str, body: FogAtlasModel) -> OperationResult:
        data = await self._client._request_json(
            "PATCH",
            self._item_path(identifier),
            json_data=body.to_payload(),
        )
        return _validate(OperationResult, data)
