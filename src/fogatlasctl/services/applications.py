from __future__ import annotations

from fogatlasctl.models.applications import Application, ApplicationListResponse
from fogatlasctl.services.base import ResourceService


class ApplicationsService(ResourceService[Application, ApplicationListResponse]):
    """Application API operations."""

    path = "applications"
    item_model = Application
    list_model = ApplicationListResponse

    async def list(self) -> ApplicationListResponse:
        return await self._list()
