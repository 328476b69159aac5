from __future__ import annotations

from fogatlasctl.models.common import OperationResult, PatchStatus
from fogatlasctl.models.deployments import Deployment, DeploymentListResponse
from fogatlasctl.services.base import ResourceService


class DeploymentsService(ResourceService[Deployment, DeploymentListResponse]):
    """Deployment API operations. Deployments are addressed by name."""

    path = "deployments"
    item_model = Deployment
    list_model = DeploymentListResponse

    async def list(self, *, status: str | None = None) -> DeploymentListResponse:
        params = {"status": status} if status else None
        return await self._list(params=params)

    async def patch_status(self, name: str, status: str) -> OperationResult:
        return await self._patch(name, PatchStatus(status=status))
