from fogatlasctl.services.applications import ApplicationsService
from fogatlasctl.services.deployments import DeploymentsService
from fogatlasctl.services.externalendpoints import ExternalEndpointsService
from fogatlasctl.services.microservices import MicroservicesService
from fogatlasctl.services.nodes import DynamicNodesService, NodesService
from fogatlasctl.services.regions import RegionsService
from fogatlasctl.services.relationships import RelationshipsService

__all__ = [
    "ApplicationsService",
    "DeploymentsService",
    "DynamicNodesService",
    "ExternalEndpointsService",
    "MicroservicesService",
    "NodesService",
    "RegionsService",
    "RelationshipsService",
]
