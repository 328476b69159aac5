from fogatlasctl.models.applications import Application, ApplicationListResponse, ApplicationMicroservice
from fogatlasctl.models.common import FogAtlasModel, OperationResult, PatchStatus, PriceComponent
from fogatlasctl.models.deployments import Dataflow, Deployment, DeploymentListResponse, DeploymentMicroservice
from fogatlasctl.models.descriptor import BulkDescriptor
from fogatlasctl.models.externalendpoints import ExternalEndpoint, ExternalEndpointListResponse
from fogatlasctl.models.microservices import Microservice, MicroserviceListResponse
from fogatlasctl.models.nodes import DynamicNode, DynamicNodeListResponse, Node, NodeListResponse
from fogatlasctl.models.regions import Region, RegionListResponse, RegionPrices, RegionRelationship
from fogatlasctl.models.relationships import Relationship, RelationshipListResponse, RelationshipPrices

__all__ = [
    "Application",
    "ApplicationListResponse",
    "ApplicationMicroservice",
    "BulkDescriptor",
    "Dataflow",
    "Deployment",
    "DeploymentListResponse",
    "DeploymentMicroservice",
    "DynamicNode",
    "DynamicNodeListResponse",
    "ExternalEndpoint",
    "ExternalEndpointListResponse",
    "FogAtlasModel",
    "Microservice",
    "MicroserviceListResponse",
    "Node",
    "NodeListResponse",
    "OperationResult",
    "PatchStatus",
    "PriceComponent",
    "Region",
    "RegionListResponse",
    "RegionPrices",
    "RegionRelationship",
    "Relationship",
    "RelationshipListResponse",
    "RelationshipPrices",
]
