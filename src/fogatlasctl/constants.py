from __future__ import annotations

VERSION = "1.3.0"

DEFAULT_ENDPOINT = "127.0.0.1:8080"
DEFAULT_BASE_PATH = "/api/v2.0.0"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0

APPLICATIONS = "applications"
DEPLOYMENTS = "deployments"
MICROSERVICES = "microservices"
NODES = "nodes"
REGIONS = "regions"
RELATIONSHIPS = "relationships"
EXTERNAL_ENDPOINTS = "externalendpoints"
DYNAMIC_NODES = "dynamicnodes"

RESOURCE_TYPES = (
    APPLICATIONS,
    DEPLOYMENTS,
    MICROSERVICES,
    NODES,
    REGIONS,
    RELATIONSHIPS,
    EXTERNAL_ENDPOINTS,
    DYNAMIC_NODES,
)
