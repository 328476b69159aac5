from fogatlasctl.client import AsyncFogAtlasClient
from fogatlasctl.constants import RESOURCE_TYPES, VERSION
from fogatlasctl.errors import APIError, FileFormatError, FogAtlasError, RequestError, UsageError
from fogatlasctl.settings import RuntimeSettings

__version__ = VERSION

__all__ = [
    "__version__",
    "APIError",
    "AsyncFogAtlasClient",
    "FileFormatError",
    "FogAtlasError",
    "RESOURCE_TYPES",
    "RequestError",
    "RuntimeSettings",
    "UsageError",
]
