from fogatlasctl.http.transport import FogAtlasTransport

__all__ = ["FogAtlasTransport"]
