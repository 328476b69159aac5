from __future__ import annotations

from dataclasses import dataclass


class FogAtlasError(Exception):
    """Base error type for fogatlasctl."""


class UsageError(FogAtlasError):
    """Raised when required options are missing or a resource type is unknown."""


class FileFormatError(FogAtlasError):
    """Raised when an input file cannot be read or decoded."""


class RequestError(FogAtlasError):
    """Raised when an HTTP request cannot be completed."""


@dataclass(slots=True)
class APIError(RequestError):
    """Represents a non-success FogAtlas API response."""

    status_code: int
    message: str
    body: str | None = None

    def __str__(self) -> str:
        if self.body:
            return f"HTTP {self.status_code}: {self.message} ({self.body})"
        return f"HTTP {self.status_code}: {self.message}"


def unknown_resource(resource: str) -> UsageError:
    return UsageError(f"resource specified ({resource}) is unknown")
