from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fogatlasctl.constants import (
    DEFAULT_BASE_PATH,
    DEFAULT_ENDPOINT,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
)


class RuntimeSettings(BaseSettings):
    """Environment-driven runtime overrides for API endpoint resolution."""

    model_config = SettingsConfigDict(
        env_prefix="FOGATLAS_",
        extra="ignore",
        populate_by_name=True,
        case_sensitive=False,
    )

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT,
        validation_alias=AliasChoices("FOGATLAS_ENDPOINT", "FOGATLAS_API_ENDPOINT"),
    )
    base_path: str = Field(
        default=DEFAULT_BASE_PATH,
        validation_alias=AliasChoices("FOGATLAS_BASE_PATH", "FOGATLAS_API_BASE_PATH"),
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        validation_alias=AliasChoices("FOGATLAS_REQUEST_TIMEOUT_SECONDS", "FOGATLAS_TIMEOUT"),
    )

    def base_url(self, endpoint: str | None = None) -> str:
        host = (endpoint or self.endpoint).strip().rstrip("/")
        if "://" not in host:
            host = f"http://{host}"
        return f"{host}/{self.base_path.strip('/')}"
