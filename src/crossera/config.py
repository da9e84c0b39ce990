"""SDK configuration using pydantic-settings.

Network base URLs are compiled in (see ``crossera.networks``); everything an
operator may want to adjust per deployment lives here.
"""

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from crossera.models import Network
from crossera.validation import validate_network

DEFAULT_TIMEOUT = 10.0


class EndpointConfig(BaseModel):
    """REST paths used by the SDK, relative to a network's base URL."""

    app_id_path: str = Field(default="/projects/register", description="App ID lookup by owner")
    submit_path: str = Field(default="/submit", description="Immediate transaction processing")
    batch_submit_path: str = Field(
        default="/api/sdk/submit", description="Batch processing submission"
    )
    status_path: str = Field(
        default="/api/sdk/status/{transaction_hash}",
        description="Processing status, formatted with the transaction hash",
    )

    def status_url(self, transaction_hash: str) -> str:
        """Get the status path for a transaction hash."""
        return self.status_path.format(transaction_hash=transaction_hash)


class Settings(BaseSettings):
    """SDK settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CROSSERA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Client
    # ======================
    default_network: Optional[str] = Field(
        default=None, description="Network used when a call does not name one"
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Request timeout in seconds")
    api_key: Optional[str] = Field(default=None, description="API key sent as X-API-Key")

    # ======================
    # Endpoints
    # ======================
    app_id_path: str = Field(default="/projects/register", description="App ID lookup path")
    submit_path: str = Field(default="/submit", description="Immediate submit path")
    batch_submit_path: str = Field(default="/api/sdk/submit", description="Batch submit path")
    status_path: str = Field(
        default="/api/sdk/status/{transaction_hash}", description="Status path template"
    )

    @property
    def endpoints(self) -> EndpointConfig:
        """Endpoint paths as a single config object."""
        return EndpointConfig(
            app_id_path=self.app_id_path,
            submit_path=self.submit_path,
            batch_submit_path=self.batch_submit_path,
            status_path=self.status_path,
        )

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "default_network": self.default_network or "(none)",
            "timeout": self.timeout,
            "api_key": "***" if self.api_key else "(not set)",
            "endpoints": self.endpoints.model_dump(),
        }


class SDKConfig(BaseModel):
    """Constructor-time options for ``CrossEraSDK``."""

    default_network: Optional[Network] = Field(
        default=None, description="Network used when a call does not name one"
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    api_key: Optional[str] = Field(default=None, description="Optional API key")
    endpoints: EndpointConfig = Field(default_factory=EndpointConfig)

    def __init__(self, **data: Any):
        """Build SDK options.

        Raises:
            crossera.ValidationError: If default_network is not a known network
        """
        if data.get("default_network") is not None:
            validate_network(data["default_network"])
        super().__init__(**data)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SDKConfig":
        """Build SDK options from environment-backed settings."""
        return cls(
            default_network=settings.default_network or None,
            timeout=settings.timeout,
            api_key=settings.api_key or None,
            endpoints=settings.endpoints,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
