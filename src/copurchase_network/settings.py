from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkServiceSettings(BaseSettings):
    """Configuration for the co-purchase network service.

    Environment variables are prefixed with COPURCHASE_.
    """

    model_config = SettingsConfigDict(env_prefix="COPURCHASE_", extra="ignore")

    # HTTP
    bind_host: str = "0.0.0.0"
    bind_port: int = 8080
    api_prefix: str = Field(default="/api/network", description="Prefix for all network routes")

    # Logging
    log_level: str = Field(default="INFO", description="Python logging level")

    # CORS (front-end dev server by default)
    cors_allowed_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    cors_max_age: int = 3600


settings = NetworkServiceSettings()
