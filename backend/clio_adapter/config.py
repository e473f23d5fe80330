from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Clio Manage OAuth 2.0
    clio_region: Literal["us", "eu", "ca", "au"] = Field(
        default="us",
        description="Clio data region the account lives in",
    )
    clio_client_id: str = Field(default="", description="Clio OAuth client ID")
    clio_client_secret: str = Field(default="", description="Clio OAuth client secret")
    clio_redirect_uri: str = Field(
        default="http://localhost:8000/api/clio/callback",
        description="Clio OAuth redirect URI",
    )
    clio_access_token: str = Field(default="", description="Clio access token")
    clio_refresh_token: str = Field(default="", description="Clio refresh token")

    # Transport
    clio_request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")
    clio_page_size: int = Field(
        default=50,
        ge=1,
        le=200,
        description="Page size used when walking every page of a list endpoint",
    )
    clio_max_pages: int = Field(
        default=1000,
        ge=1,
        description="Safety cap on the number of pages fetched by one list call",
    )

    # Server
    host: str = Field(default="127.0.0.1", description="Address the API server binds to")
    port: int = Field(default=8000, description="Port the API server listens on")

    log_level: str = Field(default="INFO", description="loguru log level")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
