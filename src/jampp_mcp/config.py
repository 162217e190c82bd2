"""Configuration management for the Jampp MCP server.

This module defines the ``JamppConfig`` model and helpers to load configuration
from environment variables. Client credentials are read once at process start
and stay constant for the lifetime of the server.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import AnyUrl, BaseModel, Field, ValidationError, field_validator

# Load variables from a local .env file for development convenience
load_dotenv()

DEFAULT_AUTH_URL = "https://auth.jampp.com/v1/oauth/token"
DEFAULT_API_URL = "https://reporting-api.jampp.com/v1/graphql"


class JamppConfig(BaseModel):
    """Configuration values required to interact with the Jampp reporting API."""

    client_id: str
    client_secret: str
    auth_url: str | AnyUrl = DEFAULT_AUTH_URL
    api_url: str | AnyUrl = DEFAULT_API_URL
    verify_ssl: bool = True
    timeout_ms: int = Field(default=10000, ge=1000, le=600000)

    @field_validator("client_id", "client_secret")
    @classmethod
    def _require_non_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "client credentials must not be blank"
            raise ValueError(msg)
        return value

    @property
    def auth_url_str(self) -> str:
        """Return the token endpoint URL as a plain string."""
        return str(self.auth_url)

    @property
    def api_url_str(self) -> str:
        """Return the GraphQL endpoint URL as a plain string."""
        return str(self.api_url)

    @classmethod
    def from_env(cls) -> JamppConfig:
        """Build a configuration object from environment variables."""
        client_id = os.getenv("JAMPP_CLIENT_ID")
        client_secret = os.getenv("JAMPP_CLIENT_SECRET")
        if not client_id or not client_secret:
            msg = "Missing Jampp API credentials. Set JAMPP_CLIENT_ID and JAMPP_CLIENT_SECRET."
            raise RuntimeError(msg)
        raw_config: dict[str, Any] = {
            "client_id": client_id,
            "client_secret": client_secret,
            "auth_url": os.getenv("JAMPP_AUTH_URL"),
            "api_url": os.getenv("JAMPP_API_URL"),
            "verify_ssl": os.getenv("JAMPP_VERIFY_SSL"),
            "timeout_ms": os.getenv("JAMPP_TIMEOUT_MS"),
        }
        # Unset optional variables fall back to the model defaults
        raw_config = {key: value for key, value in raw_config.items() if value}
        try:
            return cls(**raw_config)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            msg = f"Invalid Jampp configuration: {messages}"
            raise RuntimeError(msg) from exc


__all__ = ["DEFAULT_API_URL", "DEFAULT_AUTH_URL", "JamppConfig"]
