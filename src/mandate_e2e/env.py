from __future__ import annotations

import os
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

from .domain.errors import GatewayNotConfiguredError


class Settings(BaseModel):
    """Typed settings for a suite run, built from environment variables."""

    base_url: str
    api_key: str
    connector_id: str

    # Global state persistence
    state_path: str = ".e2e-state.json"
    state_redis_url: Optional[str] = None
    state_key: str = "mandate_e2e:global_state"

    # HTTP settings
    timeout: float = 30.0

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v:
            raise ValueError("Gateway base URL cannot be empty")
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError("Gateway base URL must start with http:// or https://")
        if not parsed.netloc:
            raise ValueError("Gateway base URL must include a host")
        return v.rstrip("/")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Gateway API key cannot be empty")
        return v.strip()

    @field_validator("connector_id")
    @classmethod
    def validate_connector_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Connector id cannot be empty")
        return v.strip().lower()

    @field_validator("state_redis_url")
    @classmethod
    def validate_state_redis_url(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        if urlparse(v).scheme not in {"redis", "rediss", "unix"}:
            raise ValueError("State Redis URL must start with redis://, rediss:// or unix://")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Gateway timeout must be positive")
        return v


def get_settings(connector_id: Optional[str] = None) -> Settings:
    """Return typed settings instance sourced from env vars.

    ``connector_id`` overrides ``CONNECTOR_ID`` when given.
    """
    base_url = os.environ.get("GATEWAY_BASE_URL")
    api_key = os.environ.get("GATEWAY_API_KEY")
    connector_id = connector_id or os.environ.get("CONNECTOR_ID")
    if not (base_url and api_key and connector_id):
        raise GatewayNotConfiguredError(
            "GATEWAY_BASE_URL, GATEWAY_API_KEY, and CONNECTOR_ID are required"
        )
    return Settings(
        base_url=base_url,
        api_key=api_key,
        connector_id=connector_id,
        state_path=os.environ.get("E2E_STATE_PATH", ".e2e-state.json"),
        state_redis_url=os.environ.get("E2E_STATE_REDIS_URL") or None,
        state_key=os.environ.get("E2E_STATE_KEY", "mandate_e2e:global_state"),
        timeout=os.environ.get("GATEWAY_TIMEOUT", "30"),
    )
