"""Pydantic models for the per-connector request/response fixtures."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExpectedResponse(BaseModel):
    """What the gateway is expected to answer for a scenario on a connector."""

    status: int = Field(..., ge=100, le=599)
    body: dict[str, Any] = Field(default_factory=dict)
    # Connector fixtures may force the rest of a group to be skipped
    trigger_skip: Optional[bool] = None

    @property
    def error(self) -> Optional[dict[str, Any]]:
        error = self.body.get("error")
        return error if isinstance(error, dict) else None


class ScenarioDetails(BaseModel):
    """A ``{"Request": ..., "Response": ...}`` fixture entry."""

    model_config = ConfigDict(populate_by_name=True)

    request: dict[str, Any] = Field(default_factory=dict, alias="Request")
    response: ExpectedResponse = Field(..., alias="Response")
