"""Per-connector request/response fixtures for the payment flows."""

from .models import ExpectedResponse, ScenarioDetails
from .utils import (
    CONNECTOR_DETAILS,
    ConnectorDetails,
    get_connector_details,
    should_continue_further,
)

__all__ = [
    "CONNECTOR_DETAILS",
    "ConnectorDetails",
    "ExpectedResponse",
    "ScenarioDetails",
    "get_connector_details",
    "should_continue_further",
]
