"""Shared pytest fixtures for the unit and integration tests."""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from mandate_e2e.connectors import ConnectorDetails, get_connector_details
from mandate_e2e.domain.state import GlobalState
from mandate_e2e.infrastructure.http.http_client import GatewayHttpClient

from tests.fixtures import FakeGateway, build_app


@pytest.fixture
def fake_gateway() -> FakeGateway:
    """In-memory gateway that supports mandates."""
    return FakeGateway()


@pytest.fixture
def gateway_client(
    fake_gateway: FakeGateway,
) -> Generator[GatewayHttpClient, None, None]:
    """GatewayHttpClient whose requests are served by ``fake_gateway``."""
    test_client = TestClient(build_app(fake_gateway))
    with GatewayHttpClient(
        "http://testserver", fake_gateway.api_key, http_client=test_client
    ) as client:
        yield client
    test_client.close()


@pytest.fixture
def state() -> GlobalState:
    """Fresh global state for a single test."""
    return GlobalState({"connector_id": "stripe"})


@pytest.fixture
def stripe_details() -> ConnectorDetails:
    return get_connector_details("stripe")
