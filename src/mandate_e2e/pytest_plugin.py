"""pytest fixtures and markers for the mandate suites.

Load with ``-p mandate_e2e.pytest_plugin``. Test modules get a ``global_state``
seeded from the configured store before their first test and flushed back after
their last one. Test classes marked ``@pytest.mark.scenario`` are scenario
groups: they share one ``scenario`` continuation gate, and once the gate halts
every remaining test of the class is skipped.
"""

from __future__ import annotations

from typing import Generator, Optional

import pytest

from .application.continuation import ContinuationGate
from .connectors.utils import ConnectorDetails, get_connector_details
from .domain.errors import GatewayNotConfiguredError
from .domain.state import GlobalState
from .env import Settings, get_settings
from .infrastructure.http.http_client import GatewayHttpClient
from .infrastructure.storage import StateStore, build_state_store


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add command-line options for the gateway suites."""
    parser.addoption(
        "--connector",
        default=None,
        help="Connector to run the suites against (overrides CONNECTOR_ID)",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "e2e: test drives a live payment gateway (needs GATEWAY_* env vars)"
    )
    config.addinivalue_line(
        "markers",
        "scenario(name=None): class is a scenario group; after a step halts the "
        "group's continuation gate the remaining steps are skipped",
    )


def _scenario_name(request: pytest.FixtureRequest) -> str:
    marker = request.node.get_closest_marker("scenario")
    if marker is not None:
        name: Optional[str] = marker.kwargs.get("name") or (
            marker.args[0] if marker.args else None
        )
        if name:
            return name
    if request.cls is not None:
        doc = (request.cls.__doc__ or "").strip()
        return doc.splitlines()[0] if doc else request.cls.__name__
    return request.module.__name__


@pytest.fixture(scope="session")
def e2e_settings(request: pytest.FixtureRequest) -> Settings:
    """Gateway settings; skips the requesting tests when none are configured."""
    try:
        return get_settings(connector_id=request.config.getoption("--connector"))
    except GatewayNotConfiguredError as e:
        pytest.skip(f"Payment gateway is not configured: {e}")


@pytest.fixture(scope="session")
def state_store(e2e_settings: Settings) -> StateStore:
    return build_state_store(e2e_settings)


@pytest.fixture(scope="session")
def gateway(e2e_settings: Settings) -> Generator[GatewayHttpClient, None, None]:
    with GatewayHttpClient(
        e2e_settings.base_url,
        e2e_settings.api_key,
        timeout=e2e_settings.timeout,
    ) as client:
        yield client


@pytest.fixture(scope="module")
def global_state(
    state_store: StateStore, e2e_settings: Settings
) -> Generator[GlobalState, None, None]:
    """Seed global state before the module runs and flush it afterwards."""
    state = GlobalState(state_store.load())
    state.set("base_url", e2e_settings.base_url)
    state.set("connector_id", e2e_settings.connector_id)
    yield state
    state_store.save(state.data)


@pytest.fixture(scope="module")
def connector_details(global_state: GlobalState) -> ConnectorDetails:
    return get_connector_details(global_state.require("connector_id"))


@pytest.fixture(scope="class")
def scenario(request: pytest.FixtureRequest) -> ContinuationGate:
    """Continuation gate shared by the steps of one scenario group."""
    return ContinuationGate(_scenario_name(request))


@pytest.fixture(autouse=True)
def _skip_halted_scenario(request: pytest.FixtureRequest) -> None:
    if request.node.get_closest_marker("scenario") is None:
        return
    gate: ContinuationGate = request.getfixturevalue("scenario")
    if gate.halted:
        pytest.skip(f"{gate.name}: an earlier step stopped this scenario")
