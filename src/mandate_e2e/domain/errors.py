"""Domain-specific exceptions."""

from __future__ import annotations


class ConnectorNotFoundError(LookupError):
    """Raised when no connector details are registered for a connector id."""

    def __init__(self, connector_id: str) -> None:
        self.connector_id = connector_id
        super().__init__(f"No connector details registered for {connector_id!r}")


class ScenarioNotFoundError(LookupError):
    """Raised when a connector lacks a payment method category or scenario."""

    def __init__(self, connector_id: str, category: str, scenario: str) -> None:
        self.connector_id = connector_id
        self.category = category
        self.scenario = scenario
        super().__init__(
            f"Connector {connector_id!r} has no scenario {category}/{scenario}"
        )


class MissingStateError(KeyError):
    """Raised when a step needs a global state value an earlier step never set."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Global state has no value for {self.key!r}"


class StateStoreError(RuntimeError):
    """Raised when persisted global state cannot be read or written."""


class ExpectationError(AssertionError):
    """Raised when a gateway response does not match the expected response."""


class GatewayNotConfiguredError(ValueError):
    """Raised when the variables naming the gateway under test are not set."""
