"""Connector detail lookup and the continue-or-stop predicate."""

from __future__ import annotations

import copy
from typing import Any, Mapping, Union

from ..domain.errors import ConnectorNotFoundError, ScenarioNotFoundError
from . import adyen, bankofamerica, cybersource, nmi, stripe, trustpay
from .models import ExpectedResponse, ScenarioDetails

CONNECTOR_DETAILS: dict[str, dict[str, Any]] = {
    "adyen": adyen.connector_details,
    "bankofamerica": bankofamerica.connector_details,
    "cybersource": cybersource.connector_details,
    "nmi": nmi.connector_details,
    "stripe": stripe.connector_details,
    "trustpay": trustpay.connector_details,
}

_ERROR_KEYS = ("error", "error_code", "error_message")


class ConnectorDetails:
    """Read-only view over one connector's scenario fixtures."""

    def __init__(self, connector_id: str, details: Mapping[str, Any]) -> None:
        self.connector_id = connector_id
        self._details = details

    def scenario(self, category: str, name: str) -> ScenarioDetails:
        """Return a validated copy of ``[category][name]``."""
        try:
            raw = self._details[category][name]
        except KeyError:
            raise ScenarioNotFoundError(self.connector_id, category, name) from None
        # Call tests mutate request data into bodies; never hand out the registry's dicts
        return ScenarioDetails.model_validate(copy.deepcopy(raw))


def get_connector_details(connector_id: str) -> ConnectorDetails:
    key = connector_id.strip().lower()
    details = CONNECTOR_DETAILS.get(key)
    if details is None:
        raise ConnectorNotFoundError(connector_id)
    return ConnectorDetails(key, details)


def should_continue_further(
    response_data: Union[ExpectedResponse, Mapping[str, Any]],
) -> bool:
    """Whether a group may go on after a step expecting ``response_data``.

    An explicit ``trigger_skip`` wins; otherwise an expected body that carries
    an error means the connector cannot complete the flow.
    """
    if isinstance(response_data, ExpectedResponse):
        trigger_skip = response_data.trigger_skip
        body: Mapping[str, Any] = response_data.body
    else:
        trigger_skip = response_data.get("trigger_skip")
        body = response_data.get("body") or {}

    if trigger_skip is not None:
        return not trigger_skip
    return not any(key in body for key in _ERROR_KEYS)
