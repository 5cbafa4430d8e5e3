"""Call tests for mandate payments: CIT confirm, MIT confirm and capture."""

from __future__ import annotations

import logging
from typing import Any, Literal, Mapping, Union

from ..connectors.models import ExpectedResponse
from ..domain.errors import ExpectationError
from ..domain.state import GlobalState
from ..infrastructure.http.http_client import GatewayHttpClient
from .expectations import (
    default_error_handler,
    expect,
    expect_body_subset,
    expect_equal,
    expect_json,
)

logger = logging.getLogger(__name__)

CaptureMethod = Literal["automatic", "manual"]
PaymentType = Literal["normal", "new_mandate", "setup_mandate", "recurring_mandate"]

ResponseData = Union[ExpectedResponse, Mapping[str, Any]]


def _as_expected(response_data: ResponseData) -> ExpectedResponse:
    if isinstance(response_data, ExpectedResponse):
        return response_data
    return ExpectedResponse.model_validate(response_data)


def apply_request_data(
    request_body: dict[str, Any], request_data: Mapping[str, Any]
) -> dict[str, Any]:
    """Write connector request overrides into a payment body.

    ``card`` lands in ``payment_method_data.card`` and ``mandate_type`` in
    ``mandate_data.mandate_type``; any other key replaces the top-level field.
    """
    for key, value in request_data.items():
        if key == "card":
            request_body.setdefault("payment_method_data", {})["card"] = value
        elif key == "mandate_type":
            request_body.setdefault("mandate_data", {})["mandate_type"] = value
        else:
            request_body[key] = value
    return request_body


def _store_next_action(body: Mapping[str, Any], state: GlobalState) -> None:
    next_action = body.get("next_action") or {}
    redirect_to_url = next_action.get("redirect_to_url")
    expect(
        bool(redirect_to_url),
        f"Expected next_action.redirect_to_url for a 3DS payment, got {next_action!r}",
    )
    state.set("next_action_url", redirect_to_url)


def cit_for_mandates_call_test(
    client: GatewayHttpClient,
    request_body: dict[str, Any],
    request_data: Mapping[str, Any],
    response_data: ResponseData,
    amount: int,
    confirm: bool,
    capture_method: CaptureMethod,
    payment_type: PaymentType,
    state: GlobalState,
) -> dict[str, Any]:
    """Create and confirm the cardholder-initiated payment that sets up a mandate.

    On success the payment, mandate and payment method ids are stored in
    ``state`` for the MIT and capture steps that follow.
    """
    expected = _as_expected(response_data)
    apply_request_data(request_body, request_data)
    request_body["payment_type"] = payment_type
    request_body["amount"] = amount
    request_body["confirm"] = confirm
    request_body["capture_method"] = capture_method
    customer_id = state.get("customer_id")
    if customer_id is not None:
        request_body["customer_id"] = customer_id
    state.set("payment_amount", amount)

    response = client.post("/payments", json=request_body)
    expect_equal(expected.status, response.status_code, "HTTP status")
    body = expect_json(response)

    if response.status_code != 200:
        default_error_handler(body, expected)
        return body

    state.set("payment_id", body.get("payment_id"))
    state.set("mandate_id", body.get("mandate_id"))
    state.set("payment_method_id", body.get("payment_method_id"))
    logger.info(
        "CIT %s created mandate %s (%s capture)",
        body.get("payment_id"),
        body.get("mandate_id"),
        capture_method,
    )

    expect_equal(capture_method, body.get("capture_method"), "capture_method")
    authentication_type = body.get("authentication_type")
    if authentication_type == "three_ds":
        _store_next_action(body, state)
    elif authentication_type == "no_three_ds":
        expect_body_subset(expected.body, body)
    else:
        raise ExpectationError(f"Invalid authentication type {authentication_type!r}")
    return body


def mit_for_mandates_call_test(
    client: GatewayHttpClient,
    request_body: dict[str, Any],
    amount: int,
    confirm: bool,
    capture_method: CaptureMethod,
    state: GlobalState,
) -> dict[str, Any]:
    """Charge the stored mandate with a merchant-initiated payment."""
    request_body["amount"] = amount
    request_body["confirm"] = confirm
    request_body["capture_method"] = capture_method
    request_body["mandate_id"] = state.require("mandate_id")
    customer_id = state.get("customer_id")
    if customer_id is not None:
        request_body["customer_id"] = customer_id
    state.set("payment_amount", amount)

    response = client.post("/payments", json=request_body)
    body = expect_json(response)
    expect_equal(200, response.status_code, f"HTTP status (body: {body!r})")

    state.set("payment_id", body.get("payment_id"))
    logger.info(
        "MIT %s on mandate %s -> %s",
        body.get("payment_id"),
        request_body["mandate_id"],
        body.get("status"),
    )

    authentication_type = body.get("authentication_type")
    if authentication_type == "three_ds":
        _store_next_action(body, state)
    elif authentication_type == "no_three_ds":
        if capture_method == "automatic":
            expect_equal("succeeded", body.get("status"), "MIT status")
        else:
            expect_equal("requires_capture", body.get("status"), "MIT status")
    else:
        raise ExpectationError(f"Invalid authentication type {authentication_type!r}")
    return body


def capture_call_test(
    client: GatewayHttpClient,
    request_body: dict[str, Any],
    request_data: Mapping[str, Any],
    response_data: ResponseData,
    amount: int,
    state: GlobalState,
) -> dict[str, Any]:
    """Capture ``amount`` on the last payment stored in ``state``.

    ``request_data`` is accepted so every call test reads the same scenario
    entry; capture bodies take no connector overrides.
    """
    expected = _as_expected(response_data)
    payment_id = state.require("payment_id")
    request_body["amount_to_capture"] = amount

    response = client.post(f"/payments/{payment_id}/capture", json=request_body)
    expect_equal(expected.status, response.status_code, "HTTP status")
    body = expect_json(response)

    if response.status_code != 200:
        default_error_handler(body, expected)
        return body

    expect_equal(payment_id, body.get("payment_id"), "payment_id")
    expect_body_subset(expected.body, body)
    logger.info("Captured %s on %s -> %s", amount, payment_id, body.get("status"))
    return body
