"""Call test creating the customer that mandates are attached to."""

from __future__ import annotations

import logging
from typing import Any

from ..domain.state import GlobalState
from ..infrastructure.http.http_client import GatewayHttpClient
from .expectations import expect, expect_equal, expect_json

logger = logging.getLogger(__name__)


def create_customer_call_test(
    client: GatewayHttpClient,
    request_body: dict[str, Any],
    state: GlobalState,
) -> dict[str, Any]:
    response = client.post("/customers", json=request_body)
    body = expect_json(response)
    expect_equal(200, response.status_code, f"HTTP status (body: {body!r})")
    customer_id = body.get("customer_id")
    expect(bool(customer_id), "Customer create response has no customer_id")
    state.set("customer_id", customer_id)
    logger.info("Created customer %s", customer_id)
    return body
