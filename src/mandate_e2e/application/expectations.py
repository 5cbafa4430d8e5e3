"""Response assertions shared by the call tests."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from ..connectors.models import ExpectedResponse
from ..domain.errors import ExpectationError


def expect(condition: bool, message: str) -> None:
    if not condition:
        raise ExpectationError(message)


def expect_equal(expected: Any, actual: Any, what: str) -> None:
    if expected != actual:
        raise ExpectationError(f"{what}: expected {expected!r}, got {actual!r}")


def expect_json(response: httpx.Response) -> Any:
    """Check the content type and return the decoded body."""
    content_type = response.headers.get("content-type", "")
    expect(
        "application/json" in content_type,
        f"Expected a JSON response, got content-type {content_type!r}",
    )
    return response.json()


def expect_body_subset(expected: Mapping[str, Any], actual: Mapping[str, Any]) -> None:
    """Every key of the expected body must be present with an equal value."""
    for key, value in expected.items():
        expect_equal(value, actual.get(key), f"response body[{key!r}]")


def default_error_handler(body: Mapping[str, Any], response_data: ExpectedResponse) -> None:
    """Compare an error body against the connector's expected error."""
    expect("error" in body, f"Expected an error object in the response, got {dict(body)!r}")
    actual_error = body["error"]
    expect(
        isinstance(actual_error, Mapping),
        f"Expected the error to be an object, got {actual_error!r}",
    )
    for key, value in (response_data.error or {}).items():
        expect_equal(value, actual_error.get(key), f"error[{key!r}]")
