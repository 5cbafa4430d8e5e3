"""Literal request bodies the call tests start from.

Every accessor returns a fresh dict. Call tests write amounts, identifiers and
connector request data into the body they are given, so reusing one object
across steps would leak one step's values into the next.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any

CAPTURE_FLOW_BODY = "capture-flow-body.json"
CREATE_MANDATE_CIT = "create-mandate-cit.json"
CREATE_MANDATE_MIT = "create-mandate-mit.json"
CREATE_CUSTOMER_BODY = "create-customer-body.json"


@lru_cache(maxsize=None)
def _read(name: str) -> str:
    return resources.files(__name__).joinpath(name).read_text(encoding="utf-8")


def load_payload(name: str) -> dict[str, Any]:
    """Parse the named JSON body into a new dict."""
    return json.loads(_read(name))


def capture_body() -> dict[str, Any]:
    return load_payload(CAPTURE_FLOW_BODY)


def cit_confirm_body() -> dict[str, Any]:
    return load_payload(CREATE_MANDATE_CIT)


def mit_confirm_body() -> dict[str, Any]:
    return load_payload(CREATE_MANDATE_MIT)


def customer_create_body() -> dict[str, Any]:
    return load_payload(CREATE_CUSTOMER_BODY)
