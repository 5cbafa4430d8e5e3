"""Card details and mandate shapes shared by the connector fixtures."""

from __future__ import annotations

from typing import Any

successful_no3ds_card_details: dict[str, Any] = {
    "card_number": "4242424242424242",
    "card_exp_month": "01",
    "card_exp_year": "50",
    "card_holder_name": "joseph Doe",
    "card_cvc": "123",
}

visa_test_card_details: dict[str, Any] = {
    "card_number": "4111111111111111",
    "card_exp_month": "03",
    "card_exp_year": "30",
    "card_holder_name": "John Doe",
    "card_cvc": "737",
}

single_use_mandate_type: dict[str, Any] = {
    "single_use": {
        "amount": 8000,
        "currency": "USD",
    }
}

multi_use_mandate_type: dict[str, Any] = {
    "multi_use": {
        "amount": 8000,
        "currency": "USD",
    }
}


def mandate_request(
    card: dict[str, Any], mandate_type: dict[str, Any], currency: str = "USD"
) -> dict[str, Any]:
    """Request overrides for a CIT that sets up a mandate."""
    return {
        "card": dict(card),
        "currency": currency,
        "mandate_type": mandate_type,
    }


def status_response(status: str, status_code: int = 200) -> dict[str, Any]:
    return {"status": status_code, "body": {"status": status}}


def capture_response(
    status: str, amount: int, amount_capturable: int, amount_received: int
) -> dict[str, Any]:
    return {
        "status": 200,
        "body": {
            "status": status,
            "amount": amount,
            "amount_capturable": amount_capturable,
            "amount_received": amount_received,
        },
    }


def error_response(
    message: str, code: str, error_type: str = "invalid_request", status_code: int = 400
) -> dict[str, Any]:
    return {
        "status": status_code,
        "body": {
            "error": {
                "type": error_type,
                "message": message,
                "code": code,
            }
        },
    }
