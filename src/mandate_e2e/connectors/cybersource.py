from __future__ import annotations

from typing import Any

from .commons import (
    capture_response,
    mandate_request,
    multi_use_mandate_type,
    single_use_mandate_type,
    status_response,
)

successful_card_details: dict[str, Any] = {
    "card_number": "4242424242424242",
    "card_exp_month": "01",
    "card_exp_year": "25",
    "card_holder_name": "joseph Doe",
    "card_cvc": "123",
}

connector_details: dict[str, Any] = {
    "card_pm": {
        "Capture": {
            "Request": {"card": successful_card_details, "currency": "USD"},
            "Response": capture_response("processing", 6500, 6500, 0),
        },
        "MandateSingleUseNo3DSAutoCapture": {
            "Request": mandate_request(successful_card_details, single_use_mandate_type),
            "Response": status_response("succeeded"),
        },
        "MandateSingleUseNo3DSManualCapture": {
            "Request": mandate_request(successful_card_details, single_use_mandate_type),
            "Response": status_response("requires_capture"),
        },
        "MandateMultiUseNo3DSAutoCapture": {
            "Request": mandate_request(successful_card_details, multi_use_mandate_type),
            "Response": status_response("succeeded"),
        },
        "MandateMultiUseNo3DSManualCapture": {
            "Request": mandate_request(successful_card_details, multi_use_mandate_type),
            "Response": status_response("requires_capture"),
        },
    },
}
