from __future__ import annotations

from typing import Any

from .commons import (
    capture_response,
    error_response,
    mandate_request,
    multi_use_mandate_type,
    single_use_mandate_type,
)

successful_card_details: dict[str, Any] = {
    "card_number": "4200000000000000",
    "card_exp_month": "10",
    "card_exp_year": "25",
    "card_holder_name": "joseph Doe",
    "card_cvc": "123",
}

mandates_not_supported = error_response(
    "Setup Mandate flow for Trustpay is not implemented", "IR_00"
)

connector_details: dict[str, Any] = {
    "card_pm": {
        "Capture": {
            "Request": {"card": successful_card_details, "currency": "USD"},
            "Response": capture_response("succeeded", 6500, 0, 6500),
        },
        "MandateSingleUseNo3DSAutoCapture": {
            "Request": mandate_request(successful_card_details, single_use_mandate_type),
            "Response": mandates_not_supported,
        },
        "MandateSingleUseNo3DSManualCapture": {
            "Request": mandate_request(successful_card_details, single_use_mandate_type),
            "Response": mandates_not_supported,
        },
        "MandateMultiUseNo3DSAutoCapture": {
            "Request": mandate_request(successful_card_details, multi_use_mandate_type),
            "Response": mandates_not_supported,
        },
        "MandateMultiUseNo3DSManualCapture": {
            "Request": mandate_request(successful_card_details, multi_use_mandate_type),
            "Response": mandates_not_supported,
        },
    },
}
