"""Card - SingleUse Mandates flow test."""

from __future__ import annotations

import pytest

from mandate_e2e.application import (
    capture_call_test,
    cit_for_mandates_call_test,
    mit_for_mandates_call_test,
)
from mandate_e2e.payloads import capture_body, cit_confirm_body, mit_confirm_body

pytestmark = pytest.mark.e2e


@pytest.mark.scenario
class TestNoThreeDSAutomaticCitAndSingleUseMit:
    """Card - NoThreeDS Create + Confirm Automatic CIT and Single use MIT payment flow test"""

    def test_confirm_no_3ds_cit(self, gateway, global_state, connector_details, scenario) -> None:
        data = connector_details.scenario("card_pm", "MandateSingleUseNo3DSAutoCapture")
        with scenario.validating(data.response):
            cit_for_mandates_call_test(
                gateway,
                cit_confirm_body(),
                data.request,
                data.response,
                7000,
                True,
                "automatic",
                "new_mandate",
                global_state,
            )

    def test_confirm_no_3ds_mit(self, gateway, global_state) -> None:
        mit_for_mandates_call_test(
            gateway, mit_confirm_body(), 7000, True, "automatic", global_state
        )


@pytest.mark.scenario
class TestNoThreeDSManualCitAndSingleUseMit:
    """Card - NoThreeDS Create + Confirm Manual CIT and Single use MIT payment flow test"""

    def test_confirm_no_3ds_cit(self, gateway, global_state, connector_details, scenario) -> None:
        data = connector_details.scenario("card_pm", "MandateSingleUseNo3DSManualCapture")
        with scenario.validating(data.response):
            cit_for_mandates_call_test(
                gateway,
                cit_confirm_body(),
                data.request,
                data.response,
                6500,
                True,
                "manual",
                "new_mandate",
                global_state,
            )

    def test_cit_capture_call(self, gateway, global_state, connector_details, scenario) -> None:
        data = connector_details.scenario("card_pm", "Capture")
        with scenario.validating(data.response):
            capture_call_test(
                gateway, capture_body(), data.request, data.response, 6500, global_state
            )

    def test_confirm_no_3ds_mit(self, gateway, global_state) -> None:
        mit_for_mandates_call_test(
            gateway, mit_confirm_body(), 6500, True, "manual", global_state
        )

    def test_mit_capture_call(self, gateway, global_state, connector_details, scenario) -> None:
        data = connector_details.scenario("card_pm", "Capture")
        with scenario.validating(data.response):
            capture_call_test(
                gateway, capture_body(), data.request, data.response, 6500, global_state
            )
