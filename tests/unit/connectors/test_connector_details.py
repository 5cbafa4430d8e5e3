"""Unit tests for connector detail lookup and should_continue_further."""

import pytest

from mandate_e2e.connectors import (
    CONNECTOR_DETAILS,
    ExpectedResponse,
    ScenarioDetails,
    get_connector_details,
    should_continue_further,
)
from mandate_e2e.domain.errors import ConnectorNotFoundError, ScenarioNotFoundError

MANDATE_SCENARIOS = [
    "MandateSingleUseNo3DSAutoCapture",
    "MandateSingleUseNo3DSManualCapture",
    "MandateMultiUseNo3DSAutoCapture",
    "MandateMultiUseNo3DSManualCapture",
    "Capture",
]


class TestGetConnectorDetails:
    """Test the per-connector lookup."""

    def test_lookup_is_case_insensitive(self) -> None:
        details = get_connector_details(" Stripe ")
        assert details.connector_id == "stripe"
        assert details.scenario("card_pm", "Capture").response.status == 200

    def test_unknown_connector_raises(self) -> None:
        with pytest.raises(ConnectorNotFoundError, match="paypal"):
            get_connector_details("paypal")

    def test_unknown_scenario_raises(self) -> None:
        details = get_connector_details("stripe")
        with pytest.raises(ScenarioNotFoundError, match="card_pm/Nope"):
            details.scenario("card_pm", "Nope")
        with pytest.raises(ScenarioNotFoundError):
            details.scenario("bank_redirect_pm", "Capture")

    def test_scenario_returns_independent_copies(self) -> None:
        """Mutating a returned scenario never leaks into the registry."""
        details = get_connector_details("stripe")
        first = details.scenario("card_pm", "MandateMultiUseNo3DSAutoCapture")
        first.request["card"]["card_number"] = "0000"
        first.request["mandate_type"]["multi_use"]["amount"] = 1

        second = details.scenario("card_pm", "MandateMultiUseNo3DSAutoCapture")
        assert second.request["card"]["card_number"] == "4242424242424242"
        assert second.request["mandate_type"]["multi_use"]["amount"] == 8000

    @pytest.mark.parametrize("connector_id", sorted(CONNECTOR_DETAILS))
    @pytest.mark.parametrize("scenario", MANDATE_SCENARIOS)
    def test_every_connector_declares_mandate_scenarios(
        self, connector_id: str, scenario: str
    ) -> None:
        data = get_connector_details(connector_id).scenario("card_pm", scenario)
        assert isinstance(data, ScenarioDetails)
        assert "card" in data.request


class TestScenarioDetailsModel:
    def test_accepts_fixture_aliases(self) -> None:
        data = ScenarioDetails.model_validate(
            {"Request": {"currency": "USD"}, "Response": {"status": 200, "body": {}}}
        )
        assert data.request == {"currency": "USD"}
        assert data.response.status == 200
        assert data.response.error is None

    def test_error_property(self) -> None:
        response = ExpectedResponse(status=400, body={"error": {"code": "IR_00"}})
        assert response.error == {"code": "IR_00"}


class TestShouldContinueFurther:
    """Test the continue-or-stop predicate."""

    def test_success_body_continues(self) -> None:
        assert should_continue_further({"status": 200, "body": {"status": "succeeded"}})

    @pytest.mark.parametrize("key", ["error", "error_code", "error_message"])
    def test_error_keys_stop(self, key: str) -> None:
        assert not should_continue_further({"status": 400, "body": {key: "boom"}})

    @pytest.mark.parametrize("key", ["error", "error_code", "error_message"])
    def test_null_error_keys_stop(self, key: str) -> None:
        """Presence of the key is what stops the group, not its value."""
        assert not should_continue_further({"status": 400, "body": {key: None}})

    def test_trigger_skip_wins(self) -> None:
        assert not should_continue_further(
            {"status": 200, "body": {"status": "succeeded"}, "trigger_skip": True}
        )
        assert should_continue_further(
            {"status": 400, "body": {"error": {"code": "x"}}, "trigger_skip": False}
        )

    def test_accepts_expected_response_model(self) -> None:
        assert should_continue_further(ExpectedResponse(status=200, body={}))
        assert not should_continue_further(
            ExpectedResponse(status=400, body={"error": {"code": "IR_00"}})
        )

    def test_missing_body_continues(self) -> None:
        assert should_continue_further({"status": 200})

    def test_unsupported_connector_mandates_stop(self) -> None:
        data = get_connector_details("trustpay").scenario(
            "card_pm", "MandateMultiUseNo3DSManualCapture"
        )
        assert not should_continue_further(data.response)
