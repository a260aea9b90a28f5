"""
Tests for open enums.
"""
from dodopayments.models import Currency, IntentStatus, LicenseKey, LicenseKeyStatus, WebhookEventType


class TestOpenEnum:
    """Tests for OpenEnum behaviour."""

    def test_known_value(self):
        """Should return the declared member for a known value."""
        assert IntentStatus("succeeded") is IntentStatus.SUCCEEDED
        assert IntentStatus.SUCCEEDED.is_known

    def test_unknown_value_is_kept(self):
        """Should keep a value the SDK does not declare."""
        status = IntentStatus("settled_later")

        assert status.value == "settled_later"
        assert status == "settled_later"
        assert not status.is_known

    def test_unknown_value_is_cached(self):
        """Should return the same object for repeated unknown values."""
        assert Currency("XTS") is Currency("XTS")

    def test_unknown_values_are_not_members(self):
        """Should not add unknown values to the declared members."""
        LicenseKeyStatus("suspended")

        assert "suspended" not in LicenseKeyStatus.known_values()
        assert LicenseKeyStatus.known_values() == frozenset({"active", "expired", "disabled"})

    def test_str_is_value(self):
        """Should render as the bare wire value."""
        assert str(WebhookEventType.PAYMENT_SUCCEEDED) == "payment.succeeded"

    def test_unknown_value_in_response(self, mock_responses):
        """Should decode a response carrying an unknown enum value."""
        license_key = LicenseKey.from_wire({**mock_responses["license_key"], "status": "suspended"})

        assert license_key.status.value == "suspended"
        assert license_key.to_wire()["status"] == "suspended"
