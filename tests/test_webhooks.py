"""
Tests for webhook endpoints and event decoding.
"""
import json

import pytest

from dodopayments import NoVariantMatched, ShapeMismatch, SyncCursorPagePagination
from dodopayments.models import (
    CreditBalanceLowWebhookEvent,
    CreditLedgerWebhookEvent,
    LicenseKeyWebhookEvent,
    PaymentWebhookEvent,
    PayoutWebhookEvent,
)

BASE_URL = "https://test.dodopayments.com"


class TestWebhookEndpoints:
    """Tests for the webhooks resource."""

    def test_create(self, client, httpx_mock, mock_responses):
        """Should register an endpoint with event filters."""
        httpx_mock.add_response(url=f"{BASE_URL}/webhooks", method="POST", json=mock_responses["webhook"])

        webhook = client.webhooks.create(
            url="https://example.com/webhooks", filter_types=["payment.succeeded", "refund.succeeded"]
        )

        assert webhook.id == "wh_123"
        assert httpx_mock.last_request().json == {
            "url": "https://example.com/webhooks",
            "filter_types": ["payment.succeeded", "refund.succeeded"],
        }

    def test_list_follows_iterator(self, client, httpx_mock, mock_responses):
        """Should request the next page with the returned iterator."""
        second = {**mock_responses["webhook"], "id": "wh_456"}
        httpx_mock.add_response(
            url=f"{BASE_URL}/webhooks?limit=1",
            json={"data": [mock_responses["webhook"]], "iterator": "it_1", "done": False},
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/webhooks?limit=1&iterator=it_1",
            json={"data": [second], "iterator": None, "done": True},
        )

        page = client.webhooks.list(limit=1)

        assert isinstance(page, SyncCursorPagePagination)
        assert [webhook.id for webhook in page] == ["wh_123", "wh_456"]

    def test_retrieve_secret(self, client, httpx_mock):
        """Should fetch the signing secret."""
        httpx_mock.add_response(url=f"{BASE_URL}/webhooks/wh_123/secret", json={"secret": "whsec_abc"})

        assert client.webhooks.retrieve_secret("wh_123").secret == "whsec_abc"

    def test_update_headers(self, client, httpx_mock):
        """Should patch the custom headers and return nothing."""
        httpx_mock.add_response(url=f"{BASE_URL}/webhooks/wh_123/headers", method="PATCH")

        assert client.webhooks.headers.update("wh_123", headers={"X-Team": "billing"}) is None
        assert httpx_mock.last_request().json == {"headers": {"X-Team": "billing"}}

    async def test_async_delete(self, async_client, httpx_mock):
        """Should delete an endpoint with the async client."""
        httpx_mock.add_response(url=f"{BASE_URL}/webhooks/wh_123", method="DELETE", status_code=204)

        assert await async_client.webhooks.delete("wh_123") is None


class TestUnsafeUnwrap:
    """Tests for decoding delivered events."""

    def test_payment_event(self, client, mock_responses):
        """Should decode a payment event from a JSON string."""
        payload = json.dumps(
            {
                "business_id": "bus_123",
                "type": "payment.succeeded",
                "timestamp": "2025-01-20T00:00:05Z",
                "data": {**mock_responses["payment"], "payload_type": "Payment"},
            }
        )

        event = client.webhooks.unsafe_unwrap(payload)

        assert isinstance(event, PaymentWebhookEvent)
        assert event.data.payment_id == "pay_123"

    def test_license_key_event(self, client, mock_responses):
        """Should decode a license key event from a mapping."""
        event = client.webhooks.unsafe_unwrap(
            {
                "business_id": "bus_123",
                "type": "license_key.created",
                "timestamp": "2025-01-20T00:00:05Z",
                "data": {**mock_responses["license_key"], "payload_type": "LicenseKey"},
            }
        )

        assert isinstance(event, LicenseKeyWebhookEvent)
        assert event.data.key == "ABCD-EFGH-IJKL"

    def test_payout_event(self, client):
        """Should decode a payout event."""
        event = client.webhooks.unsafe_unwrap(
            {
                "business_id": "bus_123",
                "type": "payout.success",
                "timestamp": "2025-02-01T00:00:00Z",
                "data": {
                    "payload_type": "Payout",
                    "payout_id": "po_123",
                    "amount": 125000,
                    "business_id": "bus_123",
                    "chargebacks": 0,
                    "created_at": "2025-01-31T00:00:00Z",
                    "currency": "USD",
                    "fee": 250,
                    "payment_method": "bank_transfer",
                    "refunds": 1500,
                    "status": "success",
                    "tax": 0,
                    "updated_at": "2025-02-01T00:00:00Z",
                },
            }
        )

        assert isinstance(event, PayoutWebhookEvent)
        assert event.data.payout_id == "po_123"
        assert event.data.amount == 125000

    def test_credit_ledger_event(self, client):
        """Should decode a credit ledger event."""
        event = client.webhooks.unsafe_unwrap(
            {
                "business_id": "bus_123",
                "type": "credit.deducted",
                "timestamp": "2025-02-01T00:00:00Z",
                "data": {
                    "payload_type": "CreditLedgerEntry",
                    "id": "cle_1",
                    "amount": "25",
                    "balance_after": "75",
                    "balance_before": "100",
                    "business_id": "bus_123",
                    "created_at": "2025-02-01T00:00:00Z",
                    "credit_entitlement_id": "ce_1",
                    "customer_id": "cus_123",
                    "is_credit": False,
                    "overage_after": "0",
                    "overage_before": "0",
                    "transaction_type": "credit_deducted",
                },
            }
        )

        assert isinstance(event, CreditLedgerWebhookEvent)
        assert event.data.balance_after == "75"
        assert event.data.grant_id is None

    def test_credit_balance_low_event(self, client):
        """Should decode a low balance alert."""
        event = client.webhooks.unsafe_unwrap(
            {
                "business_id": "bus_123",
                "type": "credit.balance_low",
                "timestamp": "2025-02-01T00:00:00Z",
                "data": {
                    "payload_type": "CreditBalanceLow",
                    "available_balance": "8",
                    "credit_entitlement_id": "ce_1",
                    "credit_entitlement_name": "API calls",
                    "customer_id": "cus_123",
                    "subscription_credits_amount": "100",
                    "subscription_id": "sub_123",
                    "threshold_amount": "10",
                    "threshold_percent": 10,
                },
            }
        )

        assert isinstance(event, CreditBalanceLowWebhookEvent)
        assert event.data.threshold_percent == 10

    def test_unknown_event_type(self, client):
        """Should raise when no event model accepts the payload."""
        with pytest.raises(NoVariantMatched):
            client.webhooks.unsafe_unwrap(
                {"business_id": "bus_123", "type": "invoice.sent", "timestamp": "2025-01-20T00:00:05Z", "data": {}}
            )

    def test_invalid_json(self, client):
        """Should raise ShapeMismatch for a body that is not JSON."""
        with pytest.raises(ShapeMismatch):
            client.webhooks.unsafe_unwrap(b"not json")

    def test_not_an_object(self, client):
        """Should raise ShapeMismatch for a JSON array."""
        with pytest.raises(ShapeMismatch):
            client.webhooks.unsafe_unwrap("[]")
