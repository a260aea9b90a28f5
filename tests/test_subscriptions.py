"""
Tests for the subscriptions resource.
"""
import pytest

from dodopayments.models import ExistingPaymentMethod, NoVariantMatched, Subscription, SubscriptionStatus

BASE_URL = "https://test.dodopayments.com"

SUBSCRIPTION = {
    "addons": [],
    "billing": {"city": "London", "country": "GB", "state": "London", "street": "1 Main St", "zipcode": "N1 9GU"},
    "cancel_at_next_billing_date": False,
    "created_at": "2025-01-20T00:00:00Z",
    "currency": "USD",
    "customer": {"customer_id": "cus_123", "email": "ada@example.com", "name": "Ada Lovelace"},
    "meters": [],
    "metadata": {},
    "next_billing_date": "2025-02-20T00:00:00Z",
    "on_demand": False,
    "payment_frequency_count": 1,
    "payment_frequency_interval": "Month",
    "previous_billing_date": "2025-01-20T00:00:00Z",
    "product_id": "pdt_123",
    "quantity": 1,
    "recurring_pre_tax_amount": 999,
    "status": "active",
    "subscription_id": "sub_123",
    "subscription_period_count": 12,
    "subscription_period_interval": "Month",
    "tax_inclusive": False,
    "trial_period_days": 0,
}


class TestSubscriptions:
    """Tests for the subscriptions resource."""

    def test_retrieve(self, client, httpx_mock):
        """Should decode a subscription."""
        httpx_mock.add_response(url=f"{BASE_URL}/subscriptions/sub_123", json=SUBSCRIPTION)

        subscription = client.subscriptions.retrieve("sub_123")

        assert isinstance(subscription, Subscription)
        assert subscription.status is SubscriptionStatus.ACTIVE
        assert subscription.payment_frequency_interval.value == "Month"

    def test_unknown_status_is_kept(self, client, httpx_mock):
        """Should keep a status this SDK does not know about."""
        httpx_mock.add_response(url=f"{BASE_URL}/subscriptions/sub_123", json={**SUBSCRIPTION, "status": "paused"})

        subscription = client.subscriptions.retrieve("sub_123")

        assert subscription.status.value == "paused"
        assert not subscription.status.is_known

    def test_change_plan_returns_none(self, client, httpx_mock):
        """Should post the plan change and return nothing."""
        httpx_mock.add_response(url=f"{BASE_URL}/subscriptions/sub_123/change-plan", method="POST")

        result = client.subscriptions.change_plan(
            "sub_123", product_id="pdt_456", proration_billing_mode="prorated_immediately", quantity=2
        )

        assert result is None
        assert httpx_mock.last_request().json == {
            "product_id": "pdt_456",
            "proration_billing_mode": "prorated_immediately",
            "quantity": 2,
        }

    def test_charge(self, client, httpx_mock):
        """Should charge an on-demand subscription."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/subscriptions/sub_123/charge", method="POST", json={"payment_id": "pay_9"}
        )

        response = client.subscriptions.charge(
            "sub_123", product_price=2500, customer_balance_config={"allow_customer_credits_usage": True}
        )

        assert response.payment_id == "pay_9"
        assert httpx_mock.last_request().json == {
            "product_price": 2500,
            "customer_balance_config": {"allow_customer_credits_usage": True},
        }

    @pytest.mark.parametrize(
        "payment_method, body",
        [
            ({"type": "new", "return_url": "https://example.com"}, {"type": "new", "return_url": "https://example.com"}),
            (
                ExistingPaymentMethod(type="existing", payment_method_id="pm_1"),
                {"type": "existing", "payment_method_id": "pm_1"},
            ),
        ],
    )
    def test_update_payment_method(self, client, httpx_mock, payment_method, body):
        """Should send the chosen payment method variant."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/subscriptions/sub_123/update-payment-method",
            method="POST",
            json={"payment_link": "https://checkout.dodopayments.com/x"},
        )

        response = client.subscriptions.update_payment_method("sub_123", payment_method)

        assert response.payment_link == "https://checkout.dodopayments.com/x"
        assert httpx_mock.last_request().json == body

    def test_update_payment_method_rejects_unknown_variant(self, client, httpx_mock):
        """Should refuse a payment method that fits no variant."""
        with pytest.raises(NoVariantMatched):
            client.subscriptions.update_payment_method("sub_123", {"type": "wire_transfer"})

        assert httpx_mock.requests == []

    async def test_async_list(self, async_client, httpx_mock):
        """Should list subscriptions with the async client."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/subscriptions?status=active", json={"items": [SUBSCRIPTION]}
        )

        page = await async_client.subscriptions.list(status="active")

        assert [item.subscription_id for item in page.items] == ["sub_123"]
        assert not page.has_next_page()
