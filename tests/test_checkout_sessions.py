"""
Tests for the checkout sessions resource.
"""
import pytest

from dodopayments import MissingRequiredField
from dodopayments.models import CheckoutSessionResponse, CheckoutSessionStatus, IntentStatus, InvalidField

BASE_URL = "https://test.dodopayments.com"


class TestCreateCheckoutSession:
    """Tests for checkout_sessions.create."""

    def test_minimal_request(self, client, httpx_mock, mock_responses):
        """Should send only the product cart when nothing else is given."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkouts", method="POST", json=mock_responses["checkout_session"])

        session = client.checkout_sessions.create(product_cart=[{"product_id": "pdt_1", "quantity": 1}])

        assert isinstance(session, CheckoutSessionResponse)
        assert session.session_id == "cks_123"
        assert httpx_mock.last_request().json == {"product_cart": [{"product_id": "pdt_1", "quantity": 1}]}

    def test_full_request(self, client, httpx_mock, mock_responses):
        """Should encode nested options and explicit nulls."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkouts", method="POST", json=mock_responses["checkout_session"])

        client.checkout_sessions.create(
            product_cart=[{"product_id": "pdt_1", "quantity": 2, "addons": [{"addon_id": "adn_1", "quantity": 1}]}],
            customer={"email": "ada@example.com", "name": "Ada"},
            billing_address={"country": "US"},
            feature_flags={"allow_discount_code": True},
            return_url="https://example.com/done",
            discount_code=None,
        )

        body = httpx_mock.last_request().json
        assert body["customer"] == {"email": "ada@example.com", "name": "Ada"}
        assert body["billing_address"] == {"country": "US"}
        assert body["feature_flags"] == {"allow_discount_code": True}
        assert body["product_cart"][0]["addons"] == [{"addon_id": "adn_1", "quantity": 1}]
        assert body["discount_code"] is None
        assert "confirm" not in body

    def test_invalid_argument_is_not_sent(self, client, httpx_mock):
        """Should raise before sending when an argument has the wrong shape."""
        with pytest.raises(InvalidField):
            client.checkout_sessions.create(product_cart=[{"product_id": "pdt_1"}])

        assert httpx_mock.requests == []

    def test_missing_required_field_in_cart(self, client, httpx_mock):
        """Should refuse to send a cart item that was built incomplete."""
        from dodopayments.models import CheckoutProductCartItem

        with pytest.raises(MissingRequiredField):
            client.checkout_sessions.create(product_cart=[CheckoutProductCartItem.empty().set("product_id", "pdt_1")])

        assert httpx_mock.requests == []


class TestRetrieveCheckoutSession:
    """Tests for checkout_sessions.retrieve."""

    def test_retrieve(self, client, httpx_mock, mock_responses):
        """Should fetch the session status."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkouts/cks_123", json=mock_responses["checkout_status"])

        status = client.checkout_sessions.retrieve("cks_123")

        assert isinstance(status, CheckoutSessionStatus)
        assert status.payment_status is IntentStatus.SUCCEEDED

    def test_path_is_quoted(self, client, httpx_mock, mock_responses):
        """Should escape identifiers used in the path."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkouts/a%2Fb", json=mock_responses["checkout_status"])

        client.checkout_sessions.retrieve("a/b")

        assert httpx_mock.last_request().url == f"{BASE_URL}/checkouts/a%2Fb"

    async def test_async_create(self, async_client, httpx_mock, mock_responses):
        """Should create a session with the async client."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkouts", method="POST", json=mock_responses["checkout_session"])

        session = await async_client.checkout_sessions.create(product_cart=[{"product_id": "pdt_1", "quantity": 1}])

        assert session.checkout_url.endswith("cks_123")
