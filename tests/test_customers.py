"""
Tests for customers, wallets and ledger entries.
"""
from dodopayments.models import Currency, Customer

BASE_URL = "https://test.dodopayments.com"


class TestCustomers:
    """Tests for the customers resource."""

    def test_create(self, client, httpx_mock, mock_responses):
        """Should create a customer."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers", method="POST", json=mock_responses["customer"])

        customer = client.customers.create(email="ada@example.com", name="Ada Lovelace")

        assert isinstance(customer, Customer)
        assert customer.phone_number is None
        assert httpx_mock.last_request().json == {"email": "ada@example.com", "name": "Ada Lovelace"}

    def test_update(self, client, httpx_mock, mock_responses):
        """Should patch only the given fields."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers/cus_123", method="PATCH", json=mock_responses["customer"]
        )

        client.customers.update("cus_123", name="Ada")

        assert httpx_mock.last_request().json == {"name": "Ada"}

    def test_list_by_email(self, client, httpx_mock, mock_responses):
        """Should filter customers by email."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers?email=ada%40example.com", json={"items": [mock_responses["customer"]]}
        )

        page = client.customers.list(email="ada@example.com")

        assert [customer.customer_id for customer in page] == ["cus_123"]

    def test_portal_session_send_email(self, client, httpx_mock):
        """Should pass send_email as a query parameter."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers/cus_123/customer-portal/session?send_email=true",
            method="POST",
            json={"link": "https://customer.dodopayments.com/session/abc"},
        )

        session = client.customers.create_portal_session("cus_123", send_email=True)

        assert session.link.endswith("abc")
        assert httpx_mock.last_request().json is None

    def test_portal_session_without_query(self, client, httpx_mock):
        """Should send no query when send_email is omitted."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers/cus_123/customer-portal/session",
            method="POST",
            json={"link": "https://customer.dodopayments.com/session/abc"},
        )

        client.customers.create_portal_session("cus_123")

        assert httpx_mock.last_request().url == f"{BASE_URL}/customers/cus_123/customer-portal/session"


class TestWallets:
    """Tests for customer wallets and their ledger."""

    WALLET = {
        "balance": 1000,
        "created_at": "2025-01-20T00:00:00Z",
        "currency": "USD",
        "customer_id": "cus_123",
        "updated_at": "2025-01-21T00:00:00Z",
    }

    def test_list_wallets(self, client, httpx_mock):
        """Should list wallets with the USD total."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers/cus_123/wallets",
            json={"items": [self.WALLET], "total_balance_usd": 1000},
        )

        wallets = client.customers.wallets.list("cus_123")

        assert wallets.total_balance_usd == 1000
        assert wallets.items[0].currency is Currency.USD

    def test_credit_wallet(self, client, httpx_mock):
        """Should post a ledger entry and return the updated wallet."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers/cus_123/wallets/ledger-entries",
            method="POST",
            json={**self.WALLET, "balance": 1500},
        )

        wallet = client.customers.wallets.ledger_entries.create(
            "cus_123", amount=500, currency="USD", entry_type="credit", reason="goodwill"
        )

        assert wallet.balance == 1500
        assert httpx_mock.last_request().json == {
            "amount": 500,
            "currency": "USD",
            "entry_type": "credit",
            "reason": "goodwill",
        }

    async def test_async_ledger_entries(self, async_client, httpx_mock):
        """Should page through ledger entries with the async client."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers/cus_123/wallets/ledger-entries?currency=USD",
            json={
                "items": [
                    {
                        "id": "cwt_1",
                        "after_balance": 1500,
                        "amount": 500,
                        "before_balance": 1000,
                        "business_id": "bus_123",
                        "created_at": "2025-01-21T00:00:00Z",
                        "currency": "USD",
                        "customer_id": "cus_123",
                        "event_type": "merchant_adjustment",
                        "is_credit": True,
                    }
                ]
            },
        )

        page = await async_client.customers.wallets.ledger_entries.list("cus_123", currency="USD")
        entries = [entry async for entry in page]

        assert entries[0].is_credit
        assert entries[0].amount == 500
