"""
Tests for payments, refunds, disputes, invoices and payouts.
"""
from dodopayments import SyncDefaultPageNumberPagination
from dodopayments.models import AttachExistingCustomer, Payment, PaymentListItem

BASE_URL = "https://test.dodopayments.com"

BILLING = {"city": "London", "country": "GB", "state": "London", "street": "1 Main St", "zipcode": "N1 9GU"}


class TestPayments:
    """Tests for the payments resource."""

    def test_create(self, client, httpx_mock):
        """Should send billing, customer and cart."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments",
            method="POST",
            json={
                "client_secret": "cs_1",
                "customer": {"customer_id": "cus_123", "email": "ada@example.com", "name": "Ada"},
                "metadata": {},
                "payment_id": "pay_1",
                "total_amount": 1500,
                "payment_link": "https://checkout.dodopayments.com/pay_1",
            },
        )

        payment = client.payments.create(
            billing=BILLING,
            customer=AttachExistingCustomer(customer_id="cus_123"),
            product_cart=[{"product_id": "pdt_1", "quantity": 1}],
            payment_link=True,
        )

        assert payment.payment_id == "pay_1"
        assert httpx_mock.last_request().json == {
            "billing": BILLING,
            "customer": {"customer_id": "cus_123"},
            "product_cart": [{"product_id": "pdt_1", "quantity": 1}],
            "payment_link": True,
        }

    def test_retrieve(self, client, httpx_mock, mock_responses):
        """Should decode a full payment."""
        httpx_mock.add_response(url=f"{BASE_URL}/payments/pay_123", json=mock_responses["payment"])

        payment = client.payments.retrieve("pay_123")

        assert isinstance(payment, Payment)
        assert payment.billing.country == "GB"
        assert payment.metadata == {"order": "42"}

    def test_list_walks_pages(self, client, httpx_mock, mock_responses):
        """Should request the next page number until a short page arrives."""
        item = mock_responses["payment_list_item"]
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments?status=succeeded&page_size=2",
            json={"items": [item, {**item, "payment_id": "pay_124"}]},
        )
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments?status=succeeded&page_size=2&page_number=1",
            json={"items": [{**item, "payment_id": "pay_125"}]},
        )

        page = client.payments.list(status="succeeded", page_size=2)
        ids = [payment.payment_id for payment in page]

        assert isinstance(page, SyncDefaultPageNumberPagination)
        assert isinstance(page.items[0], PaymentListItem)
        assert ids == ["pay_123", "pay_124", "pay_125"]
        assert len(httpx_mock.requests) == 2

    async def test_async_list(self, async_client, httpx_mock, mock_responses):
        """Should iterate pages with the async client."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments?customer_id=cus_123",
            json={"items": [mock_responses["payment_list_item"]]},
        )

        page = await async_client.payments.list(customer_id="cus_123")
        ids = [payment.payment_id async for payment in page]

        assert ids == ["pay_123"]


class TestRefunds:
    """Tests for the refunds resource."""

    def test_create_partial_refund(self, client, httpx_mock):
        """Should send the refunded line items."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/refunds",
            method="POST",
            json={
                "business_id": "bus_123",
                "created_at": "2025-01-20T00:00:00Z",
                "customer": {"customer_id": "cus_123", "email": "ada@example.com", "name": "Ada"},
                "is_partial": True,
                "payment_id": "pay_123",
                "refund_id": "ref_1",
                "status": "pending",
                "amount": 500,
                "currency": "USD",
            },
        )

        refund = client.refunds.create(
            payment_id="pay_123", items=[{"item_id": "pdt_1", "amount": 500}], reason="Damaged"
        )

        assert refund.is_partial
        assert httpx_mock.last_request().json == {
            "payment_id": "pay_123",
            "items": [{"item_id": "pdt_1", "amount": 500}],
            "reason": "Damaged",
        }


class TestInvoices:
    """Tests for the invoices resource."""

    def test_payment_invoice_pdf(self, client, httpx_mock):
        """Should return the invoice bytes."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/invoices/payments/pay_123",
            content=b"%PDF-1.7 invoice",
            headers={"content-type": "application/pdf"},
        )

        assert client.invoices.retrieve_payment("pay_123") == b"%PDF-1.7 invoice"

    def test_retrieve_refund_credit_note(self, client, httpx_mock):
        """Should return the credit note bytes."""
        httpx_mock.add_response(url=f"{BASE_URL}/invoices/refunds/ref_1", content=b"%PDF-1.7 credit")

        assert client.invoices.retrieve_refund("ref_1") == b"%PDF-1.7 credit"


class TestLineItems:
    """Tests for payments.retrieve_line_items."""

    def test_line_items(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments/pay_123/line-items",
            json={
                "currency": "USD",
                "items": [{"amount": 1500, "items_id": "pdt_1", "refundable_amount": 1000, "tax": 0}],
            },
        )

        line_items = client.payments.retrieve_line_items("pay_123")

        assert line_items.items[0].refundable_amount == 1000


class TestDisputesAndPayouts:
    """Tests for disputes, payouts and the balance ledger."""

    def test_retrieve_dispute(self, client, httpx_mock):
        """Should keep the amount as the string the API sends."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/disputes/dsp_1",
            json={
                "amount": "1500",
                "business_id": "bus_123",
                "created_at": "2025-01-20T00:00:00Z",
                "currency": "USD",
                "customer": {"customer_id": "cus_123", "email": "ada@example.com", "name": "Ada"},
                "dispute_id": "dsp_1",
                "dispute_stage": "dispute",
                "dispute_status": "dispute_opened",
                "payment_id": "pay_123",
            },
        )

        dispute = client.disputes.retrieve("dsp_1")

        assert dispute.amount == "1500"
        assert dispute.customer.customer_id == "cus_123"

    def test_list_payouts(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE_URL}/payouts?page_number=2",
            json={
                "items": [
                    {
                        "amount": 10000,
                        "business_id": "bus_123",
                        "chargebacks": 0,
                        "created_at": "2025-01-20T00:00:00Z",
                        "currency": "USD",
                        "fee": 100,
                        "payment_method": "bank_transfer",
                        "payout_id": "pout_1",
                        "refunds": 0,
                        "status": "success",
                        "tax": 0,
                        "updated_at": "2025-01-21T00:00:00Z",
                    }
                ]
            },
        )

        page = client.payouts.list(page_number=2)

        assert page.page_number == 2
        assert page.items[0].payout_id == "pout_1"
        assert not page.has_next_page()

    def test_balance_ledger(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE_URL}/balances/ledger?currency=USD",
            json={
                "items": [
                    {
                        "id": "bal_1",
                        "amount": 1500,
                        "business_id": "bus_123",
                        "created_at": "2025-01-20T00:00:00Z",
                        "currency": "USD",
                        "event_type": "payment",
                        "is_credit": True,
                        "usd_equivalent_amount": 1500,
                    }
                ]
            },
        )

        page = client.balances.retrieve_ledger(currency="USD")

        assert page.items[0].event_type.value == "payment"
