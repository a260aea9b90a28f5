"""
Tests for DodoPayments and AsyncDodoPayments
"""
import httpx
import pytest

from dodopayments import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncDodoPayments,
    AuthenticationError,
    ClientSettings,
    DodoPayments,
    InternalServerError,
    NotFoundError,
    RateLimitError,
    RequestOptions,
    ResponseValidationError,
    __version__,
)
from dodopayments.models import Customer, MissingRequiredField

BASE_URL = "https://test.dodopayments.com"


class TestClientInitialization:
    """Tests for client initialization."""

    def test_create_client_with_api_key(self, api_key, base_url):
        """Should create client with required API key."""
        client = DodoPayments(api_key=api_key, base_url=base_url)

        assert client.api_key == api_key
        assert client.base_url == base_url

    def test_raise_error_without_api_key(self):
        """Should raise ValueError when API key is missing."""
        with pytest.raises(ValueError, match="API key is required"):
            DodoPayments()

    def test_api_key_from_environment(self, monkeypatch):
        """Should read the API key from DODO_PAYMENTS_API_KEY."""
        monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "env-key")

        client = DodoPayments()

        assert client.api_key == "env-key"

    def test_environment_selects_base_url(self, api_key):
        """Should map the environment name to its base URL."""
        assert DodoPayments(api_key=api_key).base_url == "https://live.dodopayments.com"
        assert DodoPayments(api_key=api_key, environment="test_mode").base_url == "https://test.dodopayments.com"

    def test_unknown_environment(self, api_key):
        """Should reject an unknown environment name."""
        with pytest.raises(ValueError, match="Unknown environment"):
            DodoPayments(api_key=api_key, environment="staging")

    def test_strip_trailing_slash_from_base_url(self, api_key):
        """Should strip trailing slash from base URL."""
        client = DodoPayments(api_key=api_key, base_url="https://api.example.com/")

        assert client.base_url == "https://api.example.com"

    def test_accept_custom_timeout(self, api_key, base_url):
        """Should accept custom timeout."""
        client = DodoPayments(api_key=api_key, base_url=base_url, timeout=5)

        assert client.timeout == 5.0

    def test_settings_object(self, api_key):
        """Should take configuration from a settings object."""
        settings = ClientSettings(api_key=api_key, environment="test_mode", timeout=12)

        client = DodoPayments(settings=settings)

        assert client.base_url == "https://test.dodopayments.com"
        assert client.timeout == 12.0

    def test_default_headers(self, api_key, base_url):
        """Should authenticate with a bearer token and merge custom headers."""
        client = DodoPayments(api_key=api_key, base_url=base_url, default_headers={"X-Team": "billing"})

        headers = client.default_headers
        assert headers["Authorization"] == f"Bearer {api_key}"
        assert headers["User-Agent"] == f"dodopayments-python/{__version__}"
        assert headers["X-Team"] == "billing"

    def test_initialize_all_resources(self, api_key, base_url):
        """Should initialize all resource classes."""
        client = DodoPayments(api_key=api_key, base_url=base_url)

        for name in (
            "checkout_sessions",
            "payments",
            "invoices",
            "subscriptions",
            "licenses",
            "license_keys",
            "license_key_instances",
            "customers",
            "refunds",
            "disputes",
            "payouts",
            "products",
            "misc",
            "discounts",
            "addons",
            "brands",
            "webhooks",
            "usage_events",
            "meters",
            "balances",
        ):
            assert hasattr(client, name), name
        assert hasattr(client.customers.wallets, "ledger_entries")
        assert hasattr(client.products, "short_links")
        assert hasattr(client.webhooks, "headers")


class TestRequests:
    """Tests for request building and response handling."""

    def test_request_decodes_model(self, client, httpx_mock, mock_responses):
        """Should decode the response into the requested model."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json=mock_responses["customer"])

        customer = client.request("GET", "customers/cus_123", cast_to=Customer)

        assert isinstance(customer, Customer)
        assert customer.email == "ada@example.com"

    def test_headers_are_sent(self, client, httpx_mock, mock_responses, api_key):
        """Should send the bearer token with every request."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json=mock_responses["customer"])

        client.request("GET", "customers/cus_123", cast_to=Customer)

        assert httpx_mock.last_request().headers["authorization"] == f"Bearer {api_key}"

    def test_request_options(self, client, httpx_mock, mock_responses):
        """Should apply idempotency key, extra headers and extra query."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/customers?trace=1",
            method="POST",
            json=mock_responses["customer"],
        )

        client.request(
            "POST",
            "customers",
            body={"email": "ada@example.com", "name": "Ada"},
            cast_to=Customer,
            options=RequestOptions(
                idempotency_key="idem_1",
                extra_headers={"X-Trace": "on"},
                extra_query={"trace": "1"},
                timeout=3,
            ),
        )

        request = httpx_mock.last_request()
        assert request.headers["Idempotency-Key"] == "idem_1"
        assert request.headers["X-Trace"] == "on"
        assert request.json == {"email": "ada@example.com", "name": "Ada"}

    def test_none_query_values_are_dropped(self, client, httpx_mock):
        """Should leave None out of the query string."""
        httpx_mock.add_response(url=f"{BASE_URL}/webhooks?limit=5", json={"data": [], "done": True})

        client.request("GET", "webhooks", query={"limit": 5, "iterator": None})

        assert httpx_mock.last_request().params == {"limit": 5}

    def test_empty_body_returns_none(self, client, httpx_mock):
        """Should return None for an empty success body."""
        httpx_mock.add_response(url=f"{BASE_URL}/discounts/dsc_1", method="DELETE", status_code=204)

        assert client.request("DELETE", "discounts/dsc_1") is None

    def test_binary_response(self, client, httpx_mock):
        """Should return raw bytes for binary requests."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/invoices/payments/pay_1",
            content=b"%PDF-1.7",
            headers={"content-type": "application/pdf"},
        )

        assert client.request("GET", "invoices/payments/pay_1", binary=True) == b"%PDF-1.7"

    def test_response_validation_error(self, client, httpx_mock):
        """Should wrap a body that does not fit the response model."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json={"customer_id": "cus_123"})

        with pytest.raises(ResponseValidationError) as exc_info:
            client.request("GET", "customers/cus_123", cast_to=Customer)

        assert isinstance(exc_info.value.error, MissingRequiredField)
        assert exc_info.value.status_code == 200


class TestErrorHandling:
    """Tests for error handling."""

    def test_raise_authentication_error_on_401(self, client, httpx_mock):
        """Should raise AuthenticationError on 401."""
        httpx_mock.add_response(url=f"{BASE_URL}/payments/pay_1", status_code=401, json={"message": "Unauthorized"})

        with pytest.raises(AuthenticationError):
            client.request("GET", "payments/pay_1")

    def test_raise_not_found_error_on_404(self, client, httpx_mock):
        """Should raise NotFoundError with the server message."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments/pay_404",
            status_code=404,
            json={"code": "NOT_FOUND", "message": "Payment not found"},
            headers={"x-request-id": "req_404"},
        )

        with pytest.raises(NotFoundError) as exc_info:
            client.request("GET", "payments/pay_404")

        assert exc_info.value.message == "Payment not found"
        assert exc_info.value.request_id == "req_404"

    def test_raise_rate_limit_error_on_429(self, client, httpx_mock):
        """Should raise RateLimitError on 429 without retrying."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments",
            status_code=429,
            headers={"Retry-After": "5"},
            json={"message": "Rate limit exceeded"},
        )

        with pytest.raises(RateLimitError) as exc_info:
            client.request("GET", "payments")

        assert exc_info.value.retry_after == 5
        assert len(httpx_mock.requests) == 1

    def test_raise_api_error_on_500(self, client, httpx_mock):
        """Should raise InternalServerError on 500."""
        httpx_mock.add_response(url=f"{BASE_URL}/payments", status_code=500, content=b"oops")

        with pytest.raises(InternalServerError) as exc_info:
            client.request("GET", "payments")

        assert exc_info.value.body == "oops"

    def test_raise_api_error_on_redirect(self, client, httpx_mock):
        """Should treat a 3xx response as an error instead of decoding it."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/payments/pay_1",
            status_code=302,
            headers={"Location": "https://example.com/login"},
        )

        with pytest.raises(APIStatusError) as exc_info:
            client.request("GET", "payments/pay_1")

        assert type(exc_info.value) is APIStatusError
        assert exc_info.value.status_code == 302

    def test_raise_timeout_error(self, client, httpx_mock):
        """Should raise APITimeoutError when the request times out."""
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"), url=f"{BASE_URL}/payments")

        with pytest.raises(APITimeoutError):
            client.request("GET", "payments")

    def test_raise_connection_error(self, client, httpx_mock):
        """Should raise APIConnectionError when the connection fails."""
        httpx_mock.add_exception(httpx.ConnectError("refused"), url=f"{BASE_URL}/payments")

        with pytest.raises(APIConnectionError) as exc_info:
            client.request("GET", "payments")

        assert not isinstance(exc_info.value, APITimeoutError)


class TestContextManager:
    """Tests for context managers."""

    def test_sync_context_manager(self, api_key, base_url, httpx_mock, mock_responses):
        """Should close the HTTP client on exit."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json=mock_responses["customer"])

        with DodoPayments(api_key=api_key, base_url=base_url) as client:
            client.customers.retrieve("cus_123")

        assert client._client is None

    async def test_async_context_manager(self, api_key, base_url, httpx_mock, mock_responses):
        """Should work as async context manager."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json=mock_responses["customer"])

        async with AsyncDodoPayments(api_key=api_key, base_url=base_url) as client:
            customer = await client.customers.retrieve("cus_123")
            assert customer.customer_id == "cus_123"

        assert client._client is None

    def test_close_leaves_caller_client_open(self, api_key, base_url, httpx_mock, mock_responses):
        """Should not close an HTTP client passed in by the caller."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json=mock_responses["customer"])
        http_client = httpx.Client()

        with DodoPayments(api_key=api_key, base_url=base_url, http_client=http_client) as client:
            client.customers.retrieve("cus_123")

        assert not http_client.is_closed
        http_client.close()

    async def test_async_close_leaves_caller_client_open(self, api_key, base_url, httpx_mock, mock_responses):
        """Should not close an async HTTP client passed in by the caller."""
        httpx_mock.add_response(url=f"{BASE_URL}/customers/cus_123", json=mock_responses["customer"])
        http_client = httpx.AsyncClient()

        async with AsyncDodoPayments(api_key=api_key, base_url=base_url, http_client=http_client) as client:
            await client.customers.retrieve("cus_123")

        assert not http_client.is_closed
        await http_client.aclose()

    async def test_async_error(self, async_client, httpx_mock):
        """Should raise status errors from the async client."""
        httpx_mock.add_response(url=f"{BASE_URL}/payments/pay_1", status_code=404, json={"message": "missing"})

        with pytest.raises(NotFoundError):
            await async_client.payments.retrieve("pay_1")
