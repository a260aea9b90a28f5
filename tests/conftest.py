"""
Pytest configuration and fixtures for Dodo Payments SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx
import pytest

from dodopayments import AsyncDodoPayments, DodoPayments

BASE_URL = "https://test.dodopayments.com"


@dataclass
class _MockEntry:
    method: str
    url: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    json: Any = None


class _LocalHTTPXMock:
    """Queue of canned responses matched on method and full URL."""

    def __init__(self) -> None:
        self._entries: List[_MockEntry] = []
        self.requests: List[RecordedRequest] = []

    def add_response(
        self,
        *,
        url: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            if headers:
                response_headers.update(headers)
        else:
            response_headers = headers or {}

        request = httpx.Request(method.upper(), url)
        response = httpx.Response(
            status_code=status_code,
            headers=response_headers,
            content=content or b"",
            request=request,
        )
        self._entries.append(_MockEntry(method=method.upper(), url=url, response=response))

    def add_exception(self, exception: Exception, *, url: str, method: str = "GET") -> None:
        self._entries.append(_MockEntry(method=method.upper(), url=url, exception=exception))

    def last_request(self) -> RecordedRequest:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def _pop_match(self, method: str, url: str) -> _MockEntry:
        normalized_method = method.upper()
        normalized_url = _normalize_url(url)
        for idx, entry in enumerate(self._entries):
            if entry.method == normalized_method and _normalize_url(entry.url) == normalized_url:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {normalized_method} {url}. "
            f"Available: {[f'{e.method} {e.url}' for e in self._entries]}"
        )

    def _handle(self, client: Any, method: str, url: str, params: Any, kwargs: Dict[str, Any]) -> httpx.Response:
        full_url = str(httpx.URL(str(url), params=params)) if params else str(url)
        self.requests.append(
            RecordedRequest(
                method=method.upper(),
                url=full_url,
                headers={**dict(client.headers), **(kwargs.get("headers") or {})},
                params=dict(params or {}),
                json=kwargs.get("json"),
            )
        )
        match = self._pop_match(method, full_url)
        if match.exception is not None:
            raise match.exception
        assert match.response is not None
        return match.response


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def _normalize_url(url: str) -> str:
    parts = urlsplit(url)
    normalized_query = urlencode(sorted(parse_qsl(parts.query, keep_blank_values=True)), doseq=True)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, normalized_query, parts.fragment))


@pytest.fixture
def httpx_mock(monkeypatch):
    """Patch ``httpx`` so requests are answered from the mock's queue."""
    mock = _LocalHTTPXMock()

    async def _async_request(self, method, url, params=None, **kwargs):
        return mock._handle(self, method, url, params, kwargs)

    def _sync_request(self, method, url, params=None, **kwargs):
        return mock._handle(self, method, url, params, kwargs)

    monkeypatch.setattr(httpx.AsyncClient, "request", _async_request)
    monkeypatch.setattr(httpx.Client, "request", _sync_request)
    return mock


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in (
        "DODO_PAYMENTS_API_KEY",
        "DODO_PAYMENTS_BASE_URL",
        "DODO_PAYMENTS_ENVIRONMENT",
        "DODO_PAYMENTS_TIMEOUT",
        "DODO_PAYMENTS_LOG",
    ):
        monkeypatch.delenv(name, raising=False)


# Mock response data
CUSTOMER = {
    "customer_id": "cus_123",
    "email": "ada@example.com",
    "name": "Ada Lovelace",
}

MOCK_RESPONSES = {
    "checkout_session": {
        "session_id": "cks_123",
        "checkout_url": "https://checkout.dodopayments.com/session/cks_123",
    },
    "checkout_status": {
        "id": "cks_123",
        "created_at": "2025-01-20T00:00:00Z",
        "payment_id": "pay_123",
        "payment_status": "succeeded",
    },
    "customer": {
        **CUSTOMER,
        "business_id": "bus_123",
        "created_at": "2025-01-20T00:00:00Z",
        "phone_number": None,
    },
    "payment_list_item": {
        "brand_id": "bnd_123",
        "created_at": "2025-01-20T00:00:00Z",
        "currency": "USD",
        "customer": CUSTOMER,
        "digital_products_delivered": False,
        "metadata": {},
        "payment_id": "pay_123",
        "total_amount": 1500,
        "status": "succeeded",
    },
    "payment": {
        "billing": {
            "city": "London",
            "country": "GB",
            "state": "London",
            "street": "1 Main St",
            "zipcode": "N1 9GU",
        },
        "brand_id": "bnd_123",
        "business_id": "bus_123",
        "created_at": "2025-01-20T00:00:00Z",
        "currency": "USD",
        "customer": CUSTOMER,
        "digital_products_delivered": False,
        "disputes": [],
        "metadata": {"order": "42"},
        "payment_id": "pay_123",
        "refunds": [],
        "settlement_amount": 1500,
        "settlement_currency": "USD",
        "total_amount": 1500,
        "status": "succeeded",
    },
    "license_key": {
        "id": "lic_123",
        "business_id": "bus_123",
        "created_at": "2025-01-20T00:00:00Z",
        "customer_id": "cus_123",
        "instances_count": 0,
        "key": "ABCD-EFGH-IJKL",
        "payment_id": "pay_123",
        "product_id": "pdt_123",
        "status": "active",
        "activations_limit": 5,
    },
    "webhook": {
        "id": "wh_123",
        "created_at": "2025-01-20T00:00:00Z",
        "description": "orders",
        "metadata": {},
        "updated_at": "2025-01-20T00:00:00Z",
        "url": "https://example.com/webhooks",
        "disabled": False,
    },
    "meter": {
        "id": "mtr_123",
        "aggregation": {"type": "sum", "key": "tokens"},
        "business_id": "bus_123",
        "created_at": "2025-01-20T00:00:00Z",
        "event_name": "api.request",
        "measurement_unit": "tokens",
        "name": "Tokens",
        "updated_at": "2025-01-20T00:00:00Z",
    },
}


@pytest.fixture
def api_key() -> str:
    """Test API key."""
    return "test-api-key"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return BASE_URL


@pytest.fixture
def client(api_key: str, base_url: str) -> DodoPayments:
    """Create a sync test client."""
    client = DodoPayments(api_key=api_key, base_url=base_url)
    yield client
    client.close()


@pytest.fixture
async def async_client(api_key: str, base_url: str) -> AsyncDodoPayments:
    """Create an async test client."""
    client = AsyncDodoPayments(api_key=api_key, base_url=base_url)
    yield client
    await client.close()


@pytest.fixture
def mock_responses() -> dict:
    """Return mock response data."""
    return MOCK_RESPONSES
