"""
Dodo Payments Python SDK clients.

Example usage:
    ```python
    from dodopayments import DodoPayments

    client = DodoPayments(api_key="...", environment="test_mode")

    session = client.checkout_sessions.create(
        product_cart=[{"product_id": "pdt_123", "quantity": 1}],
    )
    print(session.checkout_url)

    for payment in client.payments.list(status="succeeded"):
        print(payment.payment_id, payment.total_amount)
    ```

    The async client has the same surface:

    ```python
    async with AsyncDodoPayments(api_key="...") as client:
        payment = await client.payments.retrieve("pay_123")
    ```
"""
from __future__ import annotations

import time
from functools import partial
from typing import Any, Callable, Dict, Optional, Type, TypeVar, Union

import httpx

from ._types import RequestOptions
from ._version import __version__
from .config import ENVIRONMENTS, ClientSettings
from .logging import get_logger, log_request, log_response, setup_logging
from .models.base import DodoModel
from .models.errors import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    ModelError,
    ResponseValidationError,
    ShapeMismatch,
)
from .pagination import BasePage, PageRequest
from .resources import (
    AddonsResource,
    AsyncAddonsResource,
    AsyncBalancesResource,
    AsyncBrandsResource,
    AsyncCheckoutSessionsResource,
    AsyncCustomersResource,
    AsyncDiscountsResource,
    AsyncDisputesResource,
    AsyncInvoicesResource,
    AsyncLicenseKeyInstancesResource,
    AsyncLicenseKeysResource,
    AsyncLicensesResource,
    AsyncMetersResource,
    AsyncMiscResource,
    AsyncPaymentsResource,
    AsyncPayoutsResource,
    AsyncProductsResource,
    AsyncRefundsResource,
    AsyncSubscriptionsResource,
    AsyncUsageEventsResource,
    AsyncWebhooksResource,
    BalancesResource,
    BrandsResource,
    CheckoutSessionsResource,
    CustomersResource,
    DiscountsResource,
    DisputesResource,
    InvoicesResource,
    LicenseKeyInstancesResource,
    LicenseKeysResource,
    LicensesResource,
    MetersResource,
    MiscResource,
    PaymentsResource,
    PayoutsResource,
    ProductsResource,
    RefundsResource,
    SubscriptionsResource,
    UsageEventsResource,
    WebhooksResource,
)

logger = get_logger(__name__)

P = TypeVar("P", bound=BasePage)

CastTo = Union[Type[DodoModel], Callable[[Any], Any], None]


class BaseClient:
    """Configuration and request/response handling shared by both clients.

    Args:
        api_key: Bearer token; falls back to ``DODO_PAYMENTS_API_KEY``
        environment: ``live_mode`` or ``test_mode``
        base_url: Overrides the environment's base URL
        timeout: Request timeout in seconds (default: 60)
        default_headers: Extra headers sent with every request
        settings: Pre-built settings; read from the environment when omitted
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        default_headers: Optional[Dict[str, str]] = None,
        settings: Optional[ClientSettings] = None,
    ):
        settings = settings or ClientSettings()

        api_key = api_key or settings.api_key
        if not api_key:
            raise ValueError("API key is required")

        environment = environment or settings.environment
        if environment not in ENVIRONMENTS:
            raise ValueError(
                f"Unknown environment {environment!r}; expected one of {sorted(ENVIRONMENTS)}"
            )

        self._api_key = api_key
        self._environment = environment
        self._base_url = (base_url or settings.base_url or ENVIRONMENTS[environment]).rstrip("/")
        self._timeout = float(timeout if timeout is not None else settings.timeout)
        self._custom_headers = dict(default_headers or {})

        setup_logging(settings.log)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"dodopayments-python/{__version__}",
            **self._custom_headers,
        }

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _build_request(
        self,
        method: str,
        path: str,
        query: Optional[Dict[str, Any]],
        body: Optional[Any],
        options: Optional[RequestOptions],
    ) -> Dict[str, Any]:
        headers: Dict[str, str] = {}
        params: Dict[str, Any] = dict(query or {})
        timeout = self._timeout

        if options is not None:
            if options.idempotency_key:
                headers["Idempotency-Key"] = options.idempotency_key
            headers.update(options.extra_headers)
            params.update(options.extra_query)
            if options.timeout is not None:
                timeout = options.timeout

        # A query string cannot carry null.
        params = {key: value for key, value in params.items() if value is not None}

        request: Dict[str, Any] = {
            "method": method,
            "url": self._url(path),
            "headers": headers,
            "timeout": timeout,
        }
        if params:
            request["params"] = params
        if body is not None:
            request["json"] = body
        return request

    def _handle_response(self, response: httpx.Response, started: float, binary: bool) -> Any:
        duration_ms = (time.monotonic() - started) * 1000
        request_id = response.headers.get("x-request-id")

        if not response.is_success:
            try:
                body: Any = response.json()
            except ValueError:
                body = response.text
            log_response(logger, response.status_code, body, duration_ms, request_id)
            raise APIStatusError.from_response(response.status_code, body, response.headers)

        if binary:
            log_response(logger, response.status_code, None, duration_ms, request_id)
            return response.content

        if not response.content:
            log_response(logger, response.status_code, None, duration_ms, request_id)
            return None

        try:
            data = response.json()
        except ValueError as exc:
            raise ResponseValidationError(
                ShapeMismatch("response", "", "body is not valid JSON"),
                status_code=response.status_code,
                request_id=request_id,
            ) from exc
        log_response(logger, response.status_code, data, duration_ms, request_id)
        return data

    @staticmethod
    def _cast(cast_to: CastTo, data: Any, status_code: int = 200) -> Any:
        if cast_to is None:
            return None
        try:
            if isinstance(cast_to, type) and issubclass(cast_to, DodoModel):
                return cast_to.from_wire(data)
            return cast_to(data)
        except ModelError as exc:
            raise ResponseValidationError(exc, status_code=status_code) from exc

    @staticmethod
    def _parse_page(
        page_cls: Type[P],
        item_model: Type[DodoModel],
        request: PageRequest,
        data: Any,
        fetch: Callable[[PageRequest], Any],
    ) -> P:
        try:
            return page_cls.parse(data, item_model, request, fetch)
        except ModelError as exc:
            raise ResponseValidationError(exc, status_code=200) from exc

    @staticmethod
    def _transport_error(exc: httpx.RequestError) -> APIConnectionError:
        if isinstance(exc, httpx.TimeoutException):
            return APITimeoutError()
        return APIConnectionError(str(exc) or "Connection error.")


class DodoPayments(BaseClient):
    """
    Synchronous Dodo Payments API client.

    Resources:
    - checkout_sessions, payments, subscriptions, invoices
    - customers (with wallets and ledger entries), refunds, disputes, payouts
    - products, addons, brands, discounts, meters, usage_events
    - licenses, license_keys, license_key_instances
    - webhooks, balances, misc

    Args:
        api_key: Bearer token; falls back to ``DODO_PAYMENTS_API_KEY``
        environment: ``live_mode`` (default) or ``test_mode``
        base_url: Overrides the environment's base URL
        timeout: Request timeout in seconds (default: 60)
        default_headers: Extra headers sent with every request
        http_client: A pre-configured ``httpx.Client`` to send requests with
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        default_headers: Optional[Dict[str, str]] = None,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        super().__init__(
            api_key,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
            default_headers=default_headers,
            settings=settings,
        )
        self._client: Optional[httpx.Client] = http_client
        self._owns_client = http_client is None

        self.checkout_sessions = CheckoutSessionsResource(self)
        self.payments = PaymentsResource(self)
        self.invoices = InvoicesResource(self)
        self.subscriptions = SubscriptionsResource(self)
        self.licenses = LicensesResource(self)
        self.license_keys = LicenseKeysResource(self)
        self.license_key_instances = LicenseKeyInstancesResource(self)
        self.customers = CustomersResource(self)
        self.refunds = RefundsResource(self)
        self.disputes = DisputesResource(self)
        self.payouts = PayoutsResource(self)
        self.products = ProductsResource(self)
        self.misc = MiscResource(self)
        self.discounts = DiscountsResource(self)
        self.addons = AddonsResource(self)
        self.brands = BrandsResource(self)
        self.webhooks = WebhooksResource(self)
        self.usage_events = UsageEventsResource(self)
        self.meters = MetersResource(self)
        self.balances = BalancesResource(self)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(headers=self.default_headers, timeout=self._timeout)
            self._owns_client = True
        return self._client

    def _send(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        options: Optional[RequestOptions] = None,
        binary: bool = False,
    ) -> Any:
        request = self._build_request(method, path, query, body, options)
        log_request(logger, method, request["url"], {**self.default_headers, **request["headers"]}, body)

        started = time.monotonic()
        try:
            response = self._get_client().request(**request)
        except httpx.RequestError as exc:
            raise self._transport_error(exc) from exc
        return self._handle_response(response, started, binary)

    def request(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
        binary: bool = False,
    ) -> Any:
        """Send a request and decode the response.

        Args:
            method: HTTP method
            path: Endpoint path relative to the base URL
            query: Query parameters (wire names)
            body: JSON body (already encoded with ``to_wire``)
            cast_to: Response model, or a callable converting the decoded JSON
            options: Per-call request options
            binary: Return the raw response bytes

        Raises:
            APIStatusError: The server answered with a non-2xx status
            APIConnectionError: The request could not be sent
            ResponseValidationError: The body did not match ``cast_to``
        """
        data = self._send(method, path, query=query, body=body, options=options, binary=binary)
        if binary:
            return data
        return self._cast(cast_to, data)

    def request_page(self, page_cls: Type[P], item_model: Type[DodoModel], request: PageRequest) -> P:
        """Fetch one page of a list endpoint."""
        data = self._send(request.method, request.path, query=request.query, options=request.options)
        return self._parse_page(
            page_cls, item_model, request, data, partial(self.request_page, page_cls, item_model)
        )

    def close(self) -> None:
        """Close the HTTP client.

        A client passed in as ``http_client`` belongs to the caller and is left open.
        """
        if self._owns_client and self._client is not None and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "DodoPayments":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncDodoPayments(BaseClient):
    """
    Asynchronous Dodo Payments API client.

    Exposes the same resources as ``DodoPayments``; every method is a
    coroutine and list methods return async pages.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        default_headers: Optional[Dict[str, str]] = None,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(
            api_key,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
            default_headers=default_headers,
            settings=settings,
        )
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

        self.checkout_sessions = AsyncCheckoutSessionsResource(self)
        self.payments = AsyncPaymentsResource(self)
        self.invoices = AsyncInvoicesResource(self)
        self.subscriptions = AsyncSubscriptionsResource(self)
        self.licenses = AsyncLicensesResource(self)
        self.license_keys = AsyncLicenseKeysResource(self)
        self.license_key_instances = AsyncLicenseKeyInstancesResource(self)
        self.customers = AsyncCustomersResource(self)
        self.refunds = AsyncRefundsResource(self)
        self.disputes = AsyncDisputesResource(self)
        self.payouts = AsyncPayoutsResource(self)
        self.products = AsyncProductsResource(self)
        self.misc = AsyncMiscResource(self)
        self.discounts = AsyncDiscountsResource(self)
        self.addons = AsyncAddonsResource(self)
        self.brands = AsyncBrandsResource(self)
        self.webhooks = AsyncWebhooksResource(self)
        self.usage_events = AsyncUsageEventsResource(self)
        self.meters = AsyncMetersResource(self)
        self.balances = AsyncBalancesResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(headers=self.default_headers, timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def _send(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        options: Optional[RequestOptions] = None,
        binary: bool = False,
    ) -> Any:
        request = self._build_request(method, path, query, body, options)
        log_request(logger, method, request["url"], {**self.default_headers, **request["headers"]}, body)

        client = await self._get_client()
        started = time.monotonic()
        try:
            response = await client.request(**request)
        except httpx.RequestError as exc:
            raise self._transport_error(exc) from exc
        return self._handle_response(response, started, binary)

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Any] = None,
        cast_to: CastTo = None,
        options: Optional[RequestOptions] = None,
        binary: bool = False,
    ) -> Any:
        """Send a request and decode the response. See ``DodoPayments.request``."""
        data = await self._send(method, path, query=query, body=body, options=options, binary=binary)
        if binary:
            return data
        return self._cast(cast_to, data)

    async def request_page(self, page_cls: Type[P], item_model: Type[DodoModel], request: PageRequest) -> P:
        """Fetch one page of a list endpoint."""
        data = await self._send(request.method, request.path, query=request.query, options=request.options)
        return self._parse_page(
            page_cls, item_model, request, data, partial(self.request_page, page_cls, item_model)
        )

    async def close(self) -> None:
        """Close the HTTP client.

        A client passed in as ``http_client`` belongs to the caller and is left open.
        """
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "AsyncDodoPayments":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


__all__ = ["BaseClient", "DodoPayments", "AsyncDodoPayments"]
