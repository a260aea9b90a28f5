"""
Customers resource for the Dodo Payments SDK.

Besides the customer records themselves this covers saved payment methods,
customer portal links and customer wallets:

- ``client.customers.wallets.list(customer_id)``
- ``client.customers.wallets.ledger_entries.create(customer_id, ...)``
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.customers import (
    Customer,
    CustomerCreateParams,
    CustomerListParams,
    CustomerPaymentMethods,
    CustomerPortalSession,
    CustomerUpdateParams,
    CustomerWallet,
    CustomerWalletTransaction,
    LedgerEntryCreateParams,
    LedgerEntryListParams,
    WalletListResponse,
)
from ..models.enums import Currency
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path

if TYPE_CHECKING:
    from ..client import AsyncDodoPayments, DodoPayments


def _ledger_path(customer_id: str) -> str:
    return f"customers/{quote_path(customer_id)}/wallets/ledger-entries"


class AsyncLedgerEntriesResource(AsyncBaseResource):
    """Credits and debits on a customer's wallets."""

    async def create(
        self,
        customer_id: str,
        *,
        amount: int,
        currency: Currency,
        entry_type: Literal["credit", "debit"],
        idempotency_key: NotGivenOr[Optional[str]] = NOT_GIVEN,
        reason: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> CustomerWallet:
        """Credit or debit a customer wallet.

        Args:
            customer_id: Wallet owner
            amount: Amount in the smallest currency unit
            currency: Wallet currency
            entry_type: ``credit`` or ``debit``
            idempotency_key: Makes retries of the same entry safe
            reason: Free-form note stored on the entry
            options: Per-call request options

        Returns:
            The wallet after the entry was applied
        """
        params = build_params(
            LedgerEntryCreateParams,
            amount=amount,
            currency=currency,
            entry_type=entry_type,
            idempotency_key=idempotency_key,
            reason=reason,
        )
        return await self._post(
            _ledger_path(customer_id), body=params.to_wire(), cast_to=CustomerWallet, options=options
        )

    async def list(
        self,
        customer_id: str,
        *,
        currency: NotGivenOr[Currency] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[CustomerWalletTransaction]:
        params = build_params(
            LedgerEntryListParams, currency=currency, page_number=page_number, page_size=page_size
        )
        return await self._get_page(
            _ledger_path(customer_id),
            AsyncDefaultPageNumberPagination,
            CustomerWalletTransaction,
            query=params.to_wire(),
            options=options,
        )


class AsyncWalletsResource(AsyncBaseResource):
    def __init__(self, client: "AsyncDodoPayments") -> None:
        super().__init__(client)
        self.ledger_entries = AsyncLedgerEntriesResource(client)

    async def list(self, customer_id: str, *, options: Optional[RequestOptions] = None) -> WalletListResponse:
        """All wallets of a customer, with the total balance in USD."""
        return await self._get(
            f"customers/{quote_path(customer_id)}/wallets", cast_to=WalletListResponse, options=options
        )


class AsyncCustomersResource(AsyncBaseResource):
    """Async resource for customer operations.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            customer = await client.customers.create(email="ada@example.com", name="Ada")
            portal = await client.customers.create_portal_session(customer.customer_id)
            print(portal.link)
        ```
    """

    def __init__(self, client: "AsyncDodoPayments") -> None:
        super().__init__(client)
        self.wallets = AsyncWalletsResource(client)

    async def create(
        self,
        *,
        email: str,
        name: str,
        phone_number: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        """Create a customer."""
        params = build_params(CustomerCreateParams, email=email, name=name, phone_number=phone_number)
        return await self._post("customers", body=params.to_wire(), cast_to=Customer, options=options)

    async def retrieve(self, customer_id: str, *, options: Optional[RequestOptions] = None) -> Customer:
        """Get a customer by ID."""
        return await self._get(f"customers/{quote_path(customer_id)}", cast_to=Customer, options=options)

    async def update(
        self,
        customer_id: str,
        *,
        name: NotGivenOr[str] = NOT_GIVEN,
        phone_number: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        """Update a customer's name or phone number."""
        params = build_params(CustomerUpdateParams, name=name, phone_number=phone_number)
        return await self._patch(
            f"customers/{quote_path(customer_id)}", body=params.to_wire(), cast_to=Customer, options=options
        )

    async def list(
        self,
        *,
        email: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[Customer]:
        """List customers, optionally filtered by email."""
        params = build_params(CustomerListParams, email=email, page_number=page_number, page_size=page_size)
        return await self._get_page(
            "customers", AsyncDefaultPageNumberPagination, Customer, query=params.to_wire(), options=options
        )

    async def retrieve_payment_methods(
        self, customer_id: str, *, options: Optional[RequestOptions] = None
    ) -> CustomerPaymentMethods:
        """Payment methods the customer saved in earlier purchases."""
        return await self._get(
            f"customers/{quote_path(customer_id)}/payment-methods",
            cast_to=CustomerPaymentMethods,
            options=options,
        )

    async def create_portal_session(
        self,
        customer_id: str,
        *,
        send_email: NotGivenOr[bool] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> CustomerPortalSession:
        """Create a link to the customer portal.

        Args:
            customer_id: Customer the portal is for
            send_email: Also email the link to the customer
            options: Per-call request options
        """
        query = {} if send_email is NOT_GIVEN else {"send_email": send_email}
        return await self._post(
            f"customers/{quote_path(customer_id)}/customer-portal/session",
            query=query,
            cast_to=CustomerPortalSession,
            options=options,
        )


class LedgerEntriesResource(SyncBaseResource):
    """Credits and debits on a customer's wallets."""

    def create(
        self,
        customer_id: str,
        *,
        amount: int,
        currency: Currency,
        entry_type: Literal["credit", "debit"],
        idempotency_key: NotGivenOr[Optional[str]] = NOT_GIVEN,
        reason: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> CustomerWallet:
        """Credit or debit a customer wallet. Returns the updated wallet."""
        params = build_params(
            LedgerEntryCreateParams,
            amount=amount,
            currency=currency,
            entry_type=entry_type,
            idempotency_key=idempotency_key,
            reason=reason,
        )
        return self._post(_ledger_path(customer_id), body=params.to_wire(), cast_to=CustomerWallet, options=options)

    def list(
        self,
        customer_id: str,
        *,
        currency: NotGivenOr[Currency] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[CustomerWalletTransaction]:
        params = build_params(
            LedgerEntryListParams, currency=currency, page_number=page_number, page_size=page_size
        )
        return self._get_page(
            _ledger_path(customer_id),
            SyncDefaultPageNumberPagination,
            CustomerWalletTransaction,
            query=params.to_wire(),
            options=options,
        )


class WalletsResource(SyncBaseResource):
    def __init__(self, client: "DodoPayments") -> None:
        super().__init__(client)
        self.ledger_entries = LedgerEntriesResource(client)

    def list(self, customer_id: str, *, options: Optional[RequestOptions] = None) -> WalletListResponse:
        """All wallets of a customer, with the total balance in USD."""
        return self._get(f"customers/{quote_path(customer_id)}/wallets", cast_to=WalletListResponse, options=options)


class CustomersResource(SyncBaseResource):
    """Sync resource for customer operations.

    Example:
        ```python
        with DodoPayments(api_key="...") as client:
            for customer in client.customers.list(email="ada@example.com"):
                wallets = client.customers.wallets.list(customer.customer_id)
        ```
    """

    def __init__(self, client: "DodoPayments") -> None:
        super().__init__(client)
        self.wallets = WalletsResource(client)

    def create(
        self,
        *,
        email: str,
        name: str,
        phone_number: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        """Create a customer."""
        params = build_params(CustomerCreateParams, email=email, name=name, phone_number=phone_number)
        return self._post("customers", body=params.to_wire(), cast_to=Customer, options=options)

    def retrieve(self, customer_id: str, *, options: Optional[RequestOptions] = None) -> Customer:
        """Get a customer by ID."""
        return self._get(f"customers/{quote_path(customer_id)}", cast_to=Customer, options=options)

    def update(
        self,
        customer_id: str,
        *,
        name: NotGivenOr[str] = NOT_GIVEN,
        phone_number: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        """Update a customer's name or phone number."""
        params = build_params(CustomerUpdateParams, name=name, phone_number=phone_number)
        return self._patch(
            f"customers/{quote_path(customer_id)}", body=params.to_wire(), cast_to=Customer, options=options
        )

    def list(
        self,
        *,
        email: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[Customer]:
        """List customers, optionally filtered by email."""
        params = build_params(CustomerListParams, email=email, page_number=page_number, page_size=page_size)
        return self._get_page(
            "customers", SyncDefaultPageNumberPagination, Customer, query=params.to_wire(), options=options
        )

    def retrieve_payment_methods(
        self, customer_id: str, *, options: Optional[RequestOptions] = None
    ) -> CustomerPaymentMethods:
        """Payment methods the customer saved in earlier purchases."""
        return self._get(
            f"customers/{quote_path(customer_id)}/payment-methods",
            cast_to=CustomerPaymentMethods,
            options=options,
        )

    def create_portal_session(
        self,
        customer_id: str,
        *,
        send_email: NotGivenOr[bool] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> CustomerPortalSession:
        """Create a link to the customer portal, optionally emailing it."""
        query = {} if send_email is NOT_GIVEN else {"send_email": send_email}
        return self._post(
            f"customers/{quote_path(customer_id)}/customer-portal/session",
            query=query,
            cast_to=CustomerPortalSession,
            options=options,
        )


__all__ = [
    "AsyncCustomersResource",
    "AsyncLedgerEntriesResource",
    "AsyncWalletsResource",
    "CustomersResource",
    "LedgerEntriesResource",
    "WalletsResource",
]
