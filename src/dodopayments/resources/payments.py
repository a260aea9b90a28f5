"""
Payments resource for the Dodo Payments SDK.

This module provides both async and sync interfaces for one-time payments.
"""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.enums import Currency, IntentStatus, PaymentMethodTypes
from ..models.payments import (
    Payment,
    PaymentCreateParams,
    PaymentCreateResponse,
    PaymentLineItems,
    PaymentListItem,
    PaymentListParams,
)
from ..models.shared import BillingAddress, CustomerRequest, OneTimeProductCartItem
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncPaymentsResource(AsyncBaseResource):
    """Async resource for payment operations.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            payment = await client.payments.create(
                billing={"city": "Berlin", "country": "DE", "state": "BE",
                         "street": "Main St 1", "zipcode": "10115"},
                customer={"customer_id": "cus_123"},
                product_cart=[{"product_id": "pdt_123", "quantity": 1}],
                payment_link=True,
            )

            async for item in await client.payments.list(status="succeeded"):
                print(item.payment_id, item.total_amount)
        ```
    """

    async def create(
        self,
        billing: BillingAddress,
        customer: CustomerRequest,
        product_cart: List[OneTimeProductCartItem],
        *,
        allowed_payment_method_types: NotGivenOr[Optional[List[PaymentMethodTypes]]] = NOT_GIVEN,
        billing_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        discount_code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        force_3ds: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Dict[str, str]] = NOT_GIVEN,
        payment_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        return_url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        show_saved_payment_methods: NotGivenOr[bool] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> PaymentCreateResponse:
        """Create a one-time payment.

        Args:
            billing: Billing address of the customer
            customer: An existing customer reference or new customer details
            product_cart: One-time products to charge for
            payment_link: Also create a hosted payment link
            options: Per-call request options

        Returns:
            The created payment, with its client secret
        """
        params = build_params(
            PaymentCreateParams,
            billing=billing,
            customer=customer,
            product_cart=product_cart,
            allowed_payment_method_types=allowed_payment_method_types,
            billing_currency=billing_currency,
            discount_code=discount_code,
            force_3ds=force_3ds,
            metadata=metadata,
            payment_link=payment_link,
            return_url=return_url,
            show_saved_payment_methods=show_saved_payment_methods,
            tax_id=tax_id,
        )
        return await self._post("payments", body=params.to_wire(), cast_to=PaymentCreateResponse, options=options)

    async def retrieve(self, payment_id: str, *, options: Optional[RequestOptions] = None) -> Payment:
        """Get a payment by ID."""
        return await self._get(f"payments/{quote_path(payment_id)}", cast_to=Payment, options=options)

    async def list(
        self,
        *,
        brand_id: NotGivenOr[str] = NOT_GIVEN,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        product_id: NotGivenOr[str] = NOT_GIVEN,
        status: NotGivenOr[IntentStatus] = NOT_GIVEN,
        subscription_id: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[PaymentListItem]:
        """List payments, newest first."""
        params = build_params(
            PaymentListParams,
            brand_id=brand_id,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            product_id=product_id,
            status=status,
            subscription_id=subscription_id,
        )
        return await self._get_page(
            "payments",
            AsyncDefaultPageNumberPagination,
            PaymentListItem,
            query=params.to_wire(),
            options=options,
        )

    async def retrieve_line_items(
        self, payment_id: str, *, options: Optional[RequestOptions] = None
    ) -> PaymentLineItems:
        """Get the refundable line items of a payment."""
        return await self._get(
            f"payments/{quote_path(payment_id)}/line-items", cast_to=PaymentLineItems, options=options
        )


class PaymentsResource(SyncBaseResource):
    """Sync resource for payment operations.

    Example:
        ```python
        with DodoPayments(api_key="...") as client:
            payment = client.payments.retrieve("pay_123")
            for line in client.payments.retrieve_line_items("pay_123").items:
                print(line.items_id, line.refundable_amount)
        ```
    """

    def create(
        self,
        billing: BillingAddress,
        customer: CustomerRequest,
        product_cart: List[OneTimeProductCartItem],
        *,
        allowed_payment_method_types: NotGivenOr[Optional[List[PaymentMethodTypes]]] = NOT_GIVEN,
        billing_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        discount_code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        force_3ds: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Dict[str, str]] = NOT_GIVEN,
        payment_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        return_url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        show_saved_payment_methods: NotGivenOr[bool] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> PaymentCreateResponse:
        """Create a one-time payment."""
        params = build_params(
            PaymentCreateParams,
            billing=billing,
            customer=customer,
            product_cart=product_cart,
            allowed_payment_method_types=allowed_payment_method_types,
            billing_currency=billing_currency,
            discount_code=discount_code,
            force_3ds=force_3ds,
            metadata=metadata,
            payment_link=payment_link,
            return_url=return_url,
            show_saved_payment_methods=show_saved_payment_methods,
            tax_id=tax_id,
        )
        return self._post("payments", body=params.to_wire(), cast_to=PaymentCreateResponse, options=options)

    def retrieve(self, payment_id: str, *, options: Optional[RequestOptions] = None) -> Payment:
        """Get a payment by ID."""
        return self._get(f"payments/{quote_path(payment_id)}", cast_to=Payment, options=options)

    def list(
        self,
        *,
        brand_id: NotGivenOr[str] = NOT_GIVEN,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        product_id: NotGivenOr[str] = NOT_GIVEN,
        status: NotGivenOr[IntentStatus] = NOT_GIVEN,
        subscription_id: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[PaymentListItem]:
        """List payments, newest first."""
        params = build_params(
            PaymentListParams,
            brand_id=brand_id,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            product_id=product_id,
            status=status,
            subscription_id=subscription_id,
        )
        return self._get_page(
            "payments",
            SyncDefaultPageNumberPagination,
            PaymentListItem,
            query=params.to_wire(),
            options=options,
        )

    def retrieve_line_items(self, payment_id: str, *, options: Optional[RequestOptions] = None) -> PaymentLineItems:
        """Get the refundable line items of a payment."""
        return self._get(f"payments/{quote_path(payment_id)}/line-items", cast_to=PaymentLineItems, options=options)


__all__ = ["AsyncPaymentsResource", "PaymentsResource"]
