"""
Checkout sessions resource for the Dodo Payments SDK.

A checkout session is a hosted page where the customer pays for a cart of
products. This is the preferred way to start both one-time payments and
subscriptions.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.checkout_sessions import (
    CheckoutBillingAddress,
    CheckoutProductCartItem,
    CheckoutSessionCreateParams,
    CheckoutSessionPreviewParams,
    CheckoutSessionPreviewResponse,
    CheckoutSessionResponse,
    CheckoutSessionStatus,
    CustomField,
    Customization,
    FeatureFlags,
    SubscriptionData,
)
from ..models.enums import Currency, PaymentMethodTypes
from ..models.shared import CustomerRequest
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncCheckoutSessionsResource(AsyncBaseResource):
    """Async resource for checkout sessions.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            session = await client.checkout_sessions.create(
                product_cart=[{"product_id": "pdt_123", "quantity": 1}],
                return_url="https://example.com/thanks",
            )
            print(session.checkout_url)
        ```
    """

    async def create(
        self,
        product_cart: List[CheckoutProductCartItem],
        *,
        allowed_payment_method_types: NotGivenOr[Optional[List[PaymentMethodTypes]]] = NOT_GIVEN,
        billing_address: NotGivenOr[Optional[CheckoutBillingAddress]] = NOT_GIVEN,
        billing_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        confirm: NotGivenOr[bool] = NOT_GIVEN,
        custom_fields: NotGivenOr[Optional[List[CustomField]]] = NOT_GIVEN,
        customer: NotGivenOr[Optional[CustomerRequest]] = NOT_GIVEN,
        customization: NotGivenOr[Customization] = NOT_GIVEN,
        discount_code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        feature_flags: NotGivenOr[FeatureFlags] = NOT_GIVEN,
        force_3ds: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        minimal_address: NotGivenOr[bool] = NOT_GIVEN,
        payment_method_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        product_collection_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        return_url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        short_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        show_saved_payment_methods: NotGivenOr[bool] = NOT_GIVEN,
        subscription_data: NotGivenOr[Optional[SubscriptionData]] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> CheckoutSessionResponse:
        """Create a checkout session.

        Args:
            product_cart: Products (and their addons) to sell
            customer: An existing customer reference or new customer details
            confirm: Confirm the session immediately; requires full billing details
            return_url: Where the customer is sent after paying
            options: Per-call request options

        Returns:
            The session id and the hosted checkout URL
        """
        params = build_params(
            CheckoutSessionCreateParams,
            product_cart=product_cart,
            allowed_payment_method_types=allowed_payment_method_types,
            billing_address=billing_address,
            billing_currency=billing_currency,
            confirm=confirm,
            custom_fields=custom_fields,
            customer=customer,
            customization=customization,
            discount_code=discount_code,
            feature_flags=feature_flags,
            force_3ds=force_3ds,
            metadata=metadata,
            minimal_address=minimal_address,
            payment_method_id=payment_method_id,
            product_collection_id=product_collection_id,
            return_url=return_url,
            short_link=short_link,
            show_saved_payment_methods=show_saved_payment_methods,
            subscription_data=subscription_data,
            tax_id=tax_id,
        )
        return await self._post(
            "checkouts", body=params.to_wire(), cast_to=CheckoutSessionResponse, options=options
        )

    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> CheckoutSessionStatus:
        """Get the status of a checkout session."""
        return await self._get(
            f"checkouts/{quote_path(id)}", cast_to=CheckoutSessionStatus, options=options
        )

    async def preview(
        self,
        product_cart: List[CheckoutProductCartItem],
        *,
        options: Optional[RequestOptions] = None,
        **params: Any,
    ) -> CheckoutSessionPreviewResponse:
        """Price a checkout session without creating it.

        Takes the same arguments as ``create``.
        """
        request = build_params(CheckoutSessionPreviewParams, product_cart=product_cart, **params)
        return await self._post(
            "checkouts/preview",
            body=request.to_wire(),
            cast_to=CheckoutSessionPreviewResponse,
            options=options,
        )


class CheckoutSessionsResource(SyncBaseResource):
    """Sync resource for checkout sessions.

    Example:
        ```python
        with DodoPayments(api_key="...") as client:
            session = client.checkout_sessions.create(
                product_cart=[{"product_id": "pdt_123", "quantity": 1}],
            )
            status = client.checkout_sessions.retrieve(session.session_id)
        ```
    """

    def create(
        self,
        product_cart: List[CheckoutProductCartItem],
        *,
        allowed_payment_method_types: NotGivenOr[Optional[List[PaymentMethodTypes]]] = NOT_GIVEN,
        billing_address: NotGivenOr[Optional[CheckoutBillingAddress]] = NOT_GIVEN,
        billing_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        confirm: NotGivenOr[bool] = NOT_GIVEN,
        custom_fields: NotGivenOr[Optional[List[CustomField]]] = NOT_GIVEN,
        customer: NotGivenOr[Optional[CustomerRequest]] = NOT_GIVEN,
        customization: NotGivenOr[Customization] = NOT_GIVEN,
        discount_code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        feature_flags: NotGivenOr[FeatureFlags] = NOT_GIVEN,
        force_3ds: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        minimal_address: NotGivenOr[bool] = NOT_GIVEN,
        payment_method_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        product_collection_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        return_url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        short_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        show_saved_payment_methods: NotGivenOr[bool] = NOT_GIVEN,
        subscription_data: NotGivenOr[Optional[SubscriptionData]] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> CheckoutSessionResponse:
        """Create a checkout session. See ``AsyncCheckoutSessionsResource.create``."""
        params = build_params(
            CheckoutSessionCreateParams,
            product_cart=product_cart,
            allowed_payment_method_types=allowed_payment_method_types,
            billing_address=billing_address,
            billing_currency=billing_currency,
            confirm=confirm,
            custom_fields=custom_fields,
            customer=customer,
            customization=customization,
            discount_code=discount_code,
            feature_flags=feature_flags,
            force_3ds=force_3ds,
            metadata=metadata,
            minimal_address=minimal_address,
            payment_method_id=payment_method_id,
            product_collection_id=product_collection_id,
            return_url=return_url,
            short_link=short_link,
            show_saved_payment_methods=show_saved_payment_methods,
            subscription_data=subscription_data,
            tax_id=tax_id,
        )
        return self._post("checkouts", body=params.to_wire(), cast_to=CheckoutSessionResponse, options=options)

    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> CheckoutSessionStatus:
        """Get the status of a checkout session."""
        return self._get(f"checkouts/{quote_path(id)}", cast_to=CheckoutSessionStatus, options=options)

    def preview(
        self,
        product_cart: List[CheckoutProductCartItem],
        *,
        options: Optional[RequestOptions] = None,
        **params: Any,
    ) -> CheckoutSessionPreviewResponse:
        """Price a checkout session without creating it.

        Takes the same arguments as ``create``.
        """
        request = build_params(CheckoutSessionPreviewParams, product_cart=product_cart, **params)
        return self._post(
            "checkouts/preview",
            body=request.to_wire(),
            cast_to=CheckoutSessionPreviewResponse,
            options=options,
        )


__all__ = ["AsyncCheckoutSessionsResource", "CheckoutSessionsResource"]
