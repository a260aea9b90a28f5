"""
Subscriptions resource for the Dodo Payments SDK.

This module provides both async and sync interfaces for subscription
operations: creation, updates, plan changes, on-demand charges and usage
history.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.enums import (
    Currency,
    PaymentMethodTypes,
    ProrationBillingMode,
    SubscriptionStatus,
)
from ..models.shared import (
    AttachAddon,
    BillingAddress,
    CustomerRequest,
    OnDemandSubscription,
    OneTimeProductCartItem,
)
from ..models.subscriptions import (
    CustomerBalanceConfig,
    DisableOnDemand,
    ExistingPaymentMethod,
    NewPaymentMethod,
    Subscription,
    SubscriptionChangePlanParams,
    SubscriptionChargeParams,
    SubscriptionChargeResponse,
    SubscriptionCreateParams,
    SubscriptionCreateResponse,
    SubscriptionListItem,
    SubscriptionListParams,
    SubscriptionPreviewChangePlanResponse,
    SubscriptionUpdateParams,
    SubscriptionUpdatePaymentMethodResponse,
    SubscriptionUsageHistoryItem,
    SubscriptionUsageHistoryParams,
)
from ..models.unions import resolve_variant
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path

PaymentMethodRequest = Union[NewPaymentMethod, ExistingPaymentMethod, Mapping[str, Any]]


def _payment_method_body(payment_method: PaymentMethodRequest) -> Dict[str, Any]:
    method = resolve_variant((NewPaymentMethod, ExistingPaymentMethod), payment_method, discriminator="type")
    return method.to_wire()


class AsyncSubscriptionsResource(AsyncBaseResource):
    """Async resource for subscription operations.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            await client.subscriptions.change_plan(
                "sub_123",
                product_id="pdt_pro",
                proration_billing_mode="prorated_immediately",
                quantity=1,
            )

            page = await client.subscriptions.retrieve_usage_history("sub_123")
            for period in page.items:
                print(period.start_date, [m.consumed_units for m in period.meters])
        ```
    """

    async def create(
        self,
        billing: BillingAddress,
        customer: CustomerRequest,
        product_id: str,
        quantity: int,
        *,
        addons: NotGivenOr[Optional[List[AttachAddon]]] = NOT_GIVEN,
        allowed_payment_method_types: NotGivenOr[Optional[List[PaymentMethodTypes]]] = NOT_GIVEN,
        billing_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        discount_code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        force_3ds: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        on_demand: NotGivenOr[Optional[OnDemandSubscription]] = NOT_GIVEN,
        one_time_product_cart: NotGivenOr[Optional[List[OneTimeProductCartItem]]] = NOT_GIVEN,
        payment_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        payment_method_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        redirect_immediately: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        return_url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        short_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        show_saved_payment_methods: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        trial_period_days: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionCreateResponse:
        """Create a subscription directly.

        The API prefers checkout sessions for new subscriptions; this endpoint
        is kept for existing integrations.

        Args:
            billing: Billing address of the customer
            customer: An existing customer reference or new customer details
            product_id: Recurring product to subscribe to
            quantity: Number of units
            on_demand: Create an on-demand subscription charged with ``charge``
            trial_period_days: Overrides the product's trial period
            options: Per-call request options
        """
        params = build_params(
            SubscriptionCreateParams,
            billing=billing,
            customer=customer,
            product_id=product_id,
            quantity=quantity,
            addons=addons,
            allowed_payment_method_types=allowed_payment_method_types,
            billing_currency=billing_currency,
            discount_code=discount_code,
            force_3ds=force_3ds,
            metadata=metadata,
            on_demand=on_demand,
            one_time_product_cart=one_time_product_cart,
            payment_link=payment_link,
            payment_method_id=payment_method_id,
            redirect_immediately=redirect_immediately,
            return_url=return_url,
            short_link=short_link,
            show_saved_payment_methods=show_saved_payment_methods,
            tax_id=tax_id,
            trial_period_days=trial_period_days,
        )
        return await self._post(
            "subscriptions", body=params.to_wire(), cast_to=SubscriptionCreateResponse, options=options
        )

    async def retrieve(self, subscription_id: str, *, options: Optional[RequestOptions] = None) -> Subscription:
        """Get a subscription by ID."""
        return await self._get(
            f"subscriptions/{quote_path(subscription_id)}", cast_to=Subscription, options=options
        )

    async def update(
        self,
        subscription_id: str,
        *,
        billing: NotGivenOr[Optional[BillingAddress]] = NOT_GIVEN,
        cancel_at_next_billing_date: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        customer_name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        disable_on_demand: NotGivenOr[Optional[DisableOnDemand]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        next_billing_date: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        status: NotGivenOr[Optional[SubscriptionStatus]] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        """Update a subscription. Only the arguments passed are changed."""
        params = build_params(
            SubscriptionUpdateParams,
            billing=billing,
            cancel_at_next_billing_date=cancel_at_next_billing_date,
            customer_name=customer_name,
            disable_on_demand=disable_on_demand,
            metadata=metadata,
            next_billing_date=next_billing_date,
            status=status,
            tax_id=tax_id,
        )
        return await self._patch(
            f"subscriptions/{quote_path(subscription_id)}",
            body=params.to_wire(),
            cast_to=Subscription,
            options=options,
        )

    async def list(
        self,
        *,
        brand_id: NotGivenOr[str] = NOT_GIVEN,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        status: NotGivenOr[SubscriptionStatus] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[SubscriptionListItem]:
        """List subscriptions."""
        params = build_params(
            SubscriptionListParams,
            brand_id=brand_id,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            status=status,
        )
        return await self._get_page(
            "subscriptions",
            AsyncDefaultPageNumberPagination,
            SubscriptionListItem,
            query=params.to_wire(),
            options=options,
        )

    async def change_plan(
        self,
        subscription_id: str,
        *,
        product_id: str,
        proration_billing_mode: ProrationBillingMode,
        quantity: int,
        addons: NotGivenOr[Optional[List[AttachAddon]]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Move a subscription to another product.

        Args:
            subscription_id: Subscription to change
            product_id: The new product
            proration_billing_mode: How the remainder of the current period is billed
            quantity: Units of the new product
            addons: Replaces the subscription's addons; an empty list removes them
            options: Per-call request options
        """
        params = build_params(
            SubscriptionChangePlanParams,
            product_id=product_id,
            proration_billing_mode=proration_billing_mode,
            quantity=quantity,
            addons=addons,
            metadata=metadata,
        )
        await self._post(
            f"subscriptions/{quote_path(subscription_id)}/change-plan", body=params.to_wire(), options=options
        )

    async def preview_change_plan(
        self,
        subscription_id: str,
        *,
        product_id: str,
        proration_billing_mode: ProrationBillingMode,
        quantity: int,
        addons: NotGivenOr[Optional[List[AttachAddon]]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionPreviewChangePlanResponse:
        """Show what ``change_plan`` would charge, without changing anything."""
        params = build_params(
            SubscriptionChangePlanParams,
            product_id=product_id,
            proration_billing_mode=proration_billing_mode,
            quantity=quantity,
            addons=addons,
            metadata=metadata,
        )
        return await self._post(
            f"subscriptions/{quote_path(subscription_id)}/change-plan/preview",
            body=params.to_wire(),
            cast_to=SubscriptionPreviewChangePlanResponse,
            options=options,
        )

    async def charge(
        self,
        subscription_id: str,
        *,
        product_price: int,
        adaptive_currency_fees_inclusive: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        customer_balance_config: NotGivenOr[Optional[CustomerBalanceConfig]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        product_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        product_description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionChargeResponse:
        """Charge an on-demand subscription.

        Args:
            subscription_id: An on-demand subscription
            product_price: Amount in the smallest currency unit
            options: Per-call request options

        Returns:
            The id of the payment that was created
        """
        params = build_params(
            SubscriptionChargeParams,
            product_price=product_price,
            adaptive_currency_fees_inclusive=adaptive_currency_fees_inclusive,
            customer_balance_config=customer_balance_config,
            metadata=metadata,
            product_currency=product_currency,
            product_description=product_description,
        )
        return await self._post(
            f"subscriptions/{quote_path(subscription_id)}/charge",
            body=params.to_wire(),
            cast_to=SubscriptionChargeResponse,
            options=options,
        )

    async def retrieve_usage_history(
        self,
        subscription_id: str,
        *,
        end_date: NotGivenOr[datetime] = NOT_GIVEN,
        meter_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        start_date: NotGivenOr[datetime] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[SubscriptionUsageHistoryItem]:
        """Metered usage of a subscription, one item per billing period."""
        params = build_params(
            SubscriptionUsageHistoryParams,
            end_date=end_date,
            meter_id=meter_id,
            page_number=page_number,
            page_size=page_size,
            start_date=start_date,
        )
        return await self._get_page(
            f"subscriptions/{quote_path(subscription_id)}/usage-history",
            AsyncDefaultPageNumberPagination,
            SubscriptionUsageHistoryItem,
            query=params.to_wire(),
            options=options,
        )

    async def update_payment_method(
        self,
        subscription_id: str,
        payment_method: PaymentMethodRequest,
        *,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionUpdatePaymentMethodResponse:
        """Switch the payment method a subscription is billed to.

        Args:
            subscription_id: Subscription to update
            payment_method: ``{"type": "new", "return_url": ...}`` to collect a
                new method, or ``{"type": "existing", "payment_method_id": ...}``
            options: Per-call request options
        """
        return await self._post(
            f"subscriptions/{quote_path(subscription_id)}/update-payment-method",
            body=_payment_method_body(payment_method),
            cast_to=SubscriptionUpdatePaymentMethodResponse,
            options=options,
        )


class SubscriptionsResource(SyncBaseResource):
    """Sync resource for subscription operations.

    Example:
        ```python
        with DodoPayments(api_key="...") as client:
            sub = client.subscriptions.update("sub_123", cancel_at_next_billing_date=True)
            client.subscriptions.charge("sub_on_demand", product_price=1500)
        ```
    """

    def create(
        self,
        billing: BillingAddress,
        customer: CustomerRequest,
        product_id: str,
        quantity: int,
        *,
        addons: NotGivenOr[Optional[List[AttachAddon]]] = NOT_GIVEN,
        allowed_payment_method_types: NotGivenOr[Optional[List[PaymentMethodTypes]]] = NOT_GIVEN,
        billing_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        discount_code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        force_3ds: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        on_demand: NotGivenOr[Optional[OnDemandSubscription]] = NOT_GIVEN,
        one_time_product_cart: NotGivenOr[Optional[List[OneTimeProductCartItem]]] = NOT_GIVEN,
        payment_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        payment_method_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        redirect_immediately: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        return_url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        short_link: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        show_saved_payment_methods: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        trial_period_days: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionCreateResponse:
        """Create a subscription directly. See ``AsyncSubscriptionsResource.create``."""
        params = build_params(
            SubscriptionCreateParams,
            billing=billing,
            customer=customer,
            product_id=product_id,
            quantity=quantity,
            addons=addons,
            allowed_payment_method_types=allowed_payment_method_types,
            billing_currency=billing_currency,
            discount_code=discount_code,
            force_3ds=force_3ds,
            metadata=metadata,
            on_demand=on_demand,
            one_time_product_cart=one_time_product_cart,
            payment_link=payment_link,
            payment_method_id=payment_method_id,
            redirect_immediately=redirect_immediately,
            return_url=return_url,
            short_link=short_link,
            show_saved_payment_methods=show_saved_payment_methods,
            tax_id=tax_id,
            trial_period_days=trial_period_days,
        )
        return self._post("subscriptions", body=params.to_wire(), cast_to=SubscriptionCreateResponse, options=options)

    def retrieve(self, subscription_id: str, *, options: Optional[RequestOptions] = None) -> Subscription:
        """Get a subscription by ID."""
        return self._get(f"subscriptions/{quote_path(subscription_id)}", cast_to=Subscription, options=options)

    def update(
        self,
        subscription_id: str,
        *,
        billing: NotGivenOr[Optional[BillingAddress]] = NOT_GIVEN,
        cancel_at_next_billing_date: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        customer_name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        disable_on_demand: NotGivenOr[Optional[DisableOnDemand]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        next_billing_date: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        status: NotGivenOr[Optional[SubscriptionStatus]] = NOT_GIVEN,
        tax_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        """Update a subscription. Only the arguments passed are changed."""
        params = build_params(
            SubscriptionUpdateParams,
            billing=billing,
            cancel_at_next_billing_date=cancel_at_next_billing_date,
            customer_name=customer_name,
            disable_on_demand=disable_on_demand,
            metadata=metadata,
            next_billing_date=next_billing_date,
            status=status,
            tax_id=tax_id,
        )
        return self._patch(
            f"subscriptions/{quote_path(subscription_id)}",
            body=params.to_wire(),
            cast_to=Subscription,
            options=options,
        )

    def list(
        self,
        *,
        brand_id: NotGivenOr[str] = NOT_GIVEN,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        status: NotGivenOr[SubscriptionStatus] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[SubscriptionListItem]:
        """List subscriptions."""
        params = build_params(
            SubscriptionListParams,
            brand_id=brand_id,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            status=status,
        )
        return self._get_page(
            "subscriptions",
            SyncDefaultPageNumberPagination,
            SubscriptionListItem,
            query=params.to_wire(),
            options=options,
        )

    def change_plan(
        self,
        subscription_id: str,
        *,
        product_id: str,
        proration_billing_mode: ProrationBillingMode,
        quantity: int,
        addons: NotGivenOr[Optional[List[AttachAddon]]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Move a subscription to another product."""
        params = build_params(
            SubscriptionChangePlanParams,
            product_id=product_id,
            proration_billing_mode=proration_billing_mode,
            quantity=quantity,
            addons=addons,
            metadata=metadata,
        )
        self._post(f"subscriptions/{quote_path(subscription_id)}/change-plan", body=params.to_wire(), options=options)

    def preview_change_plan(
        self,
        subscription_id: str,
        *,
        product_id: str,
        proration_billing_mode: ProrationBillingMode,
        quantity: int,
        addons: NotGivenOr[Optional[List[AttachAddon]]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionPreviewChangePlanResponse:
        """Show what ``change_plan`` would charge, without changing anything."""
        params = build_params(
            SubscriptionChangePlanParams,
            product_id=product_id,
            proration_billing_mode=proration_billing_mode,
            quantity=quantity,
            addons=addons,
            metadata=metadata,
        )
        return self._post(
            f"subscriptions/{quote_path(subscription_id)}/change-plan/preview",
            body=params.to_wire(),
            cast_to=SubscriptionPreviewChangePlanResponse,
            options=options,
        )

    def charge(
        self,
        subscription_id: str,
        *,
        product_price: int,
        adaptive_currency_fees_inclusive: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        customer_balance_config: NotGivenOr[Optional[CustomerBalanceConfig]] = NOT_GIVEN,
        metadata: NotGivenOr[Optional[Dict[str, str]]] = NOT_GIVEN,
        product_currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        product_description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionChargeResponse:
        """Charge an on-demand subscription."""
        params = build_params(
            SubscriptionChargeParams,
            product_price=product_price,
            adaptive_currency_fees_inclusive=adaptive_currency_fees_inclusive,
            customer_balance_config=customer_balance_config,
            metadata=metadata,
            product_currency=product_currency,
            product_description=product_description,
        )
        return self._post(
            f"subscriptions/{quote_path(subscription_id)}/charge",
            body=params.to_wire(),
            cast_to=SubscriptionChargeResponse,
            options=options,
        )

    def retrieve_usage_history(
        self,
        subscription_id: str,
        *,
        end_date: NotGivenOr[datetime] = NOT_GIVEN,
        meter_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        start_date: NotGivenOr[datetime] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[SubscriptionUsageHistoryItem]:
        """Metered usage of a subscription, one item per billing period."""
        params = build_params(
            SubscriptionUsageHistoryParams,
            end_date=end_date,
            meter_id=meter_id,
            page_number=page_number,
            page_size=page_size,
            start_date=start_date,
        )
        return self._get_page(
            f"subscriptions/{quote_path(subscription_id)}/usage-history",
            SyncDefaultPageNumberPagination,
            SubscriptionUsageHistoryItem,
            query=params.to_wire(),
            options=options,
        )

    def update_payment_method(
        self,
        subscription_id: str,
        payment_method: PaymentMethodRequest,
        *,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionUpdatePaymentMethodResponse:
        """Switch the payment method a subscription is billed to."""
        return self._post(
            f"subscriptions/{quote_path(subscription_id)}/update-payment-method",
            body=_payment_method_body(payment_method),
            cast_to=SubscriptionUpdatePaymentMethodResponse,
            options=options,
        )


__all__ = ["AsyncSubscriptionsResource", "SubscriptionsResource", "PaymentMethodRequest"]
