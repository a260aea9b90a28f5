"""Subscription models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import DodoModel
from .enums import (
    Currency,
    PaymentMethodTypes,
    ProrationBillingMode,
    SubscriptionStatus,
    TaxCategory,
    TimeInterval,
)
from .shared import (
    AddonCartResponseItem,
    AttachAddon,
    BillingAddress,
    CustomerLimitedDetails,
    CustomerRequest,
    OnDemandSubscription,
    OneTimeProductCartItem,
)
from .unions import Variant


class SubscriptionMeter(DodoModel):
    """A usage meter attached to a subscription's product."""

    currency: Currency
    free_threshold: int
    measurement_unit: str
    meter_id: str
    name: str
    price_per_unit: str
    description: Optional[str] = None


class SubscriptionListItem(DodoModel):
    """Summary row returned by ``GET /subscriptions``."""

    billing: BillingAddress
    cancel_at_next_billing_date: bool
    created_at: datetime
    currency: Currency
    customer: CustomerLimitedDetails
    metadata: Dict[str, str]
    next_billing_date: datetime
    on_demand: bool
    payment_frequency_count: int
    payment_frequency_interval: TimeInterval
    previous_billing_date: datetime
    product_id: str
    quantity: int
    recurring_pre_tax_amount: int
    status: SubscriptionStatus
    subscription_id: str
    subscription_period_count: int
    subscription_period_interval: TimeInterval
    tax_inclusive: bool
    trial_period_days: int
    cancelled_at: Optional[datetime] = None
    discount_cycles_remaining: Optional[int] = None
    discount_id: Optional[str] = None
    payment_method_id: Optional[str] = None
    tax_id: Optional[str] = None


class Subscription(SubscriptionListItem):
    """A subscription with its addons and meters."""

    addons: List[AddonCartResponseItem]
    meters: List[SubscriptionMeter]
    expires_at: Optional[datetime] = None


class SubscriptionCreateParams(DodoModel):
    """Request to create a subscription directly (checkout sessions are preferred)."""

    billing: BillingAddress
    customer: CustomerRequest
    product_id: str
    quantity: int
    addons: Optional[List[AttachAddon]] = None
    allowed_payment_method_types: Optional[List[PaymentMethodTypes]] = None
    billing_currency: Optional[Currency] = None
    discount_code: Optional[str] = None
    force_3ds: Optional[bool] = None
    metadata: Optional[Dict[str, str]] = None
    on_demand: Optional[OnDemandSubscription] = None
    one_time_product_cart: Optional[List[OneTimeProductCartItem]] = None
    payment_link: Optional[bool] = None
    payment_method_id: Optional[str] = None
    redirect_immediately: Optional[bool] = None
    return_url: Optional[str] = None
    short_link: Optional[bool] = None
    show_saved_payment_methods: Optional[bool] = None
    tax_id: Optional[str] = None
    trial_period_days: Optional[int] = None


class SubscriptionCreateResponse(DodoModel):
    addons: List[AddonCartResponseItem]
    customer: CustomerLimitedDetails
    metadata: Dict[str, str]
    payment_id: str
    recurring_pre_tax_amount: int
    subscription_id: str
    client_secret: Optional[str] = None
    discount_id: Optional[str] = None
    expires_on: Optional[datetime] = None
    one_time_product_cart: Optional[List[OneTimeProductCartItem]] = None
    payment_link: Optional[str] = None


class DisableOnDemand(DodoModel):
    next_billing_date: datetime


class SubscriptionUpdateParams(DodoModel):
    billing: Optional[BillingAddress] = None
    cancel_at_next_billing_date: Optional[bool] = None
    customer_name: Optional[str] = None
    disable_on_demand: Optional[DisableOnDemand] = None
    metadata: Optional[Dict[str, str]] = None
    next_billing_date: Optional[datetime] = None
    status: Optional[SubscriptionStatus] = None
    tax_id: Optional[str] = None


class SubscriptionListParams(DodoModel):
    brand_id: str = Field(default=None)
    created_at_gte: datetime = Field(default=None)
    created_at_lte: datetime = Field(default=None)
    customer_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    status: SubscriptionStatus = Field(default=None)


class SubscriptionChangePlanParams(DodoModel):
    """Body of a plan change; also used to preview one."""

    product_id: str
    proration_billing_mode: ProrationBillingMode
    quantity: int
    addons: Optional[List[AttachAddon]] = None
    metadata: Optional[Dict[str, str]] = None


class CustomerBalanceConfig(DodoModel):
    allow_customer_credits_purchase: Optional[bool] = None
    allow_customer_credits_usage: Optional[bool] = None


class SubscriptionChargeParams(DodoModel):
    """One-off charge against an on-demand subscription."""

    product_price: int
    adaptive_currency_fees_inclusive: Optional[bool] = None
    customer_balance_config: Optional[CustomerBalanceConfig] = None
    metadata: Optional[Dict[str, str]] = None
    product_currency: Optional[Currency] = None
    product_description: Optional[str] = None


class SubscriptionChargeResponse(DodoModel):
    payment_id: str


# ---------------------------------------------------------------------------
# Plan change preview
# ---------------------------------------------------------------------------


class SubscriptionLineItem(DodoModel):
    id: str
    currency: Currency
    product_id: str
    proration_factor: float
    quantity: int
    tax_inclusive: bool
    type: Literal["subscription"]
    unit_price: int
    description: Optional[str] = None
    name: Optional[str] = None
    tax: Optional[int] = None
    tax_rate: Optional[float] = None


class AddonLineItem(DodoModel):
    id: str
    currency: Currency
    name: str
    proration_factor: float
    quantity: int
    tax_category: TaxCategory
    tax_inclusive: bool
    tax_rate: float
    type: Literal["addon"]
    unit_price: int
    description: Optional[str] = None
    tax: Optional[int] = None


class MeterLineItem(DodoModel):
    id: str
    chargeable_units: str
    currency: Currency
    free_threshold: int
    name: str
    price_per_unit: str
    subtotal: int
    tax_inclusive: bool
    tax_rate: float
    type: Literal["meter"]
    units_consumed: str
    description: Optional[str] = None
    tax: Optional[int] = None


LineItem = Annotated[
    Union[SubscriptionLineItem, AddonLineItem, MeterLineItem],
    Variant(discriminator="type"),
]


class ImmediateChargeSummary(DodoModel):
    currency: Currency
    customer_credits: int
    settlement_amount: int
    settlement_currency: Currency
    total_amount: int
    settlement_tax: Optional[int] = None
    tax: Optional[int] = None


class ImmediateCharge(DodoModel):
    line_items: List[LineItem]
    summary: ImmediateChargeSummary


class SubscriptionPreviewChangePlanResponse(DodoModel):
    """What a plan change would charge now, and the resulting subscription."""

    immediate_charge: ImmediateCharge
    new_plan: Subscription


# ---------------------------------------------------------------------------
# Usage history
# ---------------------------------------------------------------------------


class SubscriptionUsageHistoryParams(DodoModel):
    end_date: datetime = Field(default=None)
    meter_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    start_date: datetime = Field(default=None)


class UsageHistoryMeter(DodoModel):
    id: str
    chargeable_units: str
    consumed_units: str
    currency: Currency
    free_threshold: int
    name: str
    price_per_unit: str
    total_price: int


class SubscriptionUsageHistoryItem(DodoModel):
    """Metered usage of one billing period."""

    end_date: datetime
    meters: List[UsageHistoryMeter]
    start_date: datetime


# ---------------------------------------------------------------------------
# Payment method update
# ---------------------------------------------------------------------------


class NewPaymentMethod(DodoModel):
    """Collect a new payment method through a hosted payment page."""

    type: Literal["new"]
    return_url: Optional[str] = None


class ExistingPaymentMethod(DodoModel):
    """Switch to a payment method the customer has already saved."""

    type: Literal["existing"]
    payment_method_id: str


SubscriptionUpdatePaymentMethodParams = Annotated[
    Union[NewPaymentMethod, ExistingPaymentMethod],
    Variant(discriminator="type"),
]


class SubscriptionUpdatePaymentMethodResponse(DodoModel):
    client_secret: Optional[str] = None
    expires_on: Optional[datetime] = None
    payment_id: Optional[str] = None
    payment_link: Optional[str] = None


__all__ = [
    "SubscriptionMeter",
    "SubscriptionListItem",
    "Subscription",
    "SubscriptionCreateParams",
    "SubscriptionCreateResponse",
    "DisableOnDemand",
    "SubscriptionUpdateParams",
    "SubscriptionListParams",
    "SubscriptionChangePlanParams",
    "CustomerBalanceConfig",
    "SubscriptionChargeParams",
    "SubscriptionChargeResponse",
    "SubscriptionLineItem",
    "AddonLineItem",
    "MeterLineItem",
    "LineItem",
    "ImmediateChargeSummary",
    "ImmediateCharge",
    "SubscriptionPreviewChangePlanResponse",
    "SubscriptionUsageHistoryParams",
    "UsageHistoryMeter",
    "SubscriptionUsageHistoryItem",
    "NewPaymentMethod",
    "ExistingPaymentMethod",
    "SubscriptionUpdatePaymentMethodParams",
    "SubscriptionUpdatePaymentMethodResponse",
]
