"""Checkout session models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import Field

from .base import DodoModel
from .enums import CountryCode, Currency, IntentStatus, PaymentMethodTypes, TaxCategory
from .shared import AttachAddon, CustomerRequest, OnDemandSubscription


class CheckoutProductCartItem(DodoModel):
    """A line of the checkout cart."""

    product_id: str
    quantity: int
    addons: Optional[List[AttachAddon]] = None
    amount: Optional[int] = None


class CheckoutBillingAddress(DodoModel):
    """Billing address prefill; only the country is required."""

    country: CountryCode
    city: Optional[str] = None
    state: Optional[str] = None
    street: Optional[str] = None
    zipcode: Optional[str] = None


class CustomField(DodoModel):
    """An extra input shown on the checkout page."""

    field_type: str
    key: str
    label: str
    options: Optional[List[str]] = None
    placeholder: Optional[str] = None
    required: bool = Field(default=None)


class Customization(DodoModel):
    force_language: Optional[str] = None
    show_on_demand_tag: bool = Field(default=None)
    show_order_details: bool = Field(default=None)
    theme: Literal["dark", "light", "system"] = Field(default=None)


class FeatureFlags(DodoModel):
    allow_currency_selection: Optional[bool] = None
    allow_customer_editing_city: Optional[bool] = None
    allow_customer_editing_country: Optional[bool] = None
    allow_customer_editing_email: Optional[bool] = None
    allow_customer_editing_name: Optional[bool] = None
    allow_customer_editing_state: Optional[bool] = None
    allow_customer_editing_street: Optional[bool] = None
    allow_customer_editing_zipcode: Optional[bool] = None
    allow_discount_code: Optional[bool] = None
    allow_phone_number_collection: Optional[bool] = None
    allow_tax_id: Optional[bool] = None
    always_create_new_customer: Optional[bool] = None


class SubscriptionData(DodoModel):
    on_demand: Optional[OnDemandSubscription] = None
    trial_period_days: Optional[int] = None


class CheckoutSessionCreateParams(DodoModel):
    """Body of ``POST /checkouts``. Only ``product_cart`` is required."""

    product_cart: List[CheckoutProductCartItem]
    allowed_payment_method_types: Optional[List[PaymentMethodTypes]] = None
    billing_address: Optional[CheckoutBillingAddress] = None
    billing_currency: Optional[Currency] = None
    confirm: bool = Field(default=None)
    custom_fields: Optional[List[CustomField]] = None
    customer: Optional[CustomerRequest] = None
    customization: Customization = Field(default=None)
    discount_code: Optional[str] = None
    feature_flags: FeatureFlags = Field(default=None)
    force_3ds: Optional[bool] = None
    metadata: Optional[Dict[str, str]] = None
    minimal_address: bool = Field(default=None)
    payment_method_id: Optional[str] = None
    product_collection_id: Optional[str] = None
    return_url: Optional[str] = None
    short_link: Optional[bool] = None
    show_saved_payment_methods: bool = Field(default=None)
    subscription_data: Optional[SubscriptionData] = None
    tax_id: Optional[str] = None


class CheckoutSessionPreviewParams(CheckoutSessionCreateParams):
    """Body of ``POST /checkouts/preview``; same shape as a create request."""


class CheckoutSessionResponse(DodoModel):
    checkout_url: str
    session_id: str


class CheckoutSessionStatus(DodoModel):
    id: str
    created_at: datetime
    customer_email: Optional[str] = None
    customer_name: Optional[str] = None
    payment_id: Optional[str] = None
    payment_status: Optional[IntentStatus] = None


class PreviewBreakup(DodoModel):
    discount: int
    subtotal: int
    total_amount: int
    tax: Optional[int] = None


class PreviewCartMeter(DodoModel):
    measurement_unit: str
    name: str
    price_per_unit: str
    description: Optional[str] = None
    free_threshold: Optional[int] = None


class PreviewCartAddon(DodoModel):
    addon_id: str
    currency: Currency
    discounted_price: int
    name: str
    og_currency: Currency
    og_price: int
    quantity: int
    tax_category: TaxCategory
    tax_inclusive: bool
    tax_rate: int
    description: Optional[str] = None
    discount_amount: Optional[int] = None
    tax: Optional[int] = None


class PreviewCartItem(DodoModel):
    currency: Currency
    discounted_price: int
    is_subscription: bool
    is_usage_based: bool
    meters: List[PreviewCartMeter]
    og_currency: Currency
    og_price: int
    product_id: str
    quantity: int
    tax_category: TaxCategory
    tax_inclusive: bool
    tax_rate: int
    addons: Optional[List[PreviewCartAddon]] = None
    description: Optional[str] = None
    discount_amount: Optional[int] = None
    discount_cycle: Optional[int] = None
    name: Optional[str] = None
    tax: Optional[int] = None


class CheckoutSessionPreviewResponse(DodoModel):
    """Price breakdown of a prospective checkout session."""

    billing_country: CountryCode
    currency: Currency
    current_breakup: PreviewBreakup
    product_cart: List[PreviewCartItem]
    total_price: int
    recurring_breakup: Optional[PreviewBreakup] = None
    tax_id_err_msg: Optional[str] = None
    total_tax: Optional[int] = None


__all__ = [
    "CheckoutProductCartItem",
    "CheckoutBillingAddress",
    "CustomField",
    "Customization",
    "FeatureFlags",
    "SubscriptionData",
    "CheckoutSessionCreateParams",
    "CheckoutSessionPreviewParams",
    "CheckoutSessionResponse",
    "CheckoutSessionStatus",
    "PreviewBreakup",
    "PreviewCartMeter",
    "PreviewCartAddon",
    "PreviewCartItem",
    "CheckoutSessionPreviewResponse",
]
