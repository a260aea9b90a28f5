"""Payment models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from .base import DodoModel
from .disputes import Dispute
from .enums import CountryCode, Currency, IntentStatus, PaymentMethodTypes
from .refunds import RefundListItem
from .shared import BillingAddress, CustomerLimitedDetails, CustomerRequest, OneTimeProductCartItem


class PaymentCreateParams(DodoModel):
    """Request to create a one-time payment."""

    billing: BillingAddress
    customer: CustomerRequest
    product_cart: List[OneTimeProductCartItem]
    allowed_payment_method_types: Optional[List[PaymentMethodTypes]] = None
    billing_currency: Optional[Currency] = None
    discount_code: Optional[str] = None
    force_3ds: Optional[bool] = None
    metadata: Dict[str, str] = Field(default=None)
    payment_link: Optional[bool] = None
    return_url: Optional[str] = None
    show_saved_payment_methods: bool = Field(default=None)
    tax_id: Optional[str] = None


class PaymentCreateResponse(DodoModel):
    """Response from creating a payment."""

    client_secret: str
    customer: CustomerLimitedDetails
    metadata: Dict[str, str]
    payment_id: str
    total_amount: int
    discount_id: Optional[str] = None
    expires_on: Optional[datetime] = None
    payment_link: Optional[str] = None
    product_cart: Optional[List[OneTimeProductCartItem]] = None


class PaymentProductCartItem(DodoModel):
    product_id: str
    quantity: int


class CustomFieldResponse(DodoModel):
    key: str
    value: str


class Payment(DodoModel):
    """A payment, with its refunds and disputes."""

    billing: BillingAddress
    brand_id: str
    business_id: str
    created_at: datetime
    currency: Currency
    customer: CustomerLimitedDetails
    digital_products_delivered: bool
    disputes: List[Dispute]
    metadata: Dict[str, str]
    payment_id: str
    refunds: List[RefundListItem]
    settlement_amount: int
    settlement_currency: Currency
    total_amount: int
    card_issuing_country: Optional[CountryCode] = None
    card_last_four: Optional[str] = None
    card_network: Optional[str] = None
    card_type: Optional[str] = None
    checkout_session_id: Optional[str] = None
    custom_field_responses: Optional[List[CustomFieldResponse]] = None
    discount_id: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    payment_link: Optional[str] = None
    payment_method: Optional[str] = None
    payment_method_type: Optional[str] = None
    product_cart: Optional[List[PaymentProductCartItem]] = None
    settlement_tax: Optional[int] = None
    status: Optional[IntentStatus] = None
    subscription_id: Optional[str] = None
    tax: Optional[int] = None
    updated_at: Optional[datetime] = None


class PaymentListItem(DodoModel):
    """Summary row returned by ``GET /payments``."""

    brand_id: str
    created_at: datetime
    currency: Currency
    customer: CustomerLimitedDetails
    digital_products_delivered: bool
    metadata: Dict[str, str]
    payment_id: str
    total_amount: int
    payment_method: Optional[str] = None
    payment_method_type: Optional[str] = None
    status: Optional[IntentStatus] = None
    subscription_id: Optional[str] = None


class PaymentListParams(DodoModel):
    brand_id: str = Field(default=None)
    created_at_gte: datetime = Field(default=None)
    created_at_lte: datetime = Field(default=None)
    customer_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    product_id: str = Field(default=None)
    status: IntentStatus = Field(default=None)
    subscription_id: str = Field(default=None)


class PaymentLineItem(DodoModel):
    amount: int
    items_id: str
    refundable_amount: int
    tax: int
    description: Optional[str] = None
    name: Optional[str] = None


class PaymentLineItems(DodoModel):
    currency: Currency
    items: List[PaymentLineItem]


__all__ = [
    "PaymentCreateParams",
    "PaymentCreateResponse",
    "PaymentProductCartItem",
    "CustomFieldResponse",
    "Payment",
    "PaymentListItem",
    "PaymentListParams",
    "PaymentLineItem",
    "PaymentLineItems",
]
