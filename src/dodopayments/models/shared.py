"""Shapes shared by several resource groups."""
from __future__ import annotations

from typing import Annotated, Dict, Optional, Union

from .base import DodoModel
from .enums import CountryCode, Currency
from .unions import Variant


class BillingAddress(DodoModel):
    """Full billing address, as required when creating payments and subscriptions."""

    city: str
    country: CountryCode
    state: str
    street: str
    zipcode: str


class AttachExistingCustomer(DodoModel):
    """Reference to a customer that already exists."""

    customer_id: str


class NewCustomer(DodoModel):
    """Details of a customer to create (or match by email) during checkout."""

    email: str
    name: Optional[str] = None
    phone_number: Optional[str] = None


CustomerRequest = Annotated[Union[AttachExistingCustomer, NewCustomer], Variant()]


class CustomerLimitedDetails(DodoModel):
    customer_id: str
    email: str
    name: str
    metadata: Optional[Dict[str, str]] = None
    phone_number: Optional[str] = None


class OneTimeProductCartItem(DodoModel):
    """A product and quantity; ``amount`` is only used for pay-what-you-want products."""

    product_id: str
    quantity: int
    amount: Optional[int] = None


class AttachAddon(DodoModel):
    addon_id: str
    quantity: int


class AddonCartResponseItem(DodoModel):
    addon_id: str
    quantity: int


class OnDemandSubscription(DodoModel):
    """On-demand (usage-triggered) charging settings for a new subscription."""

    mandate_only: bool
    adaptive_currency_fees_inclusive: Optional[bool] = None
    product_currency: Optional[Currency] = None
    product_description: Optional[str] = None
    product_price: Optional[int] = None


__all__ = [
    "BillingAddress",
    "AttachExistingCustomer",
    "NewCustomer",
    "CustomerRequest",
    "CustomerLimitedDetails",
    "OneTimeProductCartItem",
    "AttachAddon",
    "AddonCartResponseItem",
    "OnDemandSubscription",
]
