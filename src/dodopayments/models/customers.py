"""Customer, saved payment method and customer wallet models."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import Field

from .base import DodoModel
from .enums import CountryCode, Currency, PaymentMethodTypes


class Customer(DodoModel):
    business_id: str
    created_at: datetime
    customer_id: str
    email: str
    name: str
    phone_number: Optional[str] = None


class CustomerCreateParams(DodoModel):
    email: str
    name: str
    phone_number: Optional[str] = None


class CustomerUpdateParams(DodoModel):
    name: str = Field(default=None)
    phone_number: str = Field(default=None)


class CustomerListParams(DodoModel):
    email: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


class CustomerPortalSession(DodoModel):
    """A one-time link to the hosted customer portal."""

    link: str


class SavedCard(DodoModel):
    card_issuing_country: Optional[CountryCode] = None
    card_network: Optional[str] = None
    card_type: Optional[str] = None
    expiry_month: Optional[str] = None
    expiry_year: Optional[str] = None
    last4_digits: Optional[str] = None


class ConnectorPaymentMethod(DodoModel):
    connector_mandate_id: str
    original_payment_authorized_amount: int
    original_payment_authorized_currency: Currency
    payment_method_type: Optional[PaymentMethodTypes] = None


class SavedPaymentMethod(DodoModel):
    """A payment method the customer saved during an earlier purchase."""

    connector_payment_methods: Dict[str, ConnectorPaymentMethod]
    payment_method: str
    payment_method_id: str
    profile_map: Dict[str, str]
    card: Optional[SavedCard] = None
    last_used_at: Optional[datetime] = None
    recurring_enabled: Optional[bool] = None


class CustomerPaymentMethods(DodoModel):
    items: List[SavedPaymentMethod]


# ---------------------------------------------------------------------------
# Wallets
# ---------------------------------------------------------------------------


class CustomerWallet(DodoModel):
    """Credit balance a customer holds in one currency."""

    balance: int
    created_at: datetime
    currency: Currency
    customer_id: str
    updated_at: datetime


class WalletListResponse(DodoModel):
    items: List[CustomerWallet]
    total_balance_usd: int


class CustomerWalletTransaction(DodoModel):
    """One credit or debit on a customer wallet."""

    id: str
    after_balance: int
    amount: int
    before_balance: int
    business_id: str
    created_at: datetime
    currency: Currency
    customer_id: str
    event_type: str
    is_credit: bool
    reason: Optional[str] = None
    reference_object_id: Optional[str] = None


class LedgerEntryCreateParams(DodoModel):
    amount: int
    currency: Currency
    entry_type: Literal["credit", "debit"]
    idempotency_key: Optional[str] = None
    reason: Optional[str] = None


class LedgerEntryListParams(DodoModel):
    currency: Currency = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


__all__ = [
    "Customer",
    "CustomerCreateParams",
    "CustomerUpdateParams",
    "CustomerListParams",
    "CustomerPortalSession",
    "SavedCard",
    "ConnectorPaymentMethod",
    "SavedPaymentMethod",
    "CustomerPaymentMethods",
    "CustomerWallet",
    "WalletListResponse",
    "CustomerWalletTransaction",
    "LedgerEntryCreateParams",
    "LedgerEntryListParams",
]
