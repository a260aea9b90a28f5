"""Payout models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DodoModel
from .enums import Currency, PayoutStatus


class Payout(DodoModel):
    """A transfer of settled funds to the business. Amounts are in the smallest currency unit."""

    amount: int
    business_id: str
    chargebacks: int
    created_at: datetime
    currency: Currency
    fee: int
    payment_method: str
    payout_id: str
    refunds: int
    status: PayoutStatus
    tax: int
    updated_at: datetime
    name: Optional[str] = None
    payout_document_url: Optional[str] = None
    remarks: Optional[str] = None


class PayoutListParams(DodoModel):
    created_at_gte: datetime = Field(default=None)
    created_at_lte: datetime = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


__all__ = ["Payout", "PayoutListParams"]
