"""Business balance ledger models."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DodoModel
from .enums import BalanceEventType, Currency


class BalanceLedgerEntry(DodoModel):
    """One movement on the business balance. ``amount`` is in the smallest currency unit."""

    id: str
    amount: int
    business_id: str
    created_at: datetime
    currency: Currency
    event_type: BalanceEventType
    is_credit: bool
    usd_equivalent_amount: int
    after_balance: Optional[int] = None
    before_balance: Optional[int] = None
    description: Optional[str] = None
    reference_object_id: Optional[str] = None


class BalanceLedgerParams(DodoModel):
    created_at_gte: datetime = Field(default=None)
    created_at_lte: datetime = Field(default=None)
    currency: Currency = Field(default=None)
    event_type: BalanceEventType = Field(default=None)
    limit: int = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    reference_object_id: str = Field(default=None)


__all__ = ["BalanceLedgerEntry", "BalanceLedgerParams"]
