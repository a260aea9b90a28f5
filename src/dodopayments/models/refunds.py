"""Refund models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import DodoModel
from .enums import Currency, RefundStatus
from .shared import CustomerLimitedDetails


class RefundListItem(DodoModel):
    business_id: str
    created_at: datetime
    is_partial: bool
    payment_id: str
    refund_id: str
    status: RefundStatus
    amount: Optional[int] = None
    currency: Optional[Currency] = None
    reason: Optional[str] = None


class Refund(RefundListItem):
    """A refund, with the customer it was issued to."""

    customer: CustomerLimitedDetails


class RefundItem(DodoModel):
    """A line item to refund; omit ``amount`` to refund it in full."""

    item_id: str
    amount: Optional[int] = None
    tax_inclusive: bool = Field(default=None)


class RefundCreateParams(DodoModel):
    payment_id: str
    items: Optional[List[RefundItem]] = None
    reason: Optional[str] = None


class RefundListParams(DodoModel):
    created_at_gte: datetime = Field(default=None)
    created_at_lte: datetime = Field(default=None)
    customer_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    status: RefundStatus = Field(default=None)


__all__ = ["RefundListItem", "Refund", "RefundItem", "RefundCreateParams", "RefundListParams"]
