"""Discount code models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import DodoModel
from .enums import DiscountType


class Discount(DodoModel):
    """A discount code.

    For ``percentage`` discounts ``amount`` is in basis points: 540 means 5.4%.
    """

    amount: int
    business_id: str
    code: str
    created_at: datetime
    discount_id: str
    restricted_to: List[str]
    times_used: int
    type: DiscountType
    expires_at: Optional[datetime] = None
    name: Optional[str] = None
    subscription_cycles: Optional[int] = None
    usage_limit: Optional[int] = None


class DiscountCreateParams(DodoModel):
    """Request to create a discount; a random code is generated when ``code`` is omitted."""

    amount: int
    type: DiscountType
    code: Optional[str] = None
    expires_at: Optional[datetime] = None
    name: Optional[str] = None
    restricted_to: Optional[List[str]] = None
    subscription_cycles: Optional[int] = None
    usage_limit: Optional[int] = None


class DiscountUpdateParams(DodoModel):
    amount: Optional[int] = None
    code: Optional[str] = None
    expires_at: Optional[datetime] = None
    name: Optional[str] = None
    restricted_to: Optional[List[str]] = None
    subscription_cycles: Optional[int] = None
    type: Optional[DiscountType] = None
    usage_limit: Optional[int] = None


class DiscountListParams(DodoModel):
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


__all__ = ["Discount", "DiscountCreateParams", "DiscountUpdateParams", "DiscountListParams"]
