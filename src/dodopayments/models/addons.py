"""Addon models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DodoModel
from .enums import Currency, TaxCategory


class Addon(DodoModel):
    """An extra that can be attached to a subscription product."""

    id: str
    business_id: str
    created_at: datetime
    currency: Currency
    name: str
    price: int
    tax_category: TaxCategory
    updated_at: datetime
    description: Optional[str] = None
    image: Optional[str] = None


class AddonCreateParams(DodoModel):
    currency: Currency
    name: str
    price: int
    tax_category: TaxCategory
    description: Optional[str] = None


class AddonUpdateParams(DodoModel):
    currency: Optional[Currency] = None
    description: Optional[str] = None
    image_id: Optional[str] = None
    name: Optional[str] = None
    price: Optional[int] = None
    tax_category: Optional[TaxCategory] = None


class AddonListParams(DodoModel):
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


class AddonUpdateImagesResponse(DodoModel):
    image_id: str
    url: str


__all__ = ["Addon", "AddonCreateParams", "AddonUpdateParams", "AddonListParams", "AddonUpdateImagesResponse"]
