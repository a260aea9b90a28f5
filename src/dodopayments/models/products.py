"""Product, price and product sub-resource models."""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import DodoModel
from .enums import Currency, TaxCategory, TimeInterval
from .unions import Variant


# ---------------------------------------------------------------------------
# Prices
# ---------------------------------------------------------------------------


class OneTimePrice(DodoModel):
    """A single-payment price. ``price`` and ``discount`` are in the smallest currency unit."""

    currency: Currency
    discount: int
    price: int
    purchasing_power_parity: bool
    type: Literal["one_time_price"]
    pay_what_you_want: bool = Field(default=None)
    suggested_price: Optional[int] = None
    tax_inclusive: Optional[bool] = None


class RecurringPrice(DodoModel):
    """A subscription price billed every ``payment_frequency_count`` intervals."""

    currency: Currency
    discount: int
    payment_frequency_count: int
    payment_frequency_interval: TimeInterval
    price: int
    purchasing_power_parity: bool
    subscription_period_count: int
    subscription_period_interval: TimeInterval
    type: Literal["recurring_price"]
    tax_inclusive: Optional[bool] = None
    trial_period_days: int = Field(default=None)


class AddMeterToPrice(DodoModel):
    meter_id: str
    price_per_unit: str
    description: Optional[str] = None
    free_threshold: Optional[int] = None
    measurement_unit: Optional[str] = None
    name: Optional[str] = None


class UsageBasedPrice(DodoModel):
    """A fixed recurring fee plus metered usage."""

    currency: Currency
    discount: int
    fixed_price: int
    payment_frequency_count: int
    payment_frequency_interval: TimeInterval
    purchasing_power_parity: bool
    subscription_period_count: int
    subscription_period_interval: TimeInterval
    type: Literal["usage_based_price"]
    meters: Optional[List[AddMeterToPrice]] = None
    tax_inclusive: Optional[bool] = None


Price = Annotated[Union[OneTimePrice, RecurringPrice, UsageBasedPrice], Variant(discriminator="type")]


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class LicenseKeyDuration(DodoModel):
    count: int
    interval: TimeInterval


class DigitalProductFile(DodoModel):
    file_id: str
    file_name: str
    url: str


class DigitalProductDelivery(DodoModel):
    external_url: Optional[str] = None
    files: Optional[List[DigitalProductFile]] = None
    instructions: Optional[str] = None


class Product(DodoModel):
    brand_id: str
    business_id: str
    created_at: datetime
    is_recurring: bool
    license_key_enabled: bool
    metadata: Dict[str, str]
    price: Price
    product_id: str
    tax_category: TaxCategory
    updated_at: datetime
    addons: Optional[List[str]] = None
    description: Optional[str] = None
    digital_product_delivery: Optional[DigitalProductDelivery] = None
    image: Optional[str] = None
    license_key_activation_message: Optional[str] = None
    license_key_activations_limit: Optional[int] = None
    license_key_duration: Optional[LicenseKeyDuration] = None
    name: Optional[str] = None


class ProductListItem(DodoModel):
    """Summary row returned by ``GET /products``."""

    business_id: str
    created_at: datetime
    is_recurring: bool
    metadata: Dict[str, str]
    product_id: str
    tax_category: TaxCategory
    updated_at: datetime
    currency: Optional[Currency] = None
    description: Optional[str] = None
    image: Optional[str] = None
    name: Optional[str] = None
    price: Optional[int] = None
    price_detail: Optional[Price] = None
    tax_inclusive: Optional[bool] = None


class DigitalProductDeliveryParams(DodoModel):
    external_url: Optional[str] = None
    instructions: Optional[str] = None


class DigitalProductDeliveryUpdate(DodoModel):
    external_url: Optional[str] = None
    files: Optional[List[str]] = None
    instructions: Optional[str] = None


class ProductCreateParams(DodoModel):
    name: str
    price: Price
    tax_category: TaxCategory
    addons: Optional[List[str]] = None
    brand_id: Optional[str] = None
    description: Optional[str] = None
    digital_product_delivery: Optional[DigitalProductDeliveryParams] = None
    license_key_activation_message: Optional[str] = None
    license_key_activations_limit: Optional[int] = None
    license_key_duration: Optional[LicenseKeyDuration] = None
    license_key_enabled: Optional[bool] = None
    metadata: Dict[str, str] = Field(default=None)


class ProductUpdateParams(DodoModel):
    addons: Optional[List[str]] = None
    brand_id: Optional[str] = None
    description: Optional[str] = None
    digital_product_delivery: Optional[DigitalProductDeliveryUpdate] = None
    image_id: Optional[str] = None
    license_key_activation_message: Optional[str] = None
    license_key_activations_limit: Optional[int] = None
    license_key_duration: Optional[LicenseKeyDuration] = None
    license_key_enabled: Optional[bool] = None
    metadata: Optional[Dict[str, str]] = None
    name: Optional[str] = None
    price: Optional[Price] = None
    tax_category: Optional[TaxCategory] = None


class ProductListParams(DodoModel):
    archived: bool = Field(default=None)
    brand_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    recurring: bool = Field(default=None)


class ProductUpdateFilesParams(DodoModel):
    file_name: str


class ProductUpdateFilesResponse(DodoModel):
    """Where to upload the file's content."""

    file_id: str
    url: str


class ImageUpdateResponse(DodoModel):
    """A presigned upload URL for the product image."""

    url: str
    image_id: Optional[str] = None


# ---------------------------------------------------------------------------
# Short links
# ---------------------------------------------------------------------------


class ShortLinkCreateParams(DodoModel):
    slug: str
    static_checkout_params: Optional[Dict[str, str]] = None


class ShortLinkCreateResponse(DodoModel):
    full_url: str
    short_url: str


class ShortLinkListItem(DodoModel):
    created_at: datetime
    full_url: str
    product_id: str
    short_url: str


class ShortLinkListParams(DodoModel):
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    product_id: str = Field(default=None)


__all__ = [
    "OneTimePrice",
    "RecurringPrice",
    "AddMeterToPrice",
    "UsageBasedPrice",
    "Price",
    "LicenseKeyDuration",
    "DigitalProductFile",
    "DigitalProductDelivery",
    "Product",
    "ProductListItem",
    "DigitalProductDeliveryParams",
    "DigitalProductDeliveryUpdate",
    "ProductCreateParams",
    "ProductUpdateParams",
    "ProductListParams",
    "ProductUpdateFilesParams",
    "ProductUpdateFilesResponse",
    "ImageUpdateResponse",
    "ShortLinkCreateParams",
    "ShortLinkCreateResponse",
    "ShortLinkListItem",
    "ShortLinkListParams",
]
