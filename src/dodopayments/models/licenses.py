"""License key, license key instance and activation models."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DodoModel
from .enums import LicenseKeyStatus
from .shared import CustomerLimitedDetails


class LicenseKey(DodoModel):
    """A license key issued for a purchase."""

    id: str
    business_id: str
    created_at: datetime
    customer_id: str
    instances_count: int
    key: str
    payment_id: str
    product_id: str
    status: LicenseKeyStatus
    activations_limit: Optional[int] = None
    expires_at: Optional[datetime] = None
    subscription_id: Optional[str] = None


class LicenseKeyUpdateParams(DodoModel):
    """Changes to a license key; send ``None`` to remove a limit or expiry."""

    activations_limit: Optional[int] = None
    disabled: Optional[bool] = None
    expires_at: Optional[datetime] = None


class LicenseKeyListParams(DodoModel):
    customer_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    product_id: str = Field(default=None)
    status: LicenseKeyStatus = Field(default=None)


class LicenseKeyInstance(DodoModel):
    """One activation of a license key."""

    id: str
    business_id: str
    created_at: datetime
    license_key_id: str
    name: str


class LicenseKeyInstanceUpdateParams(DodoModel):
    name: str


class LicenseKeyInstanceListParams(DodoModel):
    license_key_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


class LicenseActivateParams(DodoModel):
    license_key: str
    name: str


class LicensedProduct(DodoModel):
    product_id: str
    name: Optional[str] = None


class LicenseActivateResponse(DodoModel):
    """The instance created by an activation."""

    id: str
    business_id: str
    created_at: datetime
    customer: CustomerLimitedDetails
    license_key_id: str
    name: str
    product: LicensedProduct


class LicenseDeactivateParams(DodoModel):
    license_key: str
    license_key_instance_id: str


class LicenseValidateParams(DodoModel):
    license_key: str
    license_key_instance_id: Optional[str] = None


class LicenseValidateResponse(DodoModel):
    valid: bool


__all__ = [
    "LicenseKey",
    "LicenseKeyUpdateParams",
    "LicenseKeyListParams",
    "LicenseKeyInstance",
    "LicenseKeyInstanceUpdateParams",
    "LicenseKeyInstanceListParams",
    "LicenseActivateParams",
    "LicensedProduct",
    "LicenseActivateResponse",
    "LicenseDeactivateParams",
    "LicenseValidateParams",
    "LicenseValidateResponse",
]
