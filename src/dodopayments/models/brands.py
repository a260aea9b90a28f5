"""Brand models for the Dodo Payments SDK."""
from __future__ import annotations

from typing import List, Optional

from .base import DodoModel
from .enums import OpenEnum


class VerificationStatus(OpenEnum):
    SUCCESS = "Success"
    FAIL = "Fail"
    REVIEW = "Review"
    HOLD = "Hold"


class Brand(DodoModel):
    brand_id: str
    business_id: str
    enabled: bool
    statement_descriptor: str
    verification_enabled: bool
    verification_status: VerificationStatus
    description: Optional[str] = None
    image: Optional[str] = None
    name: Optional[str] = None
    reason_for_hold: Optional[str] = None
    support_email: Optional[str] = None
    url: Optional[str] = None


class BrandCreateParams(DodoModel):
    description: Optional[str] = None
    name: Optional[str] = None
    statement_descriptor: Optional[str] = None
    support_email: Optional[str] = None
    url: Optional[str] = None


class BrandUpdateParams(DodoModel):
    image_id: Optional[str] = None
    name: Optional[str] = None
    statement_descriptor: Optional[str] = None
    support_email: Optional[str] = None


class BrandListResponse(DodoModel):
    items: List[Brand]


class BrandUpdateImagesResponse(DodoModel):
    image_id: str
    url: str


__all__ = [
    "VerificationStatus",
    "Brand",
    "BrandCreateParams",
    "BrandUpdateParams",
    "BrandListResponse",
    "BrandUpdateImagesResponse",
]
