"""Dispute models for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import DodoModel
from .enums import DisputeStage, DisputeStatus
from .shared import CustomerLimitedDetails


class Dispute(DodoModel):
    """A dispute raised against a payment.

    ``amount`` and ``currency`` are sent as strings by the API.
    """

    amount: str
    business_id: str
    created_at: datetime
    currency: str
    dispute_id: str
    dispute_stage: DisputeStage
    dispute_status: DisputeStatus
    payment_id: str
    remarks: Optional[str] = None


class GetDispute(Dispute):
    """Full dispute details, including the customer and the stated reason."""

    customer: CustomerLimitedDetails
    reason: Optional[str] = None


class DisputeListParams(DodoModel):
    created_at_gte: datetime = Field(default=None)
    created_at_lte: datetime = Field(default=None)
    customer_id: str = Field(default=None)
    dispute_stage: DisputeStage = Field(default=None)
    dispute_status: DisputeStatus = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


__all__ = ["Dispute", "GetDispute", "DisputeListParams"]
