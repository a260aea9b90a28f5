"""Usage event models."""
from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import Field

from .base import DodoModel

EventMetadata = Dict[str, Union[str, float, bool]]


class UsageEvent(DodoModel):
    """A usage event as stored by the API."""

    business_id: str
    customer_id: str
    event_id: str
    event_name: str
    timestamp: datetime
    metadata: Optional[EventMetadata] = None


class EventInput(DodoModel):
    """One event to ingest. ``event_id`` makes ingestion idempotent."""

    customer_id: str
    event_id: str
    event_name: str
    metadata: Optional[EventMetadata] = None
    timestamp: Optional[datetime] = None


class UsageEventIngestParams(DodoModel):
    events: List[EventInput]


class UsageEventIngestResponse(DodoModel):
    ingested_count: int


class UsageEventListParams(DodoModel):
    customer_id: str = Field(default=None)
    end: datetime = Field(default=None)
    event_name: str = Field(default=None)
    meter_id: str = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)
    start: datetime = Field(default=None)


__all__ = [
    "EventMetadata",
    "UsageEvent",
    "EventInput",
    "UsageEventIngestParams",
    "UsageEventIngestResponse",
    "UsageEventListParams",
]
