"""
Usage events resource for the Dodo Payments SDK.

Usage events feed the meters behind usage-based prices:

    ```python
    client.usage_events.ingest(
        events=[
            {
                "event_id": "evt_2024_0001",
                "customer_id": "cus_123",
                "event_name": "api.request",
                "metadata": {"tokens": 512},
            }
        ]
    )
    ```
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.usage_events import (
    EventInput,
    UsageEvent,
    UsageEventIngestParams,
    UsageEventIngestResponse,
    UsageEventListParams,
)
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncUsageEventsResource(AsyncBaseResource):
    async def retrieve(self, event_id: str, *, options: Optional[RequestOptions] = None) -> UsageEvent:
        return await self._get(f"events/{quote_path(event_id)}", cast_to=UsageEvent, options=options)

    async def list(
        self,
        *,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        end: NotGivenOr[datetime] = NOT_GIVEN,
        event_name: NotGivenOr[str] = NOT_GIVEN,
        meter_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        start: NotGivenOr[datetime] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[UsageEvent]:
        """List ingested events.

        Args:
            meter_id: Only events matching this meter's event name and filter
            start: Earliest event timestamp (inclusive)
            end: Latest event timestamp (inclusive)
        """
        params = build_params(
            UsageEventListParams,
            customer_id=customer_id,
            end=end,
            event_name=event_name,
            meter_id=meter_id,
            page_number=page_number,
            page_size=page_size,
            start=start,
        )
        return await self._get_page(
            "events", AsyncDefaultPageNumberPagination, UsageEvent, query=params.to_wire(), options=options
        )

    async def ingest(
        self, *, events: List[EventInput], options: Optional[RequestOptions] = None
    ) -> UsageEventIngestResponse:
        """Record a batch of usage events. Events are deduplicated by ``event_id``."""
        params = build_params(UsageEventIngestParams, events=events)
        return await self._post(
            "events/ingest", body=params.to_wire(), cast_to=UsageEventIngestResponse, options=options
        )


class UsageEventsResource(SyncBaseResource):
    def retrieve(self, event_id: str, *, options: Optional[RequestOptions] = None) -> UsageEvent:
        return self._get(f"events/{quote_path(event_id)}", cast_to=UsageEvent, options=options)

    def list(
        self,
        *,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        end: NotGivenOr[datetime] = NOT_GIVEN,
        event_name: NotGivenOr[str] = NOT_GIVEN,
        meter_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        start: NotGivenOr[datetime] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[UsageEvent]:
        """List ingested events."""
        params = build_params(
            UsageEventListParams,
            customer_id=customer_id,
            end=end,
            event_name=event_name,
            meter_id=meter_id,
            page_number=page_number,
            page_size=page_size,
            start=start,
        )
        return self._get_page(
            "events", SyncDefaultPageNumberPagination, UsageEvent, query=params.to_wire(), options=options
        )

    def ingest(self, *, events: List[EventInput], options: Optional[RequestOptions] = None) -> UsageEventIngestResponse:
        """Record a batch of usage events. Events are deduplicated by ``event_id``."""
        params = build_params(UsageEventIngestParams, events=events)
        return self._post("events/ingest", body=params.to_wire(), cast_to=UsageEventIngestResponse, options=options)


__all__ = ["AsyncUsageEventsResource", "UsageEventsResource"]
