"""Meters resource for the Dodo Payments SDK.

A meter aggregates usage events with a given name into a billable quantity.
"""
from __future__ import annotations

from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.meters import Meter, MeterAggregation, MeterCreateParams, MeterFilter, MeterListParams
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncMetersResource(AsyncBaseResource):
    async def create(
        self,
        *,
        aggregation: MeterAggregation,
        event_name: str,
        measurement_unit: str,
        name: str,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        filter: NotGivenOr[Optional[MeterFilter]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Meter:
        """Create a meter.

        Args:
            aggregation: How matching events are combined (``count``, ``sum`` ...)
            event_name: Name of the events this meter counts
            measurement_unit: Unit shown on invoices
            filter: Conditions on event metadata; clauses may nest
        """
        params = build_params(
            MeterCreateParams,
            aggregation=aggregation,
            event_name=event_name,
            measurement_unit=measurement_unit,
            name=name,
            description=description,
            filter=filter,
        )
        return await self._post("meters", body=params.to_wire(), cast_to=Meter, options=options)

    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Meter:
        return await self._get(f"meters/{quote_path(id)}", cast_to=Meter, options=options)

    async def list(
        self,
        *,
        archived: NotGivenOr[bool] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[Meter]:
        params = build_params(MeterListParams, archived=archived, page_number=page_number, page_size=page_size)
        return await self._get_page(
            "meters", AsyncDefaultPageNumberPagination, Meter, query=params.to_wire(), options=options
        )

    async def archive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        await self._delete(f"meters/{quote_path(id)}", options=options)

    async def unarchive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        await self._post(f"meters/{quote_path(id)}/unarchive", options=options)


class MetersResource(SyncBaseResource):
    def create(
        self,
        *,
        aggregation: MeterAggregation,
        event_name: str,
        measurement_unit: str,
        name: str,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        filter: NotGivenOr[Optional[MeterFilter]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Meter:
        """Create a meter. See ``AsyncMetersResource.create``."""
        params = build_params(
            MeterCreateParams,
            aggregation=aggregation,
            event_name=event_name,
            measurement_unit=measurement_unit,
            name=name,
            description=description,
            filter=filter,
        )
        return self._post("meters", body=params.to_wire(), cast_to=Meter, options=options)

    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Meter:
        return self._get(f"meters/{quote_path(id)}", cast_to=Meter, options=options)

    def list(
        self,
        *,
        archived: NotGivenOr[bool] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[Meter]:
        params = build_params(MeterListParams, archived=archived, page_number=page_number, page_size=page_size)
        return self._get_page(
            "meters", SyncDefaultPageNumberPagination, Meter, query=params.to_wire(), options=options
        )

    def archive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        self._delete(f"meters/{quote_path(id)}", options=options)

    def unarchive(self, id: str, *, options: Optional[RequestOptions] = None) -> None:
        self._post(f"meters/{quote_path(id)}/unarchive", options=options)


__all__ = ["AsyncMetersResource", "MetersResource"]
