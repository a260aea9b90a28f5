"""Usage meter models.

A meter counts usage events with a given ``event_name``, optionally narrowed
by a filter. Filters nest: each clause is either a condition on an event
metadata key or another filter with its own conjunction.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, List, Optional, Union

from pydantic import Field

from .base import DodoModel
from .enums import FilterConjunction, FilterOperator, MeterAggregationType
from .unions import Variant


class MeterAggregation(DodoModel):
    type: MeterAggregationType
    key: Optional[str] = None


class DirectFilterCondition(DodoModel):
    """``<metadata key> <operator> <value>``."""

    key: str
    operator: FilterOperator
    value: Union[str, float, bool]


class MeterFilter(DodoModel):
    clauses: List[Annotated[Union[DirectFilterCondition, MeterFilter], Variant()]]
    conjunction: FilterConjunction


MeterFilter.model_rebuild()


class Meter(DodoModel):
    id: str
    aggregation: MeterAggregation
    business_id: str
    created_at: datetime
    event_name: str
    measurement_unit: str
    name: str
    updated_at: datetime
    description: Optional[str] = None
    filter: Optional[MeterFilter] = None


class MeterCreateParams(DodoModel):
    aggregation: MeterAggregation
    event_name: str
    measurement_unit: str
    name: str
    description: Optional[str] = None
    filter: Optional[MeterFilter] = None


class MeterListParams(DodoModel):
    archived: bool = Field(default=None)
    page_number: int = Field(default=None)
    page_size: int = Field(default=None)


__all__ = [
    "MeterAggregation",
    "DirectFilterCondition",
    "MeterFilter",
    "Meter",
    "MeterCreateParams",
    "MeterListParams",
]
