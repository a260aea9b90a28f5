"""Disputes resource for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.disputes import Dispute, DisputeListParams, GetDispute
from ..models.enums import DisputeStage, DisputeStatus
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncDisputesResource(AsyncBaseResource):
    async def retrieve(self, dispute_id: str, *, options: Optional[RequestOptions] = None) -> GetDispute:
        """Get a dispute with its customer and reason."""
        return await self._get(f"disputes/{quote_path(dispute_id)}", cast_to=GetDispute, options=options)

    async def list(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        dispute_stage: NotGivenOr[DisputeStage] = NOT_GIVEN,
        dispute_status: NotGivenOr[DisputeStatus] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[Dispute]:
        params = build_params(
            DisputeListParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            dispute_stage=dispute_stage,
            dispute_status=dispute_status,
            page_number=page_number,
            page_size=page_size,
        )
        return await self._get_page(
            "disputes", AsyncDefaultPageNumberPagination, Dispute, query=params.to_wire(), options=options
        )


class DisputesResource(SyncBaseResource):
    def retrieve(self, dispute_id: str, *, options: Optional[RequestOptions] = None) -> GetDispute:
        """Get a dispute with its customer and reason."""
        return self._get(f"disputes/{quote_path(dispute_id)}", cast_to=GetDispute, options=options)

    def list(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        dispute_stage: NotGivenOr[DisputeStage] = NOT_GIVEN,
        dispute_status: NotGivenOr[DisputeStatus] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[Dispute]:
        params = build_params(
            DisputeListParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            dispute_stage=dispute_stage,
            dispute_status=dispute_status,
            page_number=page_number,
            page_size=page_size,
        )
        return self._get_page(
            "disputes", SyncDefaultPageNumberPagination, Dispute, query=params.to_wire(), options=options
        )


__all__ = ["AsyncDisputesResource", "DisputesResource"]
