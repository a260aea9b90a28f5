"""Payouts resource for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.payouts import Payout, PayoutListParams
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params


class AsyncPayoutsResource(AsyncBaseResource):
    async def list(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[Payout]:
        """List payouts to the business's bank account."""
        params = build_params(
            PayoutListParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            page_number=page_number,
            page_size=page_size,
        )
        return await self._get_page(
            "payouts", AsyncDefaultPageNumberPagination, Payout, query=params.to_wire(), options=options
        )


class PayoutsResource(SyncBaseResource):
    def list(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[Payout]:
        """List payouts to the business's bank account."""
        params = build_params(
            PayoutListParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            page_number=page_number,
            page_size=page_size,
        )
        return self._get_page(
            "payouts", SyncDefaultPageNumberPagination, Payout, query=params.to_wire(), options=options
        )


__all__ = ["AsyncPayoutsResource", "PayoutsResource"]
