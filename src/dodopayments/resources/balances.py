"""Balances resource for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.balances import BalanceLedgerEntry, BalanceLedgerParams
from ..models.enums import BalanceEventType, Currency
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params


class AsyncBalancesResource(AsyncBaseResource):
    async def retrieve_ledger(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        currency: NotGivenOr[Currency] = NOT_GIVEN,
        event_type: NotGivenOr[BalanceEventType] = NOT_GIVEN,
        limit: NotGivenOr[int] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        reference_object_id: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[BalanceLedgerEntry]:
        """List movements on the business balance.

        Args:
            event_type: Only entries of this kind (payment, refund, payout ...)
            reference_object_id: Only entries caused by this payment, refund or payout
        """
        params = build_params(
            BalanceLedgerParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            currency=currency,
            event_type=event_type,
            limit=limit,
            page_number=page_number,
            page_size=page_size,
            reference_object_id=reference_object_id,
        )
        return await self._get_page(
            "balances/ledger",
            AsyncDefaultPageNumberPagination,
            BalanceLedgerEntry,
            query=params.to_wire(),
            options=options,
        )


class BalancesResource(SyncBaseResource):
    def retrieve_ledger(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        currency: NotGivenOr[Currency] = NOT_GIVEN,
        event_type: NotGivenOr[BalanceEventType] = NOT_GIVEN,
        limit: NotGivenOr[int] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        reference_object_id: NotGivenOr[str] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[BalanceLedgerEntry]:
        """List movements on the business balance."""
        params = build_params(
            BalanceLedgerParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            currency=currency,
            event_type=event_type,
            limit=limit,
            page_number=page_number,
            page_size=page_size,
            reference_object_id=reference_object_id,
        )
        return self._get_page(
            "balances/ledger",
            SyncDefaultPageNumberPagination,
            BalanceLedgerEntry,
            query=params.to_wire(),
            options=options,
        )


__all__ = ["AsyncBalancesResource", "BalancesResource"]
