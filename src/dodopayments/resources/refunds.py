"""
Refunds resource for the Dodo Payments SDK.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.enums import RefundStatus
from ..models.refunds import Refund, RefundCreateParams, RefundItem, RefundListItem, RefundListParams
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncRefundsResource(AsyncBaseResource):
    """Async resource for refund operations.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            refund = await client.refunds.create(
                payment_id="pay_123",
                reason="Customer request",
            )
        ```
    """

    async def create(
        self,
        payment_id: str,
        *,
        items: NotGivenOr[Optional[List[RefundItem]]] = NOT_GIVEN,
        reason: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Refund:
        """Refund a payment.

        Args:
            payment_id: The payment to refund
            items: Line items to refund; the whole payment when omitted
            reason: Reason shown to the customer
            options: Per-call request options
        """
        params = build_params(RefundCreateParams, payment_id=payment_id, items=items, reason=reason)
        return await self._post("refunds", body=params.to_wire(), cast_to=Refund, options=options)

    async def retrieve(self, refund_id: str, *, options: Optional[RequestOptions] = None) -> Refund:
        """Get a refund by ID."""
        return await self._get(f"refunds/{quote_path(refund_id)}", cast_to=Refund, options=options)

    async def list(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        status: NotGivenOr[RefundStatus] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[RefundListItem]:
        """List refunds."""
        params = build_params(
            RefundListParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            status=status,
        )
        return await self._get_page(
            "refunds", AsyncDefaultPageNumberPagination, RefundListItem, query=params.to_wire(), options=options
        )


class RefundsResource(SyncBaseResource):
    """Sync resource for refund operations."""

    def create(
        self,
        payment_id: str,
        *,
        items: NotGivenOr[Optional[List[RefundItem]]] = NOT_GIVEN,
        reason: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Refund:
        """Refund a payment, in full or by line item."""
        params = build_params(RefundCreateParams, payment_id=payment_id, items=items, reason=reason)
        return self._post("refunds", body=params.to_wire(), cast_to=Refund, options=options)

    def retrieve(self, refund_id: str, *, options: Optional[RequestOptions] = None) -> Refund:
        """Get a refund by ID."""
        return self._get(f"refunds/{quote_path(refund_id)}", cast_to=Refund, options=options)

    def list(
        self,
        *,
        created_at_gte: NotGivenOr[datetime] = NOT_GIVEN,
        created_at_lte: NotGivenOr[datetime] = NOT_GIVEN,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        status: NotGivenOr[RefundStatus] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[RefundListItem]:
        """List refunds."""
        params = build_params(
            RefundListParams,
            created_at_gte=created_at_gte,
            created_at_lte=created_at_lte,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            status=status,
        )
        return self._get_page(
            "refunds", SyncDefaultPageNumberPagination, RefundListItem, query=params.to_wire(), options=options
        )


__all__ = ["AsyncRefundsResource", "RefundsResource"]
