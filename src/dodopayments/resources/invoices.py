"""Invoice PDFs for payments and refunds."""
from __future__ import annotations

from typing import Optional

from .._types import RequestOptions
from .base import AsyncBaseResource, SyncBaseResource, quote_path


class AsyncInvoicesResource(AsyncBaseResource):
    async def retrieve_payment(self, payment_id: str, *, options: Optional[RequestOptions] = None) -> bytes:
        """Download the invoice of a payment as PDF bytes."""
        return await self._get(f"invoices/payments/{quote_path(payment_id)}", options=options, binary=True)

    async def retrieve_refund(self, refund_id: str, *, options: Optional[RequestOptions] = None) -> bytes:
        """Download the credit note of a refund as PDF bytes."""
        return await self._get(f"invoices/refunds/{quote_path(refund_id)}", options=options, binary=True)


class InvoicesResource(SyncBaseResource):
    def retrieve_payment(self, payment_id: str, *, options: Optional[RequestOptions] = None) -> bytes:
        """Download the invoice of a payment as PDF bytes."""
        return self._get(f"invoices/payments/{quote_path(payment_id)}", options=options, binary=True)

    def retrieve_refund(self, refund_id: str, *, options: Optional[RequestOptions] = None) -> bytes:
        """Download the credit note of a refund as PDF bytes."""
        return self._get(f"invoices/refunds/{quote_path(refund_id)}", options=options, binary=True)


__all__ = ["AsyncInvoicesResource", "InvoicesResource"]
