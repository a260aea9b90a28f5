"""
Discounts resource for the Dodo Payments SDK.

Discount codes are entered by customers at checkout. Percentage amounts are in
basis points: ``amount=540`` is a 5.4% discount.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.discounts import Discount, DiscountCreateParams, DiscountListParams, DiscountUpdateParams
from ..models.enums import DiscountType
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncDiscountsResource(AsyncBaseResource):
    """Async resource for discount codes.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            discount = await client.discounts.create(amount=1000, type="percentage", code="LAUNCH10")
        ```
    """

    async def create(
        self,
        *,
        amount: int,
        type: DiscountType,
        code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        expires_at: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        restricted_to: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        subscription_cycles: NotGivenOr[Optional[int]] = NOT_GIVEN,
        usage_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Discount:
        """Create a discount code.

        Args:
            amount: Discount amount; basis points for ``percentage`` discounts
            type: Discount type
            code: Code customers enter; generated by the server when omitted
            restricted_to: Product IDs the discount applies to
            subscription_cycles: Number of billing cycles a subscription discount lasts
            usage_limit: Maximum number of redemptions
            options: Per-call request options
        """
        params = build_params(
            DiscountCreateParams,
            amount=amount,
            type=type,
            code=code,
            expires_at=expires_at,
            name=name,
            restricted_to=restricted_to,
            subscription_cycles=subscription_cycles,
            usage_limit=usage_limit,
        )
        return await self._post("discounts", body=params.to_wire(), cast_to=Discount, options=options)

    async def retrieve(self, discount_id: str, *, options: Optional[RequestOptions] = None) -> Discount:
        """Get a discount by ID."""
        return await self._get(f"discounts/{quote_path(discount_id)}", cast_to=Discount, options=options)

    async def retrieve_by_code(self, code: str, *, options: Optional[RequestOptions] = None) -> Discount:
        """Get a discount by the code customers enter."""
        return await self._get(f"discounts/code/{quote_path(code)}", cast_to=Discount, options=options)

    async def update(
        self,
        discount_id: str,
        *,
        amount: NotGivenOr[Optional[int]] = NOT_GIVEN,
        code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        expires_at: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        restricted_to: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        subscription_cycles: NotGivenOr[Optional[int]] = NOT_GIVEN,
        type: NotGivenOr[Optional[DiscountType]] = NOT_GIVEN,
        usage_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Discount:
        """Update a discount. Only the arguments passed are changed."""
        params = build_params(
            DiscountUpdateParams,
            amount=amount,
            code=code,
            expires_at=expires_at,
            name=name,
            restricted_to=restricted_to,
            subscription_cycles=subscription_cycles,
            type=type,
            usage_limit=usage_limit,
        )
        return await self._patch(
            f"discounts/{quote_path(discount_id)}", body=params.to_wire(), cast_to=Discount, options=options
        )

    async def list(
        self,
        *,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[Discount]:
        params = build_params(DiscountListParams, page_number=page_number, page_size=page_size)
        return await self._get_page(
            "discounts", AsyncDefaultPageNumberPagination, Discount, query=params.to_wire(), options=options
        )

    async def delete(self, discount_id: str, *, options: Optional[RequestOptions] = None) -> None:
        await self._delete(f"discounts/{quote_path(discount_id)}", options=options)


class DiscountsResource(SyncBaseResource):
    """Sync resource for discount codes."""

    def create(
        self,
        *,
        amount: int,
        type: DiscountType,
        code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        expires_at: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        restricted_to: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        subscription_cycles: NotGivenOr[Optional[int]] = NOT_GIVEN,
        usage_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Discount:
        """Create a discount code. See ``AsyncDiscountsResource.create``."""
        params = build_params(
            DiscountCreateParams,
            amount=amount,
            type=type,
            code=code,
            expires_at=expires_at,
            name=name,
            restricted_to=restricted_to,
            subscription_cycles=subscription_cycles,
            usage_limit=usage_limit,
        )
        return self._post("discounts", body=params.to_wire(), cast_to=Discount, options=options)

    def retrieve(self, discount_id: str, *, options: Optional[RequestOptions] = None) -> Discount:
        """Get a discount by ID."""
        return self._get(f"discounts/{quote_path(discount_id)}", cast_to=Discount, options=options)

    def retrieve_by_code(self, code: str, *, options: Optional[RequestOptions] = None) -> Discount:
        """Get a discount by the code customers enter."""
        return self._get(f"discounts/code/{quote_path(code)}", cast_to=Discount, options=options)

    def update(
        self,
        discount_id: str,
        *,
        amount: NotGivenOr[Optional[int]] = NOT_GIVEN,
        code: NotGivenOr[Optional[str]] = NOT_GIVEN,
        expires_at: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        restricted_to: NotGivenOr[Optional[List[str]]] = NOT_GIVEN,
        subscription_cycles: NotGivenOr[Optional[int]] = NOT_GIVEN,
        type: NotGivenOr[Optional[DiscountType]] = NOT_GIVEN,
        usage_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Discount:
        """Update a discount. Only the arguments passed are changed."""
        params = build_params(
            DiscountUpdateParams,
            amount=amount,
            code=code,
            expires_at=expires_at,
            name=name,
            restricted_to=restricted_to,
            subscription_cycles=subscription_cycles,
            type=type,
            usage_limit=usage_limit,
        )
        return self._patch(
            f"discounts/{quote_path(discount_id)}", body=params.to_wire(), cast_to=Discount, options=options
        )

    def list(
        self,
        *,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[Discount]:
        params = build_params(DiscountListParams, page_number=page_number, page_size=page_size)
        return self._get_page(
            "discounts", SyncDefaultPageNumberPagination, Discount, query=params.to_wire(), options=options
        )

    def delete(self, discount_id: str, *, options: Optional[RequestOptions] = None) -> None:
        self._delete(f"discounts/{quote_path(discount_id)}", options=options)


__all__ = ["AsyncDiscountsResource", "DiscountsResource"]
