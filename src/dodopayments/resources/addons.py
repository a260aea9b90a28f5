"""Addons resource for the Dodo Payments SDK.

Addons are optional extras sold alongside a subscription product.
"""
from __future__ import annotations

from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.addons import (
    Addon,
    AddonCreateParams,
    AddonListParams,
    AddonUpdateImagesResponse,
    AddonUpdateParams,
)
from ..models.enums import Currency, TaxCategory
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncAddonsResource(AsyncBaseResource):
    async def create(
        self,
        *,
        currency: Currency,
        name: str,
        price: int,
        tax_category: TaxCategory,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Addon:
        """Create an addon. ``price`` is in the smallest currency unit."""
        params = build_params(
            AddonCreateParams,
            currency=currency,
            name=name,
            price=price,
            tax_category=tax_category,
            description=description,
        )
        return await self._post("addons", body=params.to_wire(), cast_to=Addon, options=options)

    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Addon:
        return await self._get(f"addons/{quote_path(id)}", cast_to=Addon, options=options)

    async def update(
        self,
        id: str,
        *,
        currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        image_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        price: NotGivenOr[Optional[int]] = NOT_GIVEN,
        tax_category: NotGivenOr[Optional[TaxCategory]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Addon:
        params = build_params(
            AddonUpdateParams,
            currency=currency,
            description=description,
            image_id=image_id,
            name=name,
            price=price,
            tax_category=tax_category,
        )
        return await self._patch(f"addons/{quote_path(id)}", body=params.to_wire(), cast_to=Addon, options=options)

    async def list(
        self,
        *,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[Addon]:
        params = build_params(AddonListParams, page_number=page_number, page_size=page_size)
        return await self._get_page(
            "addons", AsyncDefaultPageNumberPagination, Addon, query=params.to_wire(), options=options
        )

    async def update_images(self, id: str, *, options: Optional[RequestOptions] = None) -> AddonUpdateImagesResponse:
        """Get a presigned URL to upload the addon image to."""
        return await self._put(
            f"addons/{quote_path(id)}/images", cast_to=AddonUpdateImagesResponse, options=options
        )


class AddonsResource(SyncBaseResource):
    def create(
        self,
        *,
        currency: Currency,
        name: str,
        price: int,
        tax_category: TaxCategory,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Addon:
        """Create an addon. ``price`` is in the smallest currency unit."""
        params = build_params(
            AddonCreateParams,
            currency=currency,
            name=name,
            price=price,
            tax_category=tax_category,
            description=description,
        )
        return self._post("addons", body=params.to_wire(), cast_to=Addon, options=options)

    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Addon:
        return self._get(f"addons/{quote_path(id)}", cast_to=Addon, options=options)

    def update(
        self,
        id: str,
        *,
        currency: NotGivenOr[Optional[Currency]] = NOT_GIVEN,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        image_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        price: NotGivenOr[Optional[int]] = NOT_GIVEN,
        tax_category: NotGivenOr[Optional[TaxCategory]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Addon:
        params = build_params(
            AddonUpdateParams,
            currency=currency,
            description=description,
            image_id=image_id,
            name=name,
            price=price,
            tax_category=tax_category,
        )
        return self._patch(f"addons/{quote_path(id)}", body=params.to_wire(), cast_to=Addon, options=options)

    def list(
        self,
        *,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[Addon]:
        params = build_params(AddonListParams, page_number=page_number, page_size=page_size)
        return self._get_page(
            "addons", SyncDefaultPageNumberPagination, Addon, query=params.to_wire(), options=options
        )

    def update_images(self, id: str, *, options: Optional[RequestOptions] = None) -> AddonUpdateImagesResponse:
        """Get a presigned URL to upload the addon image to."""
        return self._put(f"addons/{quote_path(id)}/images", cast_to=AddonUpdateImagesResponse, options=options)


__all__ = ["AsyncAddonsResource", "AddonsResource"]
