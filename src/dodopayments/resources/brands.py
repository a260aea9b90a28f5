"""Brands resource for the Dodo Payments SDK."""
from __future__ import annotations

from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.brands import (
    Brand,
    BrandCreateParams,
    BrandListResponse,
    BrandUpdateImagesResponse,
    BrandUpdateParams,
)
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncBrandsResource(AsyncBaseResource):
    """Async resource for brands.

    A brand is the name, descriptor and support contact customers see at
    checkout and on their statements.
    """

    async def create(
        self,
        *,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        statement_descriptor: NotGivenOr[Optional[str]] = NOT_GIVEN,
        support_email: NotGivenOr[Optional[str]] = NOT_GIVEN,
        url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Brand:
        params = build_params(
            BrandCreateParams,
            description=description,
            name=name,
            statement_descriptor=statement_descriptor,
            support_email=support_email,
            url=url,
        )
        return await self._post("brands", body=params.to_wire(), cast_to=Brand, options=options)

    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Brand:
        return await self._get(f"brands/{quote_path(id)}", cast_to=Brand, options=options)

    async def update(
        self,
        id: str,
        *,
        image_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        statement_descriptor: NotGivenOr[Optional[str]] = NOT_GIVEN,
        support_email: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Brand:
        params = build_params(
            BrandUpdateParams,
            image_id=image_id,
            name=name,
            statement_descriptor=statement_descriptor,
            support_email=support_email,
        )
        return await self._patch(f"brands/{quote_path(id)}", body=params.to_wire(), cast_to=Brand, options=options)

    async def list(self, *, options: Optional[RequestOptions] = None) -> BrandListResponse:
        """List every brand of the business. Not paginated."""
        return await self._get("brands", cast_to=BrandListResponse, options=options)

    async def update_images(self, id: str, *, options: Optional[RequestOptions] = None) -> BrandUpdateImagesResponse:
        """Get a presigned URL to upload the brand image to."""
        return await self._put(f"brands/{quote_path(id)}/images", cast_to=BrandUpdateImagesResponse, options=options)


class BrandsResource(SyncBaseResource):
    """Sync resource for brands."""

    def create(
        self,
        *,
        description: NotGivenOr[Optional[str]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        statement_descriptor: NotGivenOr[Optional[str]] = NOT_GIVEN,
        support_email: NotGivenOr[Optional[str]] = NOT_GIVEN,
        url: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Brand:
        params = build_params(
            BrandCreateParams,
            description=description,
            name=name,
            statement_descriptor=statement_descriptor,
            support_email=support_email,
            url=url,
        )
        return self._post("brands", body=params.to_wire(), cast_to=Brand, options=options)

    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> Brand:
        return self._get(f"brands/{quote_path(id)}", cast_to=Brand, options=options)

    def update(
        self,
        id: str,
        *,
        image_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        name: NotGivenOr[Optional[str]] = NOT_GIVEN,
        statement_descriptor: NotGivenOr[Optional[str]] = NOT_GIVEN,
        support_email: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> Brand:
        params = build_params(
            BrandUpdateParams,
            image_id=image_id,
            name=name,
            statement_descriptor=statement_descriptor,
            support_email=support_email,
        )
        return self._patch(f"brands/{quote_path(id)}", body=params.to_wire(), cast_to=Brand, options=options)

    def list(self, *, options: Optional[RequestOptions] = None) -> BrandListResponse:
        """List every brand of the business. Not paginated."""
        return self._get("brands", cast_to=BrandListResponse, options=options)

    def update_images(self, id: str, *, options: Optional[RequestOptions] = None) -> BrandUpdateImagesResponse:
        """Get a presigned URL to upload the brand image to."""
        return self._put(f"brands/{quote_path(id)}/images", cast_to=BrandUpdateImagesResponse, options=options)


__all__ = ["AsyncBrandsResource", "BrandsResource"]
