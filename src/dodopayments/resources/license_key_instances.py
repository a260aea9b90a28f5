"""License key instances resource for the Dodo Payments SDK."""
from __future__ import annotations

from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.licenses import (
    LicenseKeyInstance,
    LicenseKeyInstanceListParams,
    LicenseKeyInstanceUpdateParams,
)
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncLicenseKeyInstancesResource(AsyncBaseResource):
    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> LicenseKeyInstance:
        return await self._get(f"license_key_instances/{quote_path(id)}", cast_to=LicenseKeyInstance, options=options)

    async def update(
        self, id: str, *, name: str, options: Optional[RequestOptions] = None
    ) -> LicenseKeyInstance:
        """Rename an instance."""
        params = build_params(LicenseKeyInstanceUpdateParams, name=name)
        return await self._patch(
            f"license_key_instances/{quote_path(id)}",
            body=params.to_wire(),
            cast_to=LicenseKeyInstance,
            options=options,
        )

    async def list(
        self,
        *,
        license_key_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[LicenseKeyInstance]:
        params = build_params(
            LicenseKeyInstanceListParams,
            license_key_id=license_key_id,
            page_number=page_number,
            page_size=page_size,
        )
        return await self._get_page(
            "license_key_instances",
            AsyncDefaultPageNumberPagination,
            LicenseKeyInstance,
            query=params.to_wire(),
            options=options,
        )


class LicenseKeyInstancesResource(SyncBaseResource):
    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> LicenseKeyInstance:
        return self._get(f"license_key_instances/{quote_path(id)}", cast_to=LicenseKeyInstance, options=options)

    def update(self, id: str, *, name: str, options: Optional[RequestOptions] = None) -> LicenseKeyInstance:
        """Rename an instance."""
        params = build_params(LicenseKeyInstanceUpdateParams, name=name)
        return self._patch(
            f"license_key_instances/{quote_path(id)}",
            body=params.to_wire(),
            cast_to=LicenseKeyInstance,
            options=options,
        )

    def list(
        self,
        *,
        license_key_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[LicenseKeyInstance]:
        params = build_params(
            LicenseKeyInstanceListParams,
            license_key_id=license_key_id,
            page_number=page_number,
            page_size=page_size,
        )
        return self._get_page(
            "license_key_instances",
            SyncDefaultPageNumberPagination,
            LicenseKeyInstance,
            query=params.to_wire(),
            options=options,
        )


__all__ = ["AsyncLicenseKeyInstancesResource", "LicenseKeyInstancesResource"]
