"""License keys resource for the Dodo Payments SDK."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.enums import LicenseKeyStatus
from ..models.licenses import LicenseKey, LicenseKeyListParams, LicenseKeyUpdateParams
from ..pagination import AsyncDefaultPageNumberPagination, SyncDefaultPageNumberPagination
from .base import AsyncBaseResource, SyncBaseResource, build_params, quote_path


class AsyncLicenseKeysResource(AsyncBaseResource):
    async def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> LicenseKey:
        """Get a license key by ID."""
        return await self._get(f"license_keys/{quote_path(id)}", cast_to=LicenseKey, options=options)

    async def update(
        self,
        id: str,
        *,
        activations_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        disabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        expires_at: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> LicenseKey:
        """Update a license key.

        Args:
            id: License key ID
            activations_limit: New limit; ``None`` removes the limit
            disabled: Disable or re-enable the key
            expires_at: New expiry; ``None`` makes the key perpetual
            options: Per-call request options
        """
        params = build_params(
            LicenseKeyUpdateParams,
            activations_limit=activations_limit,
            disabled=disabled,
            expires_at=expires_at,
        )
        return await self._patch(
            f"license_keys/{quote_path(id)}", body=params.to_wire(), cast_to=LicenseKey, options=options
        )

    async def list(
        self,
        *,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        product_id: NotGivenOr[str] = NOT_GIVEN,
        status: NotGivenOr[LicenseKeyStatus] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> AsyncDefaultPageNumberPagination[LicenseKey]:
        params = build_params(
            LicenseKeyListParams,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            product_id=product_id,
            status=status,
        )
        return await self._get_page(
            "license_keys", AsyncDefaultPageNumberPagination, LicenseKey, query=params.to_wire(), options=options
        )


class LicenseKeysResource(SyncBaseResource):
    def retrieve(self, id: str, *, options: Optional[RequestOptions] = None) -> LicenseKey:
        """Get a license key by ID."""
        return self._get(f"license_keys/{quote_path(id)}", cast_to=LicenseKey, options=options)

    def update(
        self,
        id: str,
        *,
        activations_limit: NotGivenOr[Optional[int]] = NOT_GIVEN,
        disabled: NotGivenOr[Optional[bool]] = NOT_GIVEN,
        expires_at: NotGivenOr[Optional[datetime]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> LicenseKey:
        """Update a license key. ``None`` clears a limit or expiry."""
        params = build_params(
            LicenseKeyUpdateParams,
            activations_limit=activations_limit,
            disabled=disabled,
            expires_at=expires_at,
        )
        return self._patch(f"license_keys/{quote_path(id)}", body=params.to_wire(), cast_to=LicenseKey, options=options)

    def list(
        self,
        *,
        customer_id: NotGivenOr[str] = NOT_GIVEN,
        page_number: NotGivenOr[int] = NOT_GIVEN,
        page_size: NotGivenOr[int] = NOT_GIVEN,
        product_id: NotGivenOr[str] = NOT_GIVEN,
        status: NotGivenOr[LicenseKeyStatus] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> SyncDefaultPageNumberPagination[LicenseKey]:
        params = build_params(
            LicenseKeyListParams,
            customer_id=customer_id,
            page_number=page_number,
            page_size=page_size,
            product_id=product_id,
            status=status,
        )
        return self._get_page(
            "license_keys", SyncDefaultPageNumberPagination, LicenseKey, query=params.to_wire(), options=options
        )


__all__ = ["AsyncLicenseKeysResource", "LicenseKeysResource"]
