"""
Licenses resource for the Dodo Payments SDK.

These endpoints are meant to be called from the software being licensed:
activating a key creates an instance, validating checks a key (and
optionally an instance) is still usable.
"""
from __future__ import annotations

from typing import Optional

from .._types import NOT_GIVEN, NotGivenOr, RequestOptions
from ..models.licenses import (
    LicenseActivateParams,
    LicenseActivateResponse,
    LicenseDeactivateParams,
    LicenseValidateParams,
    LicenseValidateResponse,
)
from .base import AsyncBaseResource, SyncBaseResource, build_params


class AsyncLicensesResource(AsyncBaseResource):
    """Async resource for license activation.

    Example:
        ```python
        async with AsyncDodoPayments(api_key="...") as client:
            instance = await client.licenses.activate(license_key="LK-...", name="laptop")
            result = await client.licenses.validate(
                license_key="LK-...", license_key_instance_id=instance.id
            )
            assert result.valid
        ```
    """

    async def activate(
        self, *, license_key: str, name: str, options: Optional[RequestOptions] = None
    ) -> LicenseActivateResponse:
        """Activate a license key, creating a named instance."""
        params = build_params(LicenseActivateParams, license_key=license_key, name=name)
        return await self._post(
            "licenses/activate", body=params.to_wire(), cast_to=LicenseActivateResponse, options=options
        )

    async def deactivate(
        self,
        *,
        license_key: str,
        license_key_instance_id: str,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Release an instance so its activation slot can be reused."""
        params = build_params(
            LicenseDeactivateParams, license_key=license_key, license_key_instance_id=license_key_instance_id
        )
        await self._post("licenses/deactivate", body=params.to_wire(), options=options)

    async def validate(
        self,
        *,
        license_key: str,
        license_key_instance_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> LicenseValidateResponse:
        """Check whether a license key (and instance) is valid."""
        params = build_params(
            LicenseValidateParams, license_key=license_key, license_key_instance_id=license_key_instance_id
        )
        return await self._post(
            "licenses/validate", body=params.to_wire(), cast_to=LicenseValidateResponse, options=options
        )


class LicensesResource(SyncBaseResource):
    """Sync resource for license activation."""

    def activate(
        self, *, license_key: str, name: str, options: Optional[RequestOptions] = None
    ) -> LicenseActivateResponse:
        """Activate a license key, creating a named instance."""
        params = build_params(LicenseActivateParams, license_key=license_key, name=name)
        return self._post("licenses/activate", body=params.to_wire(), cast_to=LicenseActivateResponse, options=options)

    def deactivate(
        self,
        *,
        license_key: str,
        license_key_instance_id: str,
        options: Optional[RequestOptions] = None,
    ) -> None:
        """Release an instance so its activation slot can be reused."""
        params = build_params(
            LicenseDeactivateParams, license_key=license_key, license_key_instance_id=license_key_instance_id
        )
        self._post("licenses/deactivate", body=params.to_wire(), options=options)

    def validate(
        self,
        *,
        license_key: str,
        license_key_instance_id: NotGivenOr[Optional[str]] = NOT_GIVEN,
        options: Optional[RequestOptions] = None,
    ) -> LicenseValidateResponse:
        """Check whether a license key (and instance) is valid."""
        params = build_params(
            LicenseValidateParams, license_key=license_key, license_key_instance_id=license_key_instance_id
        )
        return self._post("licenses/validate", body=params.to_wire(), cast_to=LicenseValidateResponse, options=options)


__all__ = ["AsyncLicensesResource", "LicensesResource"]
