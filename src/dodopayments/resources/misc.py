"""Miscellaneous endpoints that do not belong to a single resource."""
from __future__ import annotations

from typing import Any, List, Optional

from .._types import RequestOptions
from ..models.enums import CountryCode
from ..models.errors import ShapeMismatch
from .base import AsyncBaseResource, SyncBaseResource


def _country_list(data: Any) -> List[CountryCode]:
    if not isinstance(data, list):
        raise ShapeMismatch("SupportedCountries", "", f"expected a list, got {type(data).__name__}")
    countries = []
    for index, code in enumerate(data):
        if not isinstance(code, str):
            raise ShapeMismatch("SupportedCountries", f"[{index}]", "expected a country code string")
        countries.append(CountryCode(code))
    return countries


class AsyncMiscResource(AsyncBaseResource):
    async def list_supported_countries(self, *, options: Optional[RequestOptions] = None) -> List[CountryCode]:
        """Countries customers can be billed in."""
        return await self._get("checkout/supported_countries", cast_to=_country_list, options=options)


class MiscResource(SyncBaseResource):
    def list_supported_countries(self, *, options: Optional[RequestOptions] = None) -> List[CountryCode]:
        """Countries customers can be billed in."""
        return self._get("checkout/supported_countries", cast_to=_country_list, options=options)


__all__ = ["AsyncMiscResource", "MiscResource"]
