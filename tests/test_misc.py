"""
Tests for the supported countries endpoint.
"""
import pytest

from dodopayments import ResponseValidationError, ShapeMismatch
from dodopayments.models import CountryCode

BASE_URL = "https://test.dodopayments.com"


class TestSupportedCountries:
    """Tests for misc.list_supported_countries."""

    def test_list(self, client, httpx_mock):
        """Should return country codes, keeping unknown ones."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkout/supported_countries", json=["GB", "US", "XK"])

        countries = client.misc.list_supported_countries()

        assert countries[:2] == [CountryCode.GB, CountryCode.US]
        assert countries[2].value == "XK"

    def test_not_a_list(self, client, httpx_mock):
        """Should reject a body that is not a list."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkout/supported_countries", json={"countries": ["GB"]})

        with pytest.raises(ResponseValidationError) as exc_info:
            client.misc.list_supported_countries()

        assert isinstance(exc_info.value.error, ShapeMismatch)

    async def test_async_list(self, async_client, httpx_mock):
        """Should work with the async client."""
        httpx_mock.add_response(url=f"{BASE_URL}/checkout/supported_countries", json=["IN"])

        assert await async_client.misc.list_supported_countries() == [CountryCode.IN]
