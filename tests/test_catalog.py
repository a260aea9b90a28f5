"""
Tests for discounts, addons and brands.
"""
from dodopayments.models import Discount, DiscountType, VerificationStatus

BASE_URL = "https://test.dodopayments.com"

DISCOUNT = {
    "amount": 540,
    "business_id": "bus_123",
    "code": "SPRING",
    "created_at": "2025-01-20T00:00:00Z",
    "discount_id": "dsc_1",
    "restricted_to": [],
    "times_used": 0,
    "type": "percentage",
}

ADDON = {
    "id": "adn_1",
    "business_id": "bus_123",
    "created_at": "2025-01-20T00:00:00Z",
    "currency": "USD",
    "name": "Extra seat",
    "price": 500,
    "tax_category": "saas",
    "updated_at": "2025-01-20T00:00:00Z",
}

BRAND = {
    "brand_id": "bnd_123",
    "business_id": "bus_123",
    "enabled": True,
    "statement_descriptor": "ACME",
    "verification_enabled": True,
    "verification_status": "Success",
}


class TestDiscounts:
    """Tests for the discounts resource."""

    def test_create(self, client, httpx_mock):
        """Should send amount and type, leaving out the code."""
        httpx_mock.add_response(url=f"{BASE_URL}/discounts", method="POST", json=DISCOUNT)

        discount = client.discounts.create(amount=540, type="percentage", usage_limit=100)

        assert isinstance(discount, Discount)
        assert discount.type is DiscountType.PERCENTAGE
        assert httpx_mock.last_request().json == {"amount": 540, "type": "percentage", "usage_limit": 100}

    def test_retrieve_by_code(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}/discounts/code/SPRING", json=DISCOUNT)

        assert client.discounts.retrieve_by_code("SPRING").discount_id == "dsc_1"

    def test_update_clears_expiry(self, client, httpx_mock):
        """Should send an explicit null for a cleared field."""
        httpx_mock.add_response(url=f"{BASE_URL}/discounts/dsc_1", method="PATCH", json=DISCOUNT)

        client.discounts.update("dsc_1", expires_at=None)

        assert httpx_mock.last_request().json == {"expires_at": None}

    def test_delete(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}/discounts/dsc_1", method="DELETE", status_code=204)

        assert client.discounts.delete("dsc_1") is None


class TestAddons:
    """Tests for the addons resource."""

    def test_create(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}/addons", method="POST", json=ADDON)

        addon = client.addons.create(currency="USD", name="Extra seat", price=500, tax_category="saas")

        assert addon.id == "adn_1"
        assert httpx_mock.last_request().json == {
            "currency": "USD",
            "name": "Extra seat",
            "price": 500,
            "tax_category": "saas",
        }

    def test_update_images(self, client, httpx_mock):
        """Should put to the images endpoint without a body."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/addons/adn_1/images",
            method="PUT",
            json={"image_id": "img_1", "url": "https://uploads.example.com/img_1"},
        )

        response = client.addons.update_images("adn_1")

        assert response.image_id == "img_1"
        assert httpx_mock.last_request().json is None

    async def test_async_list(self, async_client, httpx_mock):
        httpx_mock.add_response(url=f"{BASE_URL}/addons?page_size=1", json={"items": [ADDON]})
        httpx_mock.add_response(url=f"{BASE_URL}/addons?page_size=1&page_number=1", json={"items": []})

        page = await async_client.addons.list(page_size=1)
        names = [addon.name async for addon in page]

        assert names == ["Extra seat"]


class TestBrands:
    """Tests for the brands resource."""

    def test_list_is_not_paged(self, client, httpx_mock):
        """Should return every brand in one response."""
        httpx_mock.add_response(url=f"{BASE_URL}/brands", json={"items": [BRAND]})

        brands = client.brands.list()

        assert [brand.brand_id for brand in brands.items] == ["bnd_123"]
        assert brands.items[0].verification_status is VerificationStatus.SUCCESS

    def test_update(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{BASE_URL}/brands/bnd_123", method="PATCH", json={**BRAND, "support_email": "help@acme.test"}
        )

        brand = client.brands.update("bnd_123", support_email="help@acme.test")

        assert brand.support_email == "help@acme.test"
        assert httpx_mock.last_request().json == {"support_email": "help@acme.test"}
