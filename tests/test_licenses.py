"""
Tests for license activation, license keys and their instances.
"""
from datetime import datetime, timezone

from dodopayments.models import LicenseKey, LicenseKeyStatus

BASE_URL = "https://test.dodopayments.com"


class TestLicenses:
    """Tests for the public license endpoints."""

    def test_activate(self, client, httpx_mock):
        """Should create an instance for the key."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/licenses/activate",
            method="POST",
            json={
                "id": "lki_1",
                "business_id": "bus_123",
                "created_at": "2025-01-20T00:00:00Z",
                "customer": {"customer_id": "cus_123", "email": "ada@example.com", "name": "Ada"},
                "license_key_id": "lic_123",
                "name": "laptop",
                "product": {"product_id": "pdt_123"},
            },
        )

        instance = client.licenses.activate(license_key="ABCD-EFGH-IJKL", name="laptop")

        assert instance.id == "lki_1"
        assert instance.product.name is None
        assert httpx_mock.last_request().json == {"license_key": "ABCD-EFGH-IJKL", "name": "laptop"}

    def test_validate(self, client, httpx_mock):
        """Should report whether the key is valid."""
        httpx_mock.add_response(url=f"{BASE_URL}/licenses/validate", method="POST", json={"valid": False})

        result = client.licenses.validate(license_key="ABCD-EFGH-IJKL")

        assert result.valid is False
        assert httpx_mock.last_request().json == {"license_key": "ABCD-EFGH-IJKL"}

    def test_deactivate_returns_none(self, client, httpx_mock):
        """Should return nothing on success."""
        httpx_mock.add_response(url=f"{BASE_URL}/licenses/deactivate", method="POST", status_code=200)

        assert client.licenses.deactivate(license_key="ABCD-EFGH-IJKL", license_key_instance_id="lki_1") is None

    def test_license_key_is_masked_in_logs(self, client, httpx_mock, caplog):
        """Should not write the license key to the debug log."""
        httpx_mock.add_response(url=f"{BASE_URL}/licenses/validate", method="POST", json={"valid": True})

        with caplog.at_level("DEBUG", logger="dodopayments"):
            client.licenses.validate(license_key="SECRET-KEY-VALUE")

        bodies = [record.data.get("body", "") for record in caplog.records if hasattr(record, "data")]
        assert bodies
        assert all("SECRET-KEY-VALUE" not in body for body in bodies)


class TestLicenseKeys:
    """Tests for license key management."""

    def test_update_clears_limit(self, client, httpx_mock, mock_responses):
        """Should send an explicit null to remove the activation limit."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/license_keys/lic_123",
            method="PATCH",
            json={**mock_responses["license_key"], "activations_limit": None},
        )

        key = client.license_keys.update("lic_123", activations_limit=None)

        assert isinstance(key, LicenseKey)
        assert key.activations_limit is None
        assert httpx_mock.last_request().json == {"activations_limit": None}

    def test_update_expiry(self, client, httpx_mock, mock_responses):
        """Should encode datetimes as ISO 8601 strings."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/license_keys/lic_123", method="PATCH", json=mock_responses["license_key"]
        )

        client.license_keys.update("lic_123", expires_at=datetime(2026, 1, 1, tzinfo=timezone.utc))

        assert httpx_mock.last_request().json == {"expires_at": "2026-01-01T00:00:00Z"}

    def test_retrieve(self, client, httpx_mock, mock_responses):
        """Should decode a license key."""
        httpx_mock.add_response(url=f"{BASE_URL}/license_keys/lic_123", json=mock_responses["license_key"])

        key = client.license_keys.retrieve("lic_123")

        assert key.status is LicenseKeyStatus.ACTIVE
        assert key.instances_count == 0

    async def test_async_list_instances(self, async_client, httpx_mock):
        """Should list instances of a key with the async client."""
        httpx_mock.add_response(
            url=f"{BASE_URL}/license_key_instances?license_key_id=lic_123",
            json={
                "items": [
                    {
                        "id": "lki_1",
                        "business_id": "bus_123",
                        "created_at": "2025-01-20T00:00:00Z",
                        "license_key_id": "lic_123",
                        "name": "laptop",
                    }
                ]
            },
        )

        page = await async_client.license_key_instances.list(license_key_id="lic_123")

        assert [instance.name for instance in page.items] == ["laptop"]
