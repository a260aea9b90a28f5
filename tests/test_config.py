"""
Tests for client settings.
"""
import pytest
from pydantic import ValidationError

from dodopayments import ClientSettings, ENVIRONMENTS


class TestClientSettings:
    """Tests for ClientSettings."""

    def test_defaults(self):
        """Should default to live mode and a 60 second timeout."""
        settings = ClientSettings()

        assert settings.api_key is None
        assert settings.environment == "live_mode"
        assert settings.timeout == 60.0
        assert settings.resolved_base_url() == ENVIRONMENTS["live_mode"]

    def test_from_environment(self, monkeypatch):
        """Should read DODO_PAYMENTS_ prefixed variables."""
        monkeypatch.setenv("DODO_PAYMENTS_API_KEY", "env-key")
        monkeypatch.setenv("DODO_PAYMENTS_ENVIRONMENT", "test_mode")
        monkeypatch.setenv("DODO_PAYMENTS_TIMEOUT", "12.5")
        monkeypatch.setenv("DODO_PAYMENTS_LOG", " DEBUG ")

        settings = ClientSettings()

        assert settings.api_key == "env-key"
        assert settings.resolved_base_url() == "https://test.dodopayments.com"
        assert settings.timeout == 12.5
        assert settings.log == "debug"

    def test_base_url_overrides_environment(self):
        """Should prefer an explicit base URL, without its trailing slash."""
        settings = ClientSettings(base_url="http://localhost:8080/", environment="test_mode")

        assert settings.resolved_base_url() == "http://localhost:8080"

    def test_unknown_environment(self):
        """Should reject an unknown environment."""
        with pytest.raises(ValidationError):
            ClientSettings(environment="staging")

    def test_timeout_must_be_positive(self):
        """Should reject a zero timeout."""
        with pytest.raises(ValidationError):
            ClientSettings(timeout=0)
