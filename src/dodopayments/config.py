"""Client configuration loaded from the environment."""
from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["live_mode", "test_mode"]

ENVIRONMENTS: Dict[str, str] = {
    "live_mode": "https://live.dodopayments.com",
    "test_mode": "https://test.dodopayments.com",
}

DEFAULT_TIMEOUT = 60.0


class ClientSettings(BaseSettings):
    """Settings shared by the sync and async clients.

    Every field can be supplied through a ``DODO_PAYMENTS_`` prefixed
    environment variable, e.g. ``DODO_PAYMENTS_API_KEY`` or
    ``DODO_PAYMENTS_ENVIRONMENT=test_mode``.
    """

    model_config = SettingsConfigDict(
        env_prefix="DODO_PAYMENTS_",
        extra="ignore",
    )

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    environment: Environment = "live_mode"
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    log: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return v.rstrip("/") if v else None

    @field_validator("log")
    @classmethod
    def normalise_log_level(cls, v: Optional[str]) -> Optional[str]:
        return v.strip().lower() if v else None

    def resolved_base_url(self) -> str:
        """The explicit ``base_url`` if set, otherwise the environment's URL."""
        return self.base_url or ENVIRONMENTS[self.environment]


__all__ = ["ClientSettings", "ENVIRONMENTS", "DEFAULT_TIMEOUT", "Environment"]
