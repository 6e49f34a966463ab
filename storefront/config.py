"""Configuration for storefront."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Storefront configuration.

    All settings can be overridden via STOREFRONT_* environment variables.
    """

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # Profile seed for new sessions
    SEED_PROFILE: bool = Field(default=True)
    DEFAULT_ADDRESSES: list[str] = Field(
        default=["123 Main Street, New York", "45 Hill Road, San Francisco"]
    )
    DEFAULT_PAYMENT_METHODS: list[str] = Field(default=["Visa **** 1234"])

    # Re-adding a product is a silent no-op unless this is set
    CART_REJECT_DUPLICATES: bool = Field(default=False)

    # Idempotent order placement
    IDEMPOTENCY_TTL_SECONDS: int = Field(default=3600, ge=0)
    IDEMPOTENCY_ON_PENDING: Literal["WAIT", "FAIL"] = Field(default="WAIT")
    IDEMPOTENCY_WAIT_TIMEOUT_SECONDS: float = Field(default=5.0, gt=0)

    # Sessions untouched for this long are dropped; 0 keeps them forever
    SESSION_IDLE_SECONDS: int = Field(default=1800, ge=0)

    # HTTP
    API_TITLE: str = Field(default="Storefront API")

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
