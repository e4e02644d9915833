"""Configuration loading for the shopkit storefront.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Exchange rate configuration
    exchange_rate_backend: Literal["static", "http"] = Field(
        default="static",
        description="Exchange rate backend type",
    )
    exchange_rate_api_url: str = Field(
        default="https://api.frankfurter.app",
        description="Rates API endpoint URL",
    )
    exchange_rate_api_key: str = Field(
        default="",
        description="Rates API authentication key",
    )
    static_exchange_rates: dict[str, float] = Field(
        default_factory=lambda: {"AUD": 1.5, "EUR": 0.92, "GBP": 0.79},
        description="Rates against the base currency for the static backend (JSON)",
    )
    base_currency: str = Field(
        default="USD",
        description="Currency prices are stored in",
    )

    # Shipping configuration
    shipping_backend: Literal["flat_rate", "http"] = Field(
        default="flat_rate",
        description="Shipping backend type",
    )
    shipping_api_url: str = Field(
        default="http://localhost:8081",
        description="Carrier API endpoint URL",
    )
    flat_rate_shipping_cost: float = Field(
        default=10.0,
        description="Shipping cost for the flat rate backend",
    )
    flat_rate_shipping_days: int = Field(
        default=2,
        description="Delivery estimate in days for the flat rate backend",
    )

    # Payment configuration
    payment_api_url: str = Field(
        default="http://localhost:8082",
        description="Payment processor API endpoint URL",
    )
    payment_api_key: str = Field(
        default="",
        description="Payment processor secret key",
    )

    # Login codes
    security_code_digits: int = Field(
        default=6,
        description="Number of digits in one-time login codes",
    )

    # Support opening hours (local time)
    opening_hour: int = Field(
        default=8,
        description="Hour support opens (inclusive)",
    )
    closing_hour: int = Field(
        default=20,
        description="Hour support closes (exclusive)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Ensure base currency is a three-letter code."""
        if len(v) != 3 or not v.isalpha():
            raise ValueError("base_currency must be a three-letter currency code")
        return v.upper()

    @field_validator("static_exchange_rates")
    @classmethod
    def validate_static_rates(cls, v: dict[str, float]) -> dict[str, float]:
        """Ensure every static rate is positive."""
        for code, rate in v.items():
            if rate <= 0:
                raise ValueError(f"static exchange rate for {code} must be positive")
        return v

    @field_validator("flat_rate_shipping_cost")
    @classmethod
    def validate_shipping_cost(cls, v: float) -> float:
        """Ensure flat rate cost is non-negative."""
        if v < 0:
            raise ValueError("flat_rate_shipping_cost must be non-negative")
        return v

    @field_validator("flat_rate_shipping_days")
    @classmethod
    def validate_shipping_days(cls, v: int) -> int:
        """Ensure delivery estimate is non-negative."""
        if v < 0:
            raise ValueError("flat_rate_shipping_days must be non-negative")
        return v

    @field_validator("security_code_digits")
    @classmethod
    def validate_code_digits(cls, v: int) -> int:
        """Ensure login codes have between 4 and 10 digits."""
        if v < 4 or v > 10:
            raise ValueError("security_code_digits must be between 4 and 10")
        return v

    @field_validator("opening_hour", "closing_hour")
    @classmethod
    def validate_hour(cls, v: int) -> int:
        """Ensure hours fall within a day."""
        if v < 0 or v > 24:
            raise ValueError("hours must be between 0 and 24")
        return v

    @model_validator(mode="after")
    def validate_opening_hours(self) -> "Settings":
        """Ensure support opens before it closes."""
        if self.opening_hour >= self.closing_hour:
            raise ValueError("opening_hour must be before closing_hour")
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
