"""
Application configuration using Pydantic Settings.

Typed and validated settings for the GST calculator, loaded from
environment variables and an optional .env file.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TaxSettings(BaseSettings):
    """GST calculation and display settings."""

    model_config = SettingsConfigDict(env_prefix="GST_")

    locale: str = Field(default="en_IN", description="Locale used for currency display")
    currency: str = Field(default="INR", description="ISO 4217 currency code")
    min_rate: Decimal = Field(default=Decimal("0"), description="Lowest accepted GST rate")
    max_rate: Decimal = Field(default=Decimal("28"), description="Highest accepted GST rate")

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        """Upper-case and strip the currency code."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @model_validator(mode="after")
    def check_rate_bounds(self) -> TaxSettings:
        """Reject an inverted rate range."""
        if self.min_rate > self.max_rate:
            raise ValueError("min_rate must not exceed max_rate")
        return self


class LoggingSettings(BaseSettings):
    """Logging output settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Minimum log level"
    )
    json_format: bool = Field(
        default=False, description="Emit JSON lines instead of console output"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lower-case level names."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates the tax and logging sections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    tax: TaxSettings = Field(default_factory=TaxSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
