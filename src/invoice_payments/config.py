"""
Application configuration loaded from environment variables.

Variables use the INVOICE_PAYMENTS_ prefix, e.g. INVOICE_PAYMENTS_LOG_LEVEL.
A .env file in the working directory is read for local development.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for wiring the payment processor."""

    model_config = SettingsConfigDict(
        env_prefix="INVOICE_PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Level for the invoice_payments logger hierarchy",
    )

    serialize_invoice_access: bool = Field(
        default=True,
        description="Hold a per-invoice lock while a payment is processed",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
