"""Environment-driven settings.

Settings are read once per process and cached. Tests call reset_settings()
after changing environment variables.
"""

import os
from decimal import Decimal
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Runtime configuration for the booking engine and API."""

    model_config = ConfigDict(frozen=True)

    data_service_url: str = Field(default="http://localhost:5000")
    data_service_timeout: float = Field(default=10.0, gt=0)
    cleaning_fee: int = Field(default=2500, ge=0, description="Default cleaning fee in INR")
    service_fee_rate: Decimal = Field(default=Decimal("0.13"), ge=0, lt=1)
    currency: str = Field(default="INR")
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = Field(default="INFO")


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings built from environment variables.

    Returns:
        Settings with environment overrides applied.
    """
    values: dict[str, object] = {}

    if url := os.getenv("STAYLOCAL_DATA_SERVICE_URL"):
        values["data_service_url"] = url.rstrip("/")
    if timeout := os.getenv("STAYLOCAL_DATA_SERVICE_TIMEOUT"):
        values["data_service_timeout"] = float(timeout)
    if cleaning_fee := os.getenv("STAYLOCAL_CLEANING_FEE"):
        values["cleaning_fee"] = int(cleaning_fee)
    if rate := os.getenv("STAYLOCAL_SERVICE_FEE_RATE"):
        values["service_fee_rate"] = Decimal(rate)
    if currency := os.getenv("STAYLOCAL_CURRENCY"):
        values["currency"] = currency
    if origins := os.getenv("STAYLOCAL_CORS_ORIGINS"):
        values["cors_origins"] = _split_origins(origins)
    if log_level := os.getenv("LOG_LEVEL"):
        values["log_level"] = log_level.upper()

    return Settings(**values)


def reset_settings() -> None:
    """Clear the cached settings (for testing only)."""
    get_settings.cache_clear()
