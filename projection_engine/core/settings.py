"""Engine settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """Engine configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render log lines as JSON instead of console text")

    # Simulation bounds
    max_simulation_months: int = Field(
        default=1200, ge=1, description="Safety bound for the debt payoff loop (100 years)"
    )

    # Reporting
    reporting_decimals: int = Field(default=0, ge=0, le=6, description="Decimals kept on year-end snapshots")
    currency_symbol: str = Field(default="Rp", description="Currency symbol used by formatters")
    thousands_separator: str = Field(default=".", description="Digit grouping separator")

    # Calculator defaults
    default_extra_payment: float = Field(default=100_000.0, ge=0)
    default_initial_amount: float = Field(default=1_000_000.0, ge=0)
    default_monthly_deposit: float = Field(default=500_000.0, ge=0)
    default_annual_rate: float = Field(default=7.0, ge=0)
    default_years: int = Field(default=10, ge=1)

    model_config = {
        "env_prefix": "PROJECTION_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> EngineSettings:
    """Get cached engine settings."""
    return EngineSettings()
