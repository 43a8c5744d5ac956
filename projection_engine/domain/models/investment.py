"""Investment growth data models."""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from projection_engine.core.settings import get_settings


class InvestmentParameters(BaseModel):
    """Inputs for a monthly-contribution growth projection."""

    initial_amount: float = Field(default=0.0, ge=0, description="Starting capital")
    monthly_deposit: float = Field(default=0.0, ge=0, description="Deposit made at the start of every month")
    annual_rate: float = Field(default=0.0, ge=0, description="Annual nominal return as percentage")
    years: int = Field(..., gt=0, description="Projection horizon in years")

    model_config = {"frozen": True}

    @computed_field
    @property
    def total_months(self) -> int:
        """Number of simulated months."""
        return self.years * 12

    @classmethod
    def from_defaults(cls, **overrides: float) -> InvestmentParameters:
        """Build parameters from configured calculator defaults."""
        settings = get_settings()
        values = {
            "initial_amount": settings.default_initial_amount,
            "monthly_deposit": settings.default_monthly_deposit,
            "annual_rate": settings.default_annual_rate,
            "years": settings.default_years,
        }
        values.update(overrides)
        return cls(**values)


class GrowthPoint(BaseModel):
    """Year-end snapshot of the projected investment."""

    year: int = Field(..., ge=0)
    total_balance: float
    total_contribution: float = Field(..., ge=0)
    interest_earned: float

    model_config = {"frozen": True}


class GrowthSummary(BaseModel):
    """Headline figures of a projection (last year-end snapshot)."""

    final_balance: float
    total_contribution: float
    total_interest: float

    model_config = {"frozen": True}
