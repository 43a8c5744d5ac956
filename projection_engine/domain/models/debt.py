"""Debt payoff data models.

A debt is a frozen numeric snapshot handed to the payoff simulator. The
simulator answers with either a converged ``PayoffResult`` or a
``NonConvergentPayoff`` when payments never overtake interest within the
safety bound.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field, field_validator


class PayoffStrategy(str, Enum):
    """Order in which the monthly payment pool is applied to debts."""

    AVALANCHE = "Avalanche"
    SNOWBALL = "Snowball"


class Debt(BaseModel):
    """Outstanding liability at the start of a simulation."""

    name: str = Field(..., min_length=1, description="Debt identifier")
    balance: float = Field(..., ge=0, description="Amount still owed; zero means already paid")
    annual_interest_rate: float = Field(..., ge=0, description="Annual nominal rate as percentage")
    minimum_payment: float = Field(..., gt=0, description="Required monthly payment")

    model_config = {
        "frozen": True,
    }

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Drop surrounding whitespace from the identifier."""
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class PayoffMilestone(BaseModel):
    """Month in which a single debt was cleared."""

    debt_name: str
    payoff_month: int = Field(..., ge=1)
    payoff_date: date

    model_config = {"frozen": True}


class PayoffMonth(BaseModel):
    """Aggregated ledger row for one simulated month."""

    month: int = Field(..., ge=1)
    interest_accrued: float = Field(..., ge=0)
    payment_applied: float = Field(..., ge=0)
    remaining_balance: float = Field(..., description="Sum of balances after payments")

    model_config = {"frozen": True}


class PayoffResult(BaseModel):
    """Converged payoff simulation for one strategy."""

    kind: Literal["paid_off"] = "paid_off"
    strategy: PayoffStrategy
    total_months: int = Field(..., ge=0)
    total_interest_paid: float = Field(..., ge=0)
    payoff_date: date
    payoff_order: tuple[PayoffMilestone, ...] = ()
    schedule: tuple[PayoffMonth, ...] = ()

    model_config = {"frozen": True}

    @property
    def converged(self) -> bool:
        return True

    @computed_field
    @property
    def total_paid(self) -> float:
        """Total payments applied across the whole run."""
        return float(sum(row.payment_applied for row in self.schedule))


class NonConvergentPayoff(BaseModel):
    """Payoff simulation stopped at the safety bound with debt still owed.

    Carries no payoff date.
    """

    kind: Literal["non_convergent"] = "non_convergent"
    strategy: PayoffStrategy
    months_simulated: int = Field(..., ge=1)
    total_interest_paid: float = Field(..., ge=0)
    remaining_balance: float = Field(..., gt=0)
    payoff_order: tuple[PayoffMilestone, ...] = ()
    schedule: tuple[PayoffMonth, ...] = ()

    model_config = {"frozen": True}

    @property
    def converged(self) -> bool:
        return False


PayoffOutcome = Annotated[
    Union[PayoffResult, NonConvergentPayoff],
    Field(discriminator="kind"),
]


class StrategyComparison(BaseModel):
    """Side-by-side Avalanche and Snowball outcomes for the same debts."""

    avalanche: PayoffOutcome
    snowball: PayoffOutcome

    model_config = {"frozen": True}

    @computed_field
    @property
    def interest_savings(self) -> float | None:
        """Interest saved by Avalanche over Snowball, if both converged."""
        if not (self.avalanche.converged and self.snowball.converged):
            return None
        return self.snowball.total_interest_paid - self.avalanche.total_interest_paid

    @computed_field
    @property
    def months_saved(self) -> int | None:
        """Months saved by Avalanche over Snowball, if both converged."""
        if not (self.avalanche.converged and self.snowball.converged):
            return None
        return self.snowball.total_months - self.avalanche.total_months
