"""Tabular views of simulation results for the rendering layer."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from projection_engine.domain.calculator.formatting import format_duration
from projection_engine.domain.models.debt import (
    NonConvergentPayoff,
    PayoffOutcome,
    StrategyComparison,
)
from projection_engine.domain.models.investment import GrowthPoint

GROWTH_COLUMNS = ["total_balance", "total_contribution", "interest_earned"]
SCHEDULE_COLUMNS = ["interest_accrued", "payment_applied", "remaining_balance"]


def growth_frame(points: Sequence[GrowthPoint]) -> pd.DataFrame:
    """Growth curve indexed by year."""
    if not points:
        return pd.DataFrame(columns=GROWTH_COLUMNS, index=pd.Index([], name="year"))
    df = pd.DataFrame([p.model_dump() for p in points])
    return df.set_index("year")[GROWTH_COLUMNS]


def payoff_schedule_frame(outcome: PayoffOutcome) -> pd.DataFrame:
    """Monthly ledger indexed by month, with cumulative interest and payments."""
    if not outcome.schedule:
        return pd.DataFrame(
            columns=SCHEDULE_COLUMNS + ["cumulative_interest", "cumulative_paid"],
            index=pd.Index([], name="month"),
        )

    df = pd.DataFrame([row.model_dump() for row in outcome.schedule]).set_index("month")
    df = df[SCHEDULE_COLUMNS]
    df["cumulative_interest"] = df["interest_accrued"].cumsum()
    df["cumulative_paid"] = df["payment_applied"].cumsum()
    return df


def _outcome_row(outcome: PayoffOutcome) -> dict:
    if isinstance(outcome, NonConvergentPayoff):
        return {
            "strategy": outcome.strategy.value,
            "converged": False,
            "total_months": outcome.months_simulated,
            "duration": None,
            "total_interest_paid": outcome.total_interest_paid,
            "payoff_date": None,
            "remaining_balance": outcome.remaining_balance,
        }
    return {
        "strategy": outcome.strategy.value,
        "converged": True,
        "total_months": outcome.total_months,
        "duration": format_duration(outcome.total_months),
        "total_interest_paid": outcome.total_interest_paid,
        "payoff_date": outcome.payoff_date,
        "remaining_balance": 0.0,
    }


def comparison_frame(comparison: StrategyComparison) -> pd.DataFrame:
    """One row per strategy, indexed by strategy name."""
    rows = [_outcome_row(comparison.avalanche), _outcome_row(comparison.snowball)]
    return pd.DataFrame(rows).set_index("strategy")
