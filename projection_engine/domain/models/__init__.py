"""Data models for projection_engine."""

from .debt import (
    Debt,
    NonConvergentPayoff,
    PayoffMilestone,
    PayoffMonth,
    PayoffOutcome,
    PayoffResult,
    PayoffStrategy,
    StrategyComparison,
)
from .investment import GrowthPoint, GrowthSummary, InvestmentParameters

__all__ = [
    "Debt",
    "PayoffStrategy",
    "PayoffMilestone",
    "PayoffMonth",
    "PayoffResult",
    "NonConvergentPayoff",
    "PayoffOutcome",
    "StrategyComparison",
    "InvestmentParameters",
    "GrowthPoint",
    "GrowthSummary",
]
