"""Application services."""

from .debt_payoff import compare_strategies, order_debts, require_converged, simulate_payoff
from .debt_snapshots import DebtPayment, DebtRecord, prepare_debt_snapshots
from .growth_projection import project_growth, summarize_growth
from .tables import comparison_frame, growth_frame, payoff_schedule_frame

__all__ = [
    "simulate_payoff",
    "compare_strategies",
    "order_debts",
    "require_converged",
    "DebtRecord",
    "DebtPayment",
    "prepare_debt_snapshots",
    "project_growth",
    "summarize_growth",
    "growth_frame",
    "payoff_schedule_frame",
    "comparison_frame",
]
