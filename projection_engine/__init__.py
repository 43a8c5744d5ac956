"""
projection_engine - Debt payoff and investment growth projections

Deterministic month-by-month simulators behind the budgeting calculators.

Modules:
    - core: Exceptions, structured logging and settings
    - domain.models: Pydantic models for debts, payoff outcomes and growth points
    - domain.calculator: Monthly compounding and result formatting
    - application.services: Payoff simulator, growth projector, snapshot
      preparation and tabular export
"""

from projection_engine.application.services import (
    compare_strategies,
    project_growth,
    simulate_payoff,
)
from projection_engine.domain.models import (
    Debt,
    GrowthPoint,
    InvestmentParameters,
    NonConvergentPayoff,
    PayoffResult,
    PayoffStrategy,
)

__version__ = "1.0.0"

__all__ = [
    "simulate_payoff",
    "compare_strategies",
    "project_growth",
    "Debt",
    "PayoffStrategy",
    "PayoffResult",
    "NonConvergentPayoff",
    "InvestmentParameters",
    "GrowthPoint",
]
