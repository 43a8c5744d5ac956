"""Custom exceptions for projection_engine.

Domain-specific exception types for caller contract violations and
simulation failures.
"""

from __future__ import annotations

from typing import Any


class ProjectionEngineError(Exception):
    """Base exception for all projection_engine errors."""
    pass


# --- Input Errors ---

class InvalidParameterError(ProjectionEngineError):
    """Invalid parameter value provided."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid parameter '{param_name}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Calculation Errors ---

class SimulationError(ProjectionEngineError):
    """Error during financial simulation."""
    pass


class NonConvergentSimulationError(SimulationError):
    """Debt payments never overtook interest within the simulated horizon."""

    def __init__(self, strategy: str, months_simulated: int, remaining_balance: float):
        self.strategy = strategy
        self.months_simulated = months_simulated
        self.remaining_balance = remaining_balance
        super().__init__(
            f"{strategy} payoff did not converge within {months_simulated} months "
            f"({remaining_balance:,.2f} still owed)"
        )
