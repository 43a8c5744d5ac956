"""Debt payoff simulation.

Month-by-month payment waterfall comparing the Avalanche (highest rate
first) and Snowball (lowest balance first) strategies.

Each month every open debt accrues one month of nominal interest and adds its
minimum payment to a pool seeded with the extra payment. The pool is then
spent on debts in priority order. The priority order is fixed when the run
starts; Snowball does not re-rank debts as balances shrink.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

import pandas as pd

from projection_engine.core.exceptions import InvalidParameterError, NonConvergentSimulationError
from projection_engine.core.logging import get_logger
from projection_engine.core.settings import get_settings
from projection_engine.domain.calculator.compounding import compound_monthly
from projection_engine.domain.models.debt import (
    Debt,
    NonConvergentPayoff,
    PayoffMilestone,
    PayoffMonth,
    PayoffOutcome,
    PayoffResult,
    PayoffStrategy,
    StrategyComparison,
)

log = get_logger(__name__)


@dataclass
class DebtState:
    """Mutable working copy of one debt for a single strategy run."""

    name: str
    balance: float
    annual_interest_rate: float
    minimum_payment: float
    paid_off: bool = False

    @classmethod
    def from_debt(cls, debt: Debt) -> DebtState:
        return cls(
            name=debt.name,
            balance=debt.balance,
            annual_interest_rate=debt.annual_interest_rate,
            minimum_payment=debt.minimum_payment,
        )

    @property
    def is_open(self) -> bool:
        return self.balance > 0


def add_months(start: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of shorter months."""
    return (pd.Timestamp(start) + pd.DateOffset(months=months)).date()


def order_debts(debts: Iterable[Debt], strategy: PayoffStrategy) -> list[Debt]:
    """Return debts in payment priority order for a strategy.

    Avalanche: highest annual rate first.
    Snowball: lowest starting balance first.
    Ties keep their input order.
    """
    strategy = PayoffStrategy(strategy)
    if strategy is PayoffStrategy.AVALANCHE:
        return sorted(debts, key=lambda d: d.annual_interest_rate, reverse=True)
    return sorted(debts, key=lambda d: d.balance)


def _accrue_interest(states: list[DebtState], extra_monthly_payment: float) -> tuple[float, float]:
    """Accrue a month of interest on open debts and build the payment pool.

    Returns:
        Tuple of (interest accrued this month, payment pool)
    """
    interest = 0.0
    pool = extra_monthly_payment
    for state in states:
        if not state.is_open:
            continue
        accrued_balance = compound_monthly(state.balance, state.annual_interest_rate)
        interest += accrued_balance - state.balance
        state.balance = accrued_balance
        pool += state.minimum_payment
    return interest, pool


def _apply_waterfall(
    states: list[DebtState],
    pool: float,
    month: int,
    start_date: date,
    payoff_order: list[PayoffMilestone],
) -> float:
    """Spend the pool on open debts in priority order.

    Returns:
        Total payment applied this month
    """
    applied = 0.0
    for state in states:
        if pool <= 0:
            break
        if not state.is_open:
            continue

        payment = min(state.balance, pool)
        state.balance -= payment
        pool -= payment
        applied += payment

        if not state.is_open and not state.paid_off:
            state.paid_off = True
            payoff_order.append(PayoffMilestone(
                debt_name=state.name,
                payoff_month=month,
                payoff_date=add_months(start_date, month),
            ))
    return applied


def simulate_payoff(
    debts: Sequence[Debt],
    extra_monthly_payment: float,
    strategy: PayoffStrategy,
    *,
    start_date: date | None = None,
    max_months: int | None = None,
) -> PayoffOutcome:
    """Simulate paying off a set of debts under one strategy.

    Args:
        debts: Open debts (already net of prior payments)
        extra_monthly_payment: Discretionary amount added to the pool every month
        strategy: Avalanche or Snowball
        start_date: Date the simulation starts from, defaults to today
        max_months: Safety bound, defaults to the ``max_simulation_months`` setting

    Returns:
        PayoffResult when every debt reaches zero, NonConvergentPayoff when
        the safety bound is hit first

    Raises:
        InvalidParameterError: On an empty debt list, a negative extra
            payment or a non-positive bound
    """
    if not debts:
        raise InvalidParameterError("debts", debts, "at least one open debt is required")
    if extra_monthly_payment < 0:
        raise InvalidParameterError("extra_monthly_payment", extra_monthly_payment, "must be >= 0")
    if max_months is None:
        max_months = get_settings().max_simulation_months
    if max_months <= 0:
        raise InvalidParameterError("max_months", max_months, "must be > 0")

    strategy = PayoffStrategy(strategy)
    start_date = start_date or date.today()
    states = [DebtState.from_debt(d) for d in order_debts(debts, strategy)]

    month = 0
    total_interest = 0.0
    payoff_order: list[PayoffMilestone] = []
    schedule: list[PayoffMonth] = []

    while any(s.is_open for s in states):
        if month >= max_months:
            remaining = sum(s.balance for s in states if s.is_open)
            log.warning(
                "payoff_simulation_non_convergent",
                strategy=strategy.value,
                months_simulated=month,
                remaining_balance=round(remaining, 2),
                debts=len(states),
            )
            return NonConvergentPayoff(
                strategy=strategy,
                months_simulated=month,
                total_interest_paid=total_interest,
                remaining_balance=remaining,
                payoff_order=tuple(payoff_order),
                schedule=tuple(schedule),
            )

        month += 1
        interest, pool = _accrue_interest(states, extra_monthly_payment)
        total_interest += interest
        applied = _apply_waterfall(states, pool, month, start_date, payoff_order)

        schedule.append(PayoffMonth(
            month=month,
            interest_accrued=interest,
            payment_applied=applied,
            remaining_balance=sum(s.balance for s in states if s.is_open),
        ))

    log.debug(
        "payoff_simulation_completed",
        strategy=strategy.value,
        total_months=month,
        total_interest_paid=round(total_interest, 2),
        debts=len(states),
    )

    return PayoffResult(
        strategy=strategy,
        total_months=month,
        total_interest_paid=total_interest,
        payoff_date=add_months(start_date, month),
        payoff_order=tuple(payoff_order),
        schedule=tuple(schedule),
    )


def compare_strategies(
    debts: Sequence[Debt],
    extra_monthly_payment: float | None = None,
    *,
    start_date: date | None = None,
    max_months: int | None = None,
) -> StrategyComparison:
    """Run both strategies on the same debts.

    Each run builds its own working state, so neither can affect the other.
    The extra payment defaults to the ``default_extra_payment`` setting.
    """
    start_date = start_date or date.today()
    if extra_monthly_payment is None:
        extra_monthly_payment = get_settings().default_extra_payment
    avalanche = simulate_payoff(
        debts, extra_monthly_payment, PayoffStrategy.AVALANCHE,
        start_date=start_date, max_months=max_months,
    )
    snowball = simulate_payoff(
        debts, extra_monthly_payment, PayoffStrategy.SNOWBALL,
        start_date=start_date, max_months=max_months,
    )
    comparison = StrategyComparison(avalanche=avalanche, snowball=snowball)

    log.info(
        "payoff_strategies_compared",
        debts=len(debts),
        extra_monthly_payment=extra_monthly_payment,
        avalanche_converged=avalanche.converged,
        snowball_converged=snowball.converged,
        interest_savings=comparison.interest_savings,
    )
    return comparison


def require_converged(outcome: PayoffOutcome) -> PayoffResult:
    """Return the converged result or raise.

    Raises:
        NonConvergentSimulationError: If the simulation hit its safety bound
    """
    if isinstance(outcome, NonConvergentPayoff):
        raise NonConvergentSimulationError(
            outcome.strategy.value,
            outcome.months_simulated,
            outcome.remaining_balance,
        )
    return outcome
