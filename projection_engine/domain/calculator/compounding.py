"""Monthly compounding primitives.

Nominal monthly compounding shared by the debt and investment simulators.
Intermediate balances are never rounded; rounding only happens when a
snapshot is reported.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy_financial as npf


def monthly_rate(annual_rate_pct: float) -> float:
    """Convert an annual nominal rate (percentage) into a monthly rate.

    Args:
        annual_rate_pct: Annual rate as percentage (e.g., 24 for 24%)

    Returns:
        Monthly rate as a fraction (e.g., 0.02)
    """
    return annual_rate_pct / 100.0 / 12.0


def compound_monthly(balance: float, annual_rate_pct: float) -> float:
    """Apply one month of interest accrual to a balance."""
    return balance * (1.0 + monthly_rate(annual_rate_pct))


def round_to_unit(value: float, decimals: int = 0) -> float:
    """Round half-up to the reporting unit.

    Args:
        value: Full-precision amount
        decimals: Number of decimals kept (0 rounds to whole units)

    Returns:
        Rounded amount
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def future_value(
    initial_amount: float,
    monthly_deposit: float,
    annual_rate_pct: float,
    months: int,
) -> float:
    """Closed-form balance when each deposit is made before the month compounds.

    Args:
        initial_amount: Starting capital
        monthly_deposit: Deposit added at the start of every month
        annual_rate_pct: Annual nominal rate %
        months: Number of months

    Returns:
        Balance after ``months`` months, unrounded
    """
    if months <= 0:
        return initial_amount

    return float(
        npf.fv(
            monthly_rate(annual_rate_pct),
            months,
            -monthly_deposit,
            -initial_amount,
            when="begin",
        )
    )
