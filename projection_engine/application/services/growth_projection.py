"""Investment growth projection.

Monthly deposit-then-compound simulation reported as one snapshot per year.
"""

from __future__ import annotations

from typing import Sequence

from projection_engine.core.exceptions import InvalidParameterError
from projection_engine.core.logging import get_logger
from projection_engine.core.settings import get_settings
from projection_engine.domain.calculator.compounding import compound_monthly, round_to_unit
from projection_engine.domain.models.investment import (
    GrowthPoint,
    GrowthSummary,
    InvestmentParameters,
)

log = get_logger(__name__)

MONTHS_PER_YEAR = 12


def _year_end_point(year: int, balance: float, contribution: float, decimals: int) -> GrowthPoint:
    """Round a year-end snapshot so its three figures add up exactly."""
    total_balance = round_to_unit(balance, decimals)
    total_contribution = round_to_unit(contribution, decimals)
    return GrowthPoint(
        year=year,
        total_balance=total_balance,
        total_contribution=total_contribution,
        interest_earned=round_to_unit(total_balance - total_contribution, decimals),
    )


def project_growth(params: InvestmentParameters) -> list[GrowthPoint]:
    """Project an investment year by year.

    Every month the deposit is added first and the month's interest is then
    applied to the whole balance, so a deposit earns interest in the month it
    is made. Balances are kept at full precision. Reported balances and
    contributions are both rounded to the reporting unit, and
    ``interest_earned`` is their difference, so the three fields always add
    up and interest never goes negative at a non-negative rate.

    Args:
        params: Validated projection inputs

    Returns:
        ``params.years + 1`` growth points, starting with year 0
    """
    decimals = get_settings().reporting_decimals

    balance = params.initial_amount
    contribution = params.initial_amount
    points = [_year_end_point(0, balance, contribution, decimals)]

    for year in range(1, params.years + 1):
        for _ in range(MONTHS_PER_YEAR):
            balance += params.monthly_deposit
            balance = compound_monthly(balance, params.annual_rate)
            contribution += params.monthly_deposit

        points.append(_year_end_point(year, balance, contribution, decimals))

    log.debug(
        "growth_projection_completed",
        years=params.years,
        annual_rate=params.annual_rate,
        final_balance=points[-1].total_balance,
    )
    return points


def summarize_growth(points: Sequence[GrowthPoint]) -> GrowthSummary:
    """Headline figures from the last year of a projection."""
    if not points:
        raise InvalidParameterError("points", points, "projection is empty")

    last = points[-1]
    return GrowthSummary(
        final_balance=last.total_balance,
        total_contribution=last.total_contribution,
        total_interest=last.interest_earned,
    )
