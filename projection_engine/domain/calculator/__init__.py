"""Pure numeric helpers shared by the simulators."""

from .compounding import compound_monthly, future_value, monthly_rate, round_to_unit
from .formatting import (
    DurationBreakdown,
    format_currency,
    format_duration,
    format_month_year,
    split_months,
)

__all__ = [
    "monthly_rate",
    "compound_monthly",
    "round_to_unit",
    "future_value",
    "DurationBreakdown",
    "split_months",
    "format_duration",
    "format_currency",
    "format_month_year",
]
