"""Human-readable labels for simulation results."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple

from projection_engine.core.exceptions import InvalidParameterError
from projection_engine.core.settings import get_settings
from projection_engine.domain.calculator.compounding import round_to_unit

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

PAID_OFF_IMMEDIATELY = "Paid off immediately"


class DurationBreakdown(NamedTuple):
    """A month count split into whole years and leftover months."""

    years: int
    months: int


def split_months(total_months: int) -> DurationBreakdown:
    """Split a month count into (years, months)."""
    if total_months < 0:
        raise InvalidParameterError("total_months", total_months, "must be >= 0")
    years, months = divmod(total_months, 12)
    return DurationBreakdown(years, months)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_duration(total_months: int) -> str:
    """Format a month count, e.g. ``"2 years 3 months"``.

    Zero months reads as "Paid off immediately".
    """
    years, months = split_months(total_months)
    parts = []
    if years > 0:
        parts.append(_plural(years, "year"))
    if months > 0:
        parts.append(_plural(months, "month"))
    return " ".join(parts) or PAID_OFF_IMMEDIATELY


def format_currency(
    amount: float,
    symbol: str | None = None,
    decimals: int | None = None,
) -> str:
    """Format an amount with the configured currency symbol and grouping.

    Args:
        amount: Amount to format
        symbol: Currency symbol, defaults to the ``currency_symbol`` setting
        decimals: Decimals shown, defaults to the ``reporting_decimals`` setting

    Returns:
        Label such as ``"Rp 1.000.000"`` or ``"-Rp 2.500"``
    """
    settings = get_settings()
    symbol = settings.currency_symbol if symbol is None else symbol
    decimals = settings.reporting_decimals if decimals is None else decimals
    separator = settings.thousands_separator
    decimal_mark = "," if separator == "." else "."

    rounded = round_to_unit(abs(amount), decimals)
    whole, _, fraction = f"{rounded:,.{decimals}f}".partition(".")
    text = whole.replace(",", separator)
    if fraction:
        text = f"{text}{decimal_mark}{fraction}"

    sign = "-" if amount < 0 and rounded != 0 else ""
    prefix = f"{symbol} " if symbol else ""
    return f"{sign}{prefix}{text}"


def format_month_year(value: date) -> str:
    """Format a date as ``"March 2027"``."""
    return f"{MONTH_NAMES[value.month - 1]} {value.year}"
