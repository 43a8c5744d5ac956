"""Pytest fixtures for projection_engine tests."""

import os
import sys
from datetime import date

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from projection_engine.core.settings import get_settings
from projection_engine.domain.models import Debt, InvestmentParameters


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env overrides in a test never leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def start_date():
    """Fixed simulation start date."""
    return date(2026, 1, 15)


@pytest.fixture
def two_debts():
    """Worked example: high-rate large debt and low-rate small debt."""
    return [
        Debt(name="Debt A", balance=1_000_000, annual_interest_rate=24.0, minimum_payment=50_000),
        Debt(name="Debt B", balance=500_000, annual_interest_rate=12.0, minimum_payment=30_000),
    ]


@pytest.fixture
def household_debts():
    """A realistic mix of consumer debts."""
    return [
        Debt(name="Credit Card", balance=8_500_000, annual_interest_rate=29.5, minimum_payment=425_000),
        Debt(name="Motorbike Loan", balance=12_000_000, annual_interest_rate=14.0, minimum_payment=650_000),
        Debt(name="Family Loan", balance=2_000_000, annual_interest_rate=0.0, minimum_payment=250_000),
        Debt(name="Paylater", balance=1_200_000, annual_interest_rate=36.0, minimum_payment=150_000),
    ]


@pytest.fixture
def sample_investment():
    """Default calculator inputs from the budgeting app."""
    return InvestmentParameters(
        initial_amount=1_000_000,
        monthly_deposit=500_000,
        annual_rate=7.0,
        years=10,
    )
