"""Unit tests for projection_engine.application.services.growth_projection."""

import pytest

from projection_engine.application.services.growth_projection import (
    project_growth,
    summarize_growth,
)
from projection_engine.core.exceptions import InvalidParameterError
from projection_engine.domain.calculator.compounding import future_value
from projection_engine.domain.models import InvestmentParameters


class TestProjectGrowth:
    """Tests for project_growth."""

    def test_worked_example_zero_rate(self):
        """1,000,000 plus 500,000 a month for a year without interest."""
        params = InvestmentParameters(
            initial_amount=1_000_000, monthly_deposit=500_000, annual_rate=0, years=1
        )
        points = project_growth(params)

        assert len(points) == 2
        assert points[1].year == 1
        assert points[1].total_balance == 7_000_000
        assert points[1].total_contribution == 7_000_000
        assert points[1].interest_earned == 0

    def test_year_zero_snapshot(self, sample_investment):
        first = project_growth(sample_investment)[0]
        assert first.year == 0
        assert first.total_balance == 1_000_000
        assert first.total_contribution == 1_000_000
        assert first.interest_earned == 0

    def test_one_point_per_year(self, sample_investment):
        points = project_growth(sample_investment)
        assert [p.year for p in points] == list(range(0, 11))

    def test_deposit_earns_interest_same_month(self):
        """100 a month at 12%: deposits compound in the month they are made."""
        params = InvestmentParameters(monthly_deposit=100, annual_rate=12.0, years=1)
        point = project_growth(params)[1]
        # 100 * sum(1.01^k, k=1..12) = 1280.93
        assert point.total_balance == 1_281
        assert point.total_contribution == 1_200
        assert point.interest_earned == 81

    def test_matches_closed_form(self, sample_investment):
        points = project_growth(sample_investment)
        for point in points[1:]:
            expected = future_value(1_000_000, 500_000, 7.0, point.year * 12)
            assert point.total_balance == pytest.approx(expected, abs=0.51)

    def test_contributions_exact(self, sample_investment):
        points = project_growth(sample_investment)
        assert points[-1].total_contribution == 1_000_000 + 500_000 * 120

    def test_balance_rounded_to_unit(self, sample_investment):
        for point in project_growth(sample_investment):
            assert point.total_balance == int(point.total_balance)

    def test_reporting_decimals_from_settings(self, monkeypatch):
        monkeypatch.setenv("PROJECTION_REPORTING_DECIMALS", "2")
        params = InvestmentParameters(monthly_deposit=100, annual_rate=12.0, years=1)
        point = project_growth(params)[1]
        assert point.total_balance == pytest.approx(1_280.93)

    def test_growing_balances(self, sample_investment):
        balances = [p.total_balance for p in project_growth(sample_investment)]
        assert balances == sorted(balances)
        assert len(set(balances)) == len(balances)

    def test_initial_amount_only(self):
        params = InvestmentParameters(initial_amount=10_000, annual_rate=6.0, years=2)
        points = project_growth(params)
        assert points[2].total_balance == round(10_000 * 1.005 ** 24)
        assert points[2].total_contribution == 10_000


class TestSummarizeGrowth:
    """Tests for summarize_growth."""

    def test_summary_uses_last_year(self, sample_investment):
        points = project_growth(sample_investment)
        summary = summarize_growth(points)
        assert summary.final_balance == points[-1].total_balance
        assert summary.total_contribution == 61_000_000
        assert summary.total_interest == summary.final_balance - summary.total_contribution

    def test_empty_rejected(self):
        with pytest.raises(InvalidParameterError):
            summarize_growth([])


class TestFractionalAmounts:
    """Reported figures stay consistent when inputs carry cents."""

    def test_zero_rate_fractional_deposit(self):
        params = InvestmentParameters(initial_amount=0, monthly_deposit=0.4, annual_rate=0, years=1)
        point = project_growth(params)[1]
        assert point.total_balance == point.total_contribution == 5.0
        assert point.interest_earned == 0

    def test_fractional_initial_amount_never_negative(self):
        params = InvestmentParameters(initial_amount=1_000.4, monthly_deposit=0, annual_rate=0, years=2)
        for point in project_growth(params):
            assert point.total_contribution == 1_000.0
            assert point.interest_earned == 0

    def test_year_zero_rounded(self):
        params = InvestmentParameters(initial_amount=2_500.75, monthly_deposit=10.25, annual_rate=5.0, years=1)
        first = project_growth(params)[0]
        assert first.total_balance == 2_501.0
        assert first.total_contribution == 2_501.0
        assert first.interest_earned == 0

    def test_two_decimal_reporting(self, monkeypatch):
        monkeypatch.setenv("PROJECTION_REPORTING_DECIMALS", "2")
        params = InvestmentParameters(initial_amount=100.005, monthly_deposit=0.333, annual_rate=0, years=1)
        point = project_growth(params)[1]
        assert point.total_balance == point.total_contribution
        assert point.interest_earned == 0
