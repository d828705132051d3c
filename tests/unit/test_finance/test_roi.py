"""Tests for core.finance.roi.

  ROI               = (return - investment) / investment × 100
  partial return    = investment × percentage / 100
  return percentage = return / investment × 100
"""

from decimal import Decimal

import pytest

from investo.core.exceptions import InvalidArgumentError
from investo.core.finance.roi import (
    calculate_partial_return,
    calculate_return_percentage,
    calculate_roi,
)


class TestCalculateRoi:
    def test_gain(self):
        # (13000 - 10000) / 10000 × 100 = 30
        assert calculate_roi(10000, 13000) == Decimal("30")

    def test_breakeven(self):
        assert calculate_roi(10000, 10000) == Decimal("0")

    def test_loss(self):
        # (8000 - 10000) / 10000 × 100 = -20
        assert calculate_roi(10000, 8000) == Decimal("-20")

    def test_small_gain(self):
        assert calculate_roi(10000, 10500) == Decimal("5")

    def test_negative_return_is_allowed(self):
        # (-500 - 1000) / 1000 × 100 = -150
        assert calculate_roi(1000, -500) == Decimal("-150")

    def test_returns_decimal(self):
        assert isinstance(calculate_roi(10000, 13000), Decimal)

    def test_float_inputs_are_exact(self):
        # 0.1 → Decimal("0.1"), not 0.1000000000000000055...
        assert calculate_roi(0.1, 0.3) == Decimal("200")

    @pytest.mark.parametrize("investment", [0, -5000])
    def test_non_positive_investment_raises(self, investment):
        with pytest.raises(InvalidArgumentError, match="investment must be > 0"):
            calculate_roi(investment, 10000)

    @pytest.mark.parametrize("investment", [1, 250, 10000, "1234.56"])
    def test_roi_of_own_value_is_zero(self, investment):
        assert calculate_roi(investment, investment) == 0


class TestCalculatePartialReturn:
    def test_sixty_percent(self):
        assert calculate_partial_return(10000, 60) == Decimal("6000")

    def test_zero_percent(self):
        assert calculate_partial_return(10000, 0) == Decimal("0")

    def test_hundred_percent(self):
        assert calculate_partial_return(10000, 100) == Decimal("10000")

    def test_zero_investment(self):
        assert calculate_partial_return(0, 50) == Decimal("0")

    def test_negative_investment_raises(self):
        with pytest.raises(InvalidArgumentError):
            calculate_partial_return(-5000, 50)

    @pytest.mark.parametrize("pct", [120, -10, "100.01"])
    def test_percentage_out_of_range_raises(self, pct):
        with pytest.raises(InvalidArgumentError, match="between 0 and 100"):
            calculate_partial_return(10000, pct)

    @pytest.mark.parametrize("pct", [0, 12.5, 50, 99.99, 100])
    def test_never_exceeds_investment(self, pct):
        assert calculate_partial_return(10000, pct) <= 10000


class TestCalculateReturnPercentage:
    def test_below_investment(self):
        assert calculate_return_percentage(10000, 6000) == Decimal("60")

    def test_equal_to_investment(self):
        assert calculate_return_percentage(10000, 10000) == Decimal("100")

    def test_above_investment(self):
        assert calculate_return_percentage(10000, 12000) == Decimal("120")

    def test_zero_return(self):
        assert calculate_return_percentage(10000, 0) == Decimal("0")

    @pytest.mark.parametrize("investment", [0, -10000])
    def test_non_positive_investment_raises(self, investment):
        with pytest.raises(InvalidArgumentError):
            calculate_return_percentage(investment, 5000)


class TestRoiVersusReturnPercentage:
    """return_percentage - 100 == ROI for the same inputs."""

    @pytest.mark.parametrize(
        "investment, actual_return",
        [(10000, 13000), (10000, 8000), (10000, 0), (400, 1000), ("2500", "2500.5")],
    )
    def test_identity(self, investment, actual_return):
        assert (
            calculate_return_percentage(investment, actual_return) - 100
            == calculate_roi(investment, actual_return)
        )
