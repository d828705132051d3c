"""Return-on-investment calculations.

All functions are pure: numeric inputs in, Decimal out. Results are not
rounded; use investo.core.finance.rounding for display.
"""

from decimal import Decimal

from .validation import Number, fixed_context, require, to_decimal


@fixed_context
def calculate_roi(investment: Number, actual_return: Number) -> Decimal:
    """Calculate ROI as a percentage.

    Formula: ROI = (actual_return - investment) / investment × 100

    Args:
        investment: Initial investment, must be > 0.
        actual_return: Amount received back. Not validated: a return below
            the investment (or a negative one) is a loss, not a bad input.

    Returns:
        ROI in percent. Negative for a loss, unbounded above.

    Raises:
        InvalidArgumentError: investment <= 0.

    Examples:
        investment=10000, actual_return=13000 → 30
        investment=10000, actual_return=8000  → -20
    """
    investment = to_decimal(investment, "investment")
    actual_return = to_decimal(actual_return, "actual_return")
    require(investment > 0, "investment must be > 0")
    return (actual_return - investment) / investment * 100


@fixed_context
def calculate_partial_return(investment: Number, target_percentage: Number) -> Decimal:
    """Calculate the amount corresponding to a percentage of the investment.

    Args:
        investment: Initial investment, must be ≥ 0.
        target_percentage: Share of the investment to recover, 0–100 inclusive.

    Returns:
        investment × target_percentage / 100

    Raises:
        InvalidArgumentError: investment < 0 or target_percentage outside [0, 100].

    Examples:
        investment=10000, target_percentage=60 → 6000
    """
    investment = to_decimal(investment, "investment")
    target_percentage = to_decimal(target_percentage, "target_percentage")
    require(investment >= 0, "investment must be ≥ 0")
    require(
        0 <= target_percentage <= 100,
        "target_percentage must be between 0 and 100",
    )
    return investment * (target_percentage / 100)


@fixed_context
def calculate_return_percentage(investment: Number, desired_return: Number) -> Decimal:
    """Calculate what percentage of the investment a return amount represents.

    Formula: percentage = desired_return / investment × 100

    Args:
        investment: Initial investment, must be > 0.
        desired_return: Amount to recover. Not validated.

    Returns:
        Percentage of the investment; above 100 when the return exceeds it.

    Raises:
        InvalidArgumentError: investment <= 0.

    Examples:
        investment=10000, desired_return=6000 → 60
    """
    investment = to_decimal(investment, "investment")
    desired_return = to_decimal(desired_return, "desired_return")
    require(investment > 0, "investment must be > 0")
    return desired_return / investment * 100
