"""Simple (non-compounding) interest.

No domain validation: a negative rate models a loss and zero years returns
the principal unchanged.
"""

from decimal import Decimal

from .validation import Number, fixed_context, to_decimal


@fixed_context
def calc_simple_interest(principal: Number, rate: Number, years: Number) -> Decimal:
    """Future value under simple interest: P × (1 + r × t).

    Args:
        principal: Initial capital P.
        rate: Annual rate r as a fraction (0.08 = 8%).
        years: Term t in years.

    Examples:
        principal=1000, rate=0.1, years=2 → 1200
    """
    principal = to_decimal(principal, "principal")
    rate = to_decimal(rate, "rate")
    years = to_decimal(years, "years")
    return principal * (1 + rate * years)


@fixed_context
def calc_simple_profit(principal: Number, rate: Number, years: Number) -> Decimal:
    """Profit under simple interest: future value minus principal."""
    principal = to_decimal(principal, "principal")
    return calc_simple_interest(principal, rate, years) - principal
