"""investo — formula library for an investment tracker.

Every formula is importable from the package root:
    import investo
    investo.calculate_roi(10000, 13000)  # Decimal("30")

Inputs may be Decimal, int, float or numeric str; results are always
Decimal, computed at 28 significant digits regardless of the caller's
decimal context. Decimal does not mix with float in arithmetic:
``investo.calc_simple_interest(1000, 0.1, 2) * 1.05`` raises TypeError.
Convert one side first, e.g. ``float(result) * 1.05`` or
``result * Decimal("1.05")``.
"""

from .core.exceptions import InvalidArgumentError, InvestoError
from .core.finance import (
    calc_simple_interest,
    calc_simple_profit,
    calculate_assets_from_investment,
    calculate_investment,
    calculate_net_sale_proceeds,
    calculate_partial_return,
    calculate_price_per_asset,
    calculate_profit,
    calculate_remaining_investment,
    calculate_return_percentage,
    calculate_roi,
    round_money,
    round_percent,
)

__version__ = "0.1.0"

__all__ = [
    "calculate_roi",
    "calculate_partial_return",
    "calculate_return_percentage",
    "calculate_investment",
    "calculate_assets_from_investment",
    "calculate_price_per_asset",
    "calculate_net_sale_proceeds",
    "calculate_profit",
    "calculate_remaining_investment",
    "calc_simple_interest",
    "calc_simple_profit",
    "round_money",
    "round_percent",
    "InvestoError",
    "InvalidArgumentError",
]
