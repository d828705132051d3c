"""Investment formulas.

Pure functions for ROI, buy/sell/profit and simple interest.
No database access or I/O.

Usage:
    from investo.core.finance import calculate_roi, calc_simple_interest
"""

from .base import (
    calculate_assets_from_investment,
    calculate_investment,
    calculate_net_sale_proceeds,
    calculate_price_per_asset,
    calculate_profit,
    calculate_remaining_investment,
)
from .roi import (
    calculate_partial_return,
    calculate_return_percentage,
    calculate_roi,
)
from .rounding import round_money, round_percent
from .simple_interest import calc_simple_interest, calc_simple_profit

__all__ = [
    # roi
    "calculate_roi",
    "calculate_partial_return",
    "calculate_return_percentage",
    # base
    "calculate_investment",
    "calculate_assets_from_investment",
    "calculate_price_per_asset",
    "calculate_net_sale_proceeds",
    "calculate_profit",
    "calculate_remaining_investment",
    # simple_interest
    "calc_simple_interest",
    "calc_simple_profit",
    # rounding
    "round_money",
    "round_percent",
]
