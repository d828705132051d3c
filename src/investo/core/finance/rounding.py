"""Display rounding for formula results.

The formulas return unrounded Decimals; callers quantize once, at the edge.
Defaults: 2 places, ROUND_HALF_EVEN (the decimal module's default mode).
"""

import decimal
from decimal import Decimal

from .validation import FORMULA_CONTEXT, Number, require, to_decimal

MONEY_PLACES = 2
PERCENT_PLACES = 2
DEFAULT_ROUNDING = decimal.ROUND_HALF_EVEN

ROUNDING_MODES = frozenset(
    name for name in dir(decimal) if name.startswith("ROUND_")
)


def _quantize(value: Number, places: int, rounding: str) -> Decimal:
    require(
        isinstance(places, int) and not isinstance(places, bool) and places >= 0,
        "places must be an int ≥ 0",
    )
    require(rounding in ROUNDING_MODES, f"unknown rounding mode {rounding!r}")
    value = to_decimal(value)
    # Enough digits for every integer digit plus the requested places
    with decimal.localcontext(FORMULA_CONTEXT) as ctx:
        ctx.prec = max(value.adjusted(), 0) + places + 2
        exponent = Decimal(1).scaleb(-places)
        return value.quantize(exponent, rounding=rounding)


def round_money(
    value: Number,
    places: int = MONEY_PLACES,
    rounding: str = DEFAULT_ROUNDING,
) -> Decimal:
    """Round a money amount, e.g. 9.4567 → Decimal("9.46")."""
    return _quantize(value, places, rounding)


def round_percent(
    value: Number,
    places: int = PERCENT_PLACES,
    rounding: str = DEFAULT_ROUNDING,
) -> Decimal:
    """Round a percentage, e.g. 33.3333 → Decimal("33.33")."""
    return _quantize(value, places, rounding)
