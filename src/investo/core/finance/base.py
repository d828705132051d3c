"""Buy, sell and profit formulas for a single position.

Two kinds of failure are distinguished:
  - A negative quantity, price, fee or investment (or a zero divisor) is a
    caller error and raises InvalidArgumentError.
  - A fee or withdrawal larger than the amount it is subtracted from is a
    valid real-world outcome and floors the result at 0.
"""

from decimal import Decimal

from .validation import Number, fixed_context, require, to_decimal

ZERO = Decimal("0")


@fixed_context
def calculate_investment(
    amount: Number,
    price_per_asset: Number,
    fee: Number = 0,
) -> Decimal:
    """Calculate the total cost of buying assets.

    Formula: investment = amount × price_per_asset + fee

    Args:
        amount: Number of assets bought, ≥ 0.
        price_per_asset: Price of one asset, ≥ 0.
        fee: Transaction fee, ≥ 0 (default 0).

    Raises:
        InvalidArgumentError: any input is negative.

    Examples:
        amount=10, price_per_asset=100, fee=5 → 1005
    """
    amount = to_decimal(amount, "amount")
    price_per_asset = to_decimal(price_per_asset, "price_per_asset")
    fee = to_decimal(fee, "fee")
    require(
        amount >= 0 and price_per_asset >= 0 and fee >= 0,
        "amount, price_per_asset and fee must be ≥ 0",
    )
    return amount * price_per_asset + fee


@fixed_context
def calculate_assets_from_investment(
    investment: Number,
    price_per_asset: Number,
    fee: Number = 0,
) -> Decimal:
    """Calculate how many assets an investment buys after the fee.

    Formula: assets = (investment - fee) / price_per_asset

    A fee larger than the investment buys nothing: returns 0.

    Args:
        investment: Money available, ≥ 0.
        price_per_asset: Price of one asset, > 0.
        fee: Transaction fee, ≥ 0 (default 0).

    Raises:
        InvalidArgumentError: investment < 0, price_per_asset <= 0 or fee < 0.

    Examples:
        investment=1000, price_per_asset=100, fee=50  → 9.5
        investment=100,  price_per_asset=10,  fee=150 → 0
    """
    investment = to_decimal(investment, "investment")
    price_per_asset = to_decimal(price_per_asset, "price_per_asset")
    fee = to_decimal(fee, "fee")
    require(
        investment >= 0 and price_per_asset > 0 and fee >= 0,
        "investment and fee must be ≥ 0, price_per_asset must be > 0",
    )
    net_investment = investment - fee
    if net_investment < 0:
        return ZERO
    return net_investment / price_per_asset


@fixed_context
def calculate_price_per_asset(
    investment: Number,
    amount: Number,
    fee: Number = 0,
) -> Decimal:
    """Calculate the effective price paid per asset after the fee.

    Formula: price = (investment - fee) / amount

    Returns 0 when the fee exceeds the investment.

    Raises:
        InvalidArgumentError: investment < 0, amount <= 0 or fee < 0.

    Examples:
        investment=1050, amount=10, fee=50 → 100
    """
    investment = to_decimal(investment, "investment")
    amount = to_decimal(amount, "amount")
    fee = to_decimal(fee, "fee")
    require(
        investment >= 0 and amount > 0 and fee >= 0,
        "investment and fee must be ≥ 0, amount must be > 0",
    )
    net_investment = investment - fee
    if net_investment < 0:
        return ZERO
    return net_investment / amount


@fixed_context
def calculate_net_sale_proceeds(amount: Number, price: Number, fee: Number = 0) -> Decimal:
    """Calculate what a sale yields after the transaction fee.

    Formula: proceeds = max(amount × price - fee, 0)

    Raises:
        InvalidArgumentError: any input is negative.

    Examples:
        amount=10, price=50, fee=20 → 480
        amount=1,  price=10, fee=15 → 0   (fee exceeds gross)
    """
    amount = to_decimal(amount, "amount")
    price = to_decimal(price, "price")
    fee = to_decimal(fee, "fee")
    require(
        amount >= 0 and price >= 0 and fee >= 0,
        "amount, price and fee must be ≥ 0",
    )
    net = amount * price - fee
    return net if net >= 0 else ZERO


@fixed_context
def calculate_profit(sale_proceeds: Number, investment: Number) -> Decimal:
    """Calculate profit (negative = loss) of a closed position.

    Not floored: a loss is reported as a negative number.

    Raises:
        InvalidArgumentError: either input is negative.
    """
    sale_proceeds = to_decimal(sale_proceeds, "sale_proceeds")
    investment = to_decimal(investment, "investment")
    require(
        sale_proceeds >= 0 and investment >= 0,
        "sale_proceeds and investment must be ≥ 0",
    )
    return sale_proceeds - investment


@fixed_context
def calculate_remaining_investment(
    initial_investment: Number,
    withdrawn_amount: Number,
) -> Decimal:
    """Calculate the investment left after a partial withdrawal, floored at 0.

    Raises:
        InvalidArgumentError: either input is negative.

    Examples:
        initial_investment=10000, withdrawn_amount=4000  → 6000
        initial_investment=1000,  withdrawn_amount=1500  → 0
    """
    initial_investment = to_decimal(initial_investment, "initial_investment")
    withdrawn_amount = to_decimal(withdrawn_amount, "withdrawn_amount")
    require(
        initial_investment >= 0 and withdrawn_amount >= 0,
        "initial_investment and withdrawn_amount must be ≥ 0",
    )
    remaining = initial_investment - withdrawn_amount
    return remaining if remaining >= 0 else ZERO
