"""Input coercion, domain checks and the decimal context shared by the formulas."""

import decimal
import functools
import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from ..exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]

#: Precision every formula computes with, whatever the caller's context says
FORMULA_PRECISION = 28

FORMULA_CONTEXT = decimal.Context(
    prec=FORMULA_PRECISION,
    rounding=decimal.ROUND_HALF_EVEN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


def fixed_context(func):
    """Run *func* under FORMULA_CONTEXT instead of the thread's current context."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with decimal.localcontext(FORMULA_CONTEXT):
            return func(*args, **kwargs)

    return wrapper


def to_decimal(value: Number, name: str = "value") -> Decimal:
    """Coerce a numeric input to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than the
    binary approximation.

    Args:
        value: Decimal, int, float or numeric string.
        name: Argument name used in the error message.

    Returns:
        The value as a finite Decimal.

    Raises:
        InvalidArgumentError: bool, None, non-numeric or non-finite input.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool) or not isinstance(value, (int, float, str)):
        logger.debug("Rejected %s=%r: unsupported type %s", name, value, type(value).__name__)
        raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}")
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            logger.debug("Rejected %s=%r: not numeric", name, value)
            raise InvalidArgumentError(f"{name} must be a number, got {value!r}") from None
    if not result.is_finite():
        logger.debug("Rejected %s=%r: not finite", name, value)
        raise InvalidArgumentError(f"{name} must be finite, got {value!r}")
    return result


def require(condition: bool, message: str) -> None:
    """Raise InvalidArgumentError with *message* unless *condition* holds."""
    if not condition:
        logger.debug("Rejected input: %s", message)
        raise InvalidArgumentError(message)
