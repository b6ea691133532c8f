"""
Numeric Value Primitives

Integers are drawn as Python ints so ranges beyond 64 bits keep their
full precision; decimals are built from an integer digit string so the
scale is exact.
"""

from decimal import Decimal

from .base import RandomSource


def int_range(source: RandomSource, low: int, high: int) -> int:
    """
    Uniform integer in the inclusive range [low, high]

    Args:
        source: Random source
        low: Lower bound (any size)
        high: Upper bound (any size)

    Returns:
        Python int
    """
    low, high = int(low), int(high)
    if low > high:
        raise ValueError(f"empty integer range: min {low} is greater than max {high}")
    return low + source.below(high - low + 1)


def decimal_value(source: RandomSource, precision: int, scale: int) -> Decimal:
    """
    Signed decimal with at most ``precision`` significant digits and
    exactly ``scale`` digits after the decimal point

    Args:
        source: Random source
        precision: Total number of digits
        scale: Digits after the decimal point

    Returns:
        decimal.Decimal, e.g. ``Decimal('-123.40')`` for (5, 2)
    """
    if precision < 1 or not 0 <= scale <= precision:
        raise ValueError(f"invalid decimal shape ({precision},{scale})")

    limit = 10 ** precision
    unscaled = source.below(2 * limit - 1) - (limit - 1)
    # Built from a tuple so no context precision or rounding applies
    digits = tuple(int(d) for d in str(abs(unscaled)))
    return Decimal((1 if unscaled < 0 else 0, digits, -scale))
