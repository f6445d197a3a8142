# utils/money.py
"""
Helpers for turning raw storefront amounts into numbers and back into text.

Rounding rule used everywhere in the shop summary:
    half away from zero, applied to the shortest decimal form of the float.
    round_money(0.125) -> 0.13, round_money(2.675) -> 2.68
Python's built-in round() is half-to-even on the binary value and would give
0.12 and 2.67 for the same inputs.
Non-finite values (inf from an overflowing saving) pass through unrounded.
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

CENTS = Decimal("0.01")


def to_amount(value, default: float = 0.0) -> float:
    # Parse a raw amount ("18.00", 18, Decimal("18")) into a float.
    # Missing, blank, unparseable or non-finite values give `default`.
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return default
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(amount):
        return default
    return amount


def round_money(value: float) -> float:
    # Round to 2 decimal places, half away from zero.
    # inf and nan (e.g. an overflowed saving) are returned unchanged.
    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # room for every integer digit plus the two cents digits
        ctx.prec = max(28, exact.adjusted() + 3)
        return float(exact.quantize(CENTS, rounding=ROUND_HALF_UP))


def format_currency(value: float, symbol: str = "$") -> str:
    # 14 -> "$14.00"
    return f"{symbol}{round_money(value):.2f}"
