"""Exact rational arithmetic helpers.

Every amount that ends up in calldata must reproduce the integer-division
truncation the router contract performs on-chain, so all intermediate values
are kept as ``fractions.Fraction`` and only converted to integers through
``quotient()``. Floats are refused at the boundary.

Usage:
    from router_sdk.math import as_fraction, quotient, to_hex

    slippage_adjusted = 1 / (1 + as_fraction("1/200"))
    amount_min = quotient(slippage_adjusted * 1_000_000)
    to_hex(amount_min)  # "0xf2c2c"
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from numbers import Rational

ONE = Fraction(1)


def as_fraction(value: object) -> Fraction:
    """Convert a value to an exact Fraction.

    Args:
        value: Fraction, int, Decimal, a string accepted by Fraction
            ("1/200", "0.005", "42"), or any object exposing an
            ``as_fraction`` attribute (e.g. CurrencyAmount)

    Returns:
        Exact Fraction

    Raises:
        TypeError: If value is a float, bool, or unsupported type
        ValueError: If a string cannot be parsed
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a rational amount")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (int, Rational)):
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Non-finite decimal: {value}")
        return Fraction(value)
    if isinstance(value, str):
        return Fraction(value.strip())
    if isinstance(value, float):
        raise TypeError(f"Refusing float {value!r}: use int, Decimal, Fraction or str")
    converted = getattr(value, "as_fraction", None)
    if isinstance(converted, Fraction):
        return converted
    raise TypeError(f"Cannot convert {type(value).__name__} to Fraction")


def quotient(value: object) -> int:
    """Truncating integer part of a rational (rounds toward zero).

    Matches Solidity integer division for the non-negative values the
    router deals with, and JSBI-style truncation for negative ones.

    Raises:
        ZeroDivisionError: Never for a Fraction; raised upstream on x/0
    """
    frac = as_fraction(value)
    num, den = frac.numerator, frac.denominator
    if num >= 0:
        return num // den
    return -((-num) // den)


def to_hex(value: int) -> str:
    """Serialize a non-negative integer as 0x-prefixed lowercase hex.

    Zero serializes as "0x0".

    Raises:
        ValueError: If value is negative
        TypeError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"to_hex requires int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Cannot hex-encode negative amount: {value}")
    return f"0x{value:x}"


def slippage_adjusted(allowed_slippage: object) -> Fraction:
    """Return 1 / (1 + allowed_slippage)."""
    return (ONE + as_fraction(allowed_slippage)) ** -1


__all__ = [
    "ONE",
    "as_fraction",
    "quotient",
    "to_hex",
    "slippage_adjusted",
]
