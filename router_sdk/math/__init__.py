"""Mathematical utilities for router encoding.

This package provides the exact rational primitive the encoder builds on:
- as_fraction: strict conversion to fractions.Fraction (no floats)
- quotient: truncating integer extraction
- to_hex: calldata serialization of amounts
"""

from router_sdk.math.rational import (
    ONE,
    as_fraction,
    quotient,
    slippage_adjusted,
    to_hex,
)

__all__ = ["ONE", "as_fraction", "quotient", "slippage_adjusted", "to_hex"]
