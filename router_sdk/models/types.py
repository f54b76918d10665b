"""Shared type definitions for router models.

These types are used by the trade options and entity models.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Annotated, Any

from eth_utils import is_address, to_checksum_address
from pydantic import BeforeValidator, Field

from router_sdk.errors import InvalidAddress
from router_sdk.math.rational import as_fraction


def validate_slippage(value: Any) -> Fraction:
    """Validate a slippage tolerance as an exact rational in [0, 1).

    Args:
        value: Fraction, int, Decimal or string ("1/200", "0.005")

    Returns:
        Slippage as Fraction

    Raises:
        ValueError: If value is a float, unparseable, or outside [0, 1)
    """
    try:
        slippage = as_fraction(value)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Invalid slippage tolerance: {value!r} ({err})") from err

    if slippage < 0 or slippage >= 1:
        raise ValueError(f"Slippage tolerance must be in [0, 1): {slippage}")
    return slippage


# Slippage tolerance as an exact rational in [0, 1)
Slippage = Annotated[
    Fraction,
    BeforeValidator(validate_slippage),
    Field(description="Allowed slippage as an exact fraction in [0, 1)"),
]


def is_valid_address(address: str) -> bool:
    """Check if a string is a syntactically valid Ethereum address.

    Mixed-case input must carry a valid EIP-55 checksum.
    """
    if not isinstance(address, str):
        return False
    return bool(is_address(address))


def validate_and_parse_address(address: str) -> str:
    """Validate an address and return its EIP-55 checksummed form.

    Raises:
        InvalidAddress: If the address is malformed or fails its checksum
    """
    if not is_valid_address(address):
        raise InvalidAddress(message=f"{address!r} is not a valid address.")
    return to_checksum_address(address)
