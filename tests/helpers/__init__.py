"""Test helpers module for shared test utilities.

- constants: Tokens, recipient and the fixed clock value
- factories: Pair and option factory functions
"""

from tests.helpers.constants import (
    ETHER,
    NOW,
    RECIPIENT,
    TOKEN0,
    TOKEN1,
    TOKEN2,
    TOKEN_HIGH,
    USDC,
    USDC_ADDRESS,
    USDC_WETH_PAIR_ADDRESS,
    WETH,
)
from tests.helpers.factories import make_options, make_pair

__all__ = [
    # Constants
    "ETHER",
    "NOW",
    "RECIPIENT",
    "TOKEN0",
    "TOKEN1",
    "TOKEN2",
    "TOKEN_HIGH",
    "USDC",
    "USDC_ADDRESS",
    "USDC_WETH_PAIR_ADDRESS",
    "WETH",
    # Factories
    "make_options",
    "make_pair",
]
