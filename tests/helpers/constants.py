"""Shared token constants for tests.

Test tokens use low addresses so that their checksummed form equals the
literal and token ordering is obvious (TOKEN0 < TOKEN1 < TOKEN2 < WETH).

Usage:
    from tests.helpers import TOKEN0, TOKEN1, WETH, ETHER
"""

from router_sdk import ChainId, NativeCurrency, Token

# =============================================================================
# Synthetic tokens (mainnet chain id)
# =============================================================================

TOKEN0 = Token(ChainId.MAINNET, "0x0000000000000000000000000000000000000001", 18, "t0")
TOKEN1 = Token(ChainId.MAINNET, "0x0000000000000000000000000000000000000002", 18, "t1")
TOKEN2 = Token(ChainId.MAINNET, "0x0000000000000000000000000000000000000003", 18, "t2")

# Sorts after WETH (0xc02a...)
TOKEN_HIGH = Token(ChainId.MAINNET, "0x" + "f" * 40, 18, "high")

# =============================================================================
# Native currency
# =============================================================================

ETHER = NativeCurrency(ChainId.MAINNET)
WETH = ETHER.wrapped

# =============================================================================
# Real mainnet tokens (lowercase)
# =============================================================================

USDC_ADDRESS = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
USDC = Token(ChainId.MAINNET, USDC_ADDRESS, 6, "USDC")

# Deployed V2 USDC/WETH pair
USDC_WETH_PAIR_ADDRESS = "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"

# =============================================================================
# Call options
# =============================================================================

RECIPIENT = "0x0000000000000000000000000000000000000004"

# Fixed clock used by the router fixture
NOW = 1_700_000_000
