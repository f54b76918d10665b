"""Per-chain protocol constants.

Centralizes factory addresses, pair init code hashes, trade fees and the
wrapped native token of each supported chain. Addresses are validated at
import time to catch typos early.
"""

import re

from router_sdk.chains import ChainId

_HEX_ADDRESS = re.compile(r"^0x[a-fA-F0-9]{40}$")


def _validate_address(name: str, address: str) -> str:
    """Validate a constant address and return it lowercased.

    Only the format is checked; checksums are applied where tokens are built.

    Raises:
        ValueError: If the address is invalid
    """
    if not _HEX_ADDRESS.match(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address.lower()


def _validated_map(name: str, mapping: dict[int, str]) -> dict[int, str]:
    return {chain: _validate_address(f"{name}[{chain}]", addr) for chain, addr in mapping.items()}


# Default (mainnet) V2 factory
FACTORY_ADDRESS = _validate_address("FACTORY", "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f")

FACTORY_ADDRESS_MAP: dict[int, str] = _validated_map(
    "FACTORY_ADDRESS_MAP",
    {
        ChainId.MAINNET: "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",
        ChainId.GOERLI: "0x5C69bEe701ef814a2B6a3EDD4B1652CB9cc5aA6f",
        ChainId.SEPOLIA: "0xB7f907f7A9eBC822a80BD25E224be42Ce0A698A0",
        ChainId.OPTIMISM: "0x0c3c1c532F1e39EdF36BE9Fe0bE1410313E074Bf",
        ChainId.ARBITRUM_ONE: "0xf1D7CC64Fb4452F05c498126312eBE29f30Fbcf9",
        ChainId.AVALANCHE: "0x9e5A52f57b3038F1B8EeE45F28b3C1967e22799C",
        ChainId.BASE: "0x8909dc15e40173ff4699343b6eb8132c65e18ec6",
        ChainId.BNB: "0x8909Dc15e40173Ff4699343b6eB8132c65e18eC6",
        ChainId.POLYGON: "0x9e5A52f57b3038F1B8EeE45F28b3C1967e22799C",
        ChainId.CELO: "0x79a530c8e2fA8748B7B40dd3629C0520c2cCf03f",
        ChainId.BLAST: "0x5C346464d33F90bABaf70dB6388507CC889C1070",
        ChainId.BEVM: "0xAdEFa8CFD0655e319559c482c1443Cc6fa804C1F",
        ChainId.BEVM_CANARY_TESTNET: "0x1045D426488B359592864D3BDC3a64ebEBcDdf96",
        ChainId.BITLAYER_TESTNET: "0x57e0e352a82928a28ce453d9a9fa005a9922aa49",
    },
)

# Keccak of the pair creation code (used for CREATE2 pair addresses)
INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"

_BEVMSWAP_INIT_CODE_HASH = "0xa1d96c4e569a8fba6c4ad8d633250547339e9fb98e185d256480ed16c528c9e2"

INIT_CODE_HASH_MAP: dict[int, str] = {
    ChainId.BEVM: _BEVMSWAP_INIT_CODE_HASH,
    ChainId.BEVM_CANARY_TESTNET: _BEVMSWAP_INIT_CODE_HASH,
    ChainId.BITLAYER_TESTNET: _BEVMSWAP_INIT_CODE_HASH,
}

# Liquidity permanently locked by the first mint
MINIMUM_LIQUIDITY = 1000

# Fee multipliers out of FEE_DENOMINATOR (9970 = 0.3% fee)
FEE_DENOMINATOR = 10_000
TRADE_FEE = 9970

TRADE_FEE_MAP: dict[int, int] = {
    # bevmswap: 0.4%
    ChainId.BEVM: 9960,
    ChainId.BEVM_CANARY_TESTNET: 9960,
    ChainId.BITLAYER_TESTNET: 9960,
}

# Wrapped native currency per chain
WRAPPED_NATIVE_MAP: dict[int, tuple[str, str]] = {
    ChainId.MAINNET: (_validate_address("WETH", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"), "WETH"),
    ChainId.GOERLI: (_validate_address("WETH", "0xB4FBF271143F4FBf7B91A5ded31805e42b2208d6"), "WETH"),
    ChainId.SEPOLIA: (_validate_address("WETH", "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14"), "WETH"),
    ChainId.OPTIMISM: (_validate_address("WETH", "0x4200000000000000000000000000000000000006"), "WETH"),
    ChainId.BASE: (_validate_address("WETH", "0x4200000000000000000000000000000000000006"), "WETH"),
    ChainId.ARBITRUM_ONE: (_validate_address("WETH", "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1"), "WETH"),
    ChainId.POLYGON: (_validate_address("WMATIC", "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270"), "WMATIC"),
    ChainId.BNB: (_validate_address("WBNB", "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"), "WBNB"),
    ChainId.AVALANCHE: (_validate_address("WAVAX", "0xB31f66AA3C1e785363F0875A1B74E27b85FD66c7"), "WAVAX"),
}

UINT256_MAX = 2**256 - 1

# Hex serialization of a zero amount
ZERO_HEX = "0x0"


def factory_address(chain_id: int) -> str:
    """Factory address for a chain, falling back to the mainnet factory."""
    return FACTORY_ADDRESS_MAP.get(chain_id, FACTORY_ADDRESS)


def init_code_hash(chain_id: int) -> str:
    """Pair init code hash for a chain, falling back to the default hash."""
    return INIT_CODE_HASH_MAP.get(chain_id, INIT_CODE_HASH)


def trade_fee(chain_id: int) -> int:
    """Fee multiplier (out of FEE_DENOMINATOR) for a chain."""
    return TRADE_FEE_MAP.get(chain_id, TRADE_FEE)
