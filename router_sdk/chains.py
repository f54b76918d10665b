"""Chain identifiers for networks with a deployed V2 factory."""

from enum import IntEnum


class ChainId(IntEnum):
    """EIP-155 chain ids."""

    MAINNET = 1
    GOERLI = 5
    SEPOLIA = 11155111
    OPTIMISM = 10
    ARBITRUM_ONE = 42161
    AVALANCHE = 43114
    BASE = 8453
    BNB = 56
    POLYGON = 137
    CELO = 42220
    BLAST = 81457

    # bevmswap forks
    BEVM = 11501
    BEVM_CANARY_TESTNET = 1501
    BITLAYER_TESTNET = 200810


__all__ = ["ChainId"]
