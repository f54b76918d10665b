"""ABI calldata encoding for V2 router calls.

Turns a SwapParameters triple into the transaction data a wallet or driver
submits: the 4-byte method selector followed by the eth-abi encoded
arguments.
"""

from __future__ import annotations

from eth_abi import encode  # type: ignore[attr-defined]
from eth_utils import function_signature_to_4byte_selector

from router_sdk.errors import InvariantViolation
from router_sdk.router import FEE_ON_TRANSFER_SUFFIX, SwapParameters

_SWAP_EXACT_IN = ("uint256", "uint256", "address[]", "address", "uint256")
_SWAP_EXACT_ETH_IN = ("uint256", "address[]", "address", "uint256")

# Router methods and their ABI input types
ROUTER_METHOD_SIGNATURES: dict[str, tuple[str, ...]] = {
    "swapExactETHForTokens": _SWAP_EXACT_ETH_IN,
    "swapExactETHForTokens" + FEE_ON_TRANSFER_SUFFIX: _SWAP_EXACT_ETH_IN,
    "swapExactTokensForETH": _SWAP_EXACT_IN,
    "swapExactTokensForETH" + FEE_ON_TRANSFER_SUFFIX: _SWAP_EXACT_IN,
    "swapExactTokensForTokens": _SWAP_EXACT_IN,
    "swapExactTokensForTokens" + FEE_ON_TRANSFER_SUFFIX: _SWAP_EXACT_IN,
    "swapETHForExactTokens": _SWAP_EXACT_ETH_IN,
    "swapTokensForExactETH": _SWAP_EXACT_IN,
    "swapTokensForExactTokens": _SWAP_EXACT_IN,
    "addLiquidity": (
        "address",
        "address",
        "uint256",
        "uint256",
        "uint256",
        "uint256",
        "address",
        "uint256",
    ),
    "addLiquidityETH": ("address", "uint256", "uint256", "uint256", "address", "uint256"),
    "removeLiquidity": ("address", "address", "uint256", "uint256", "uint256", "address", "uint256"),
    "removeLiquidityETH": ("address", "uint256", "uint256", "uint256", "address", "uint256"),
}


def _signature(method_name: str) -> tuple[str, ...]:
    try:
        return ROUTER_METHOD_SIGNATURES[method_name]
    except KeyError as err:
        raise InvariantViolation("METHOD", f"Unknown router method: {method_name}") from err


def method_selector(method_name: str) -> str:
    """4-byte selector of a router method as 0x-prefixed hex.

    Raises:
        InvariantViolation: If the method is not a known router method
    """
    types = _signature(method_name)
    selector = function_signature_to_4byte_selector(f"{method_name}({','.join(types)})")
    return "0x" + selector.hex()


def _abi_value(abi_type: str, arg: str | tuple[str, ...]) -> object:
    if abi_type == "address[]":
        return list(arg)
    if isinstance(arg, tuple):
        raise InvariantViolation("ARGS", f"Unexpected sequence for {abi_type}")
    if abi_type == "address":
        # checksummed strings are accepted as is
        return arg
    return int(arg, 16)


def encode_call_parameters(params: SwapParameters) -> str:
    """Encode call parameters as router calldata.

    Args:
        params: Output of one of the router encoding operations

    Returns:
        0x-prefixed calldata (selector + encoded arguments)

    Raises:
        InvariantViolation: If the method is unknown or the argument count
            does not match its signature
    """
    types = _signature(params.method_name)
    if len(types) != len(params.args):
        raise InvariantViolation(
            "ARGS",
            f"{params.method_name} takes {len(types)} arguments, got {len(params.args)}",
        )

    values = [_abi_value(abi_type, arg) for abi_type, arg in zip(types, params.args)]
    encoded_args = encode(list(types), values)
    return method_selector(params.method_name) + encoded_args.hex()


__all__ = ["ROUTER_METHOD_SIGNATURES", "method_selector", "encode_call_parameters"]
