"""Tests for router calldata encoding."""

import pytest
from eth_abi import encode

from router_sdk import (
    CurrencyAmount,
    InvariantViolation,
    Route,
    SwapParameters,
    Trade,
    encode_call_parameters,
    method_selector,
)
from router_sdk.abi import ROUTER_METHOD_SIGNATURES
from router_sdk.router import FEE_ON_TRANSFER_SUFFIX, SWAP_METHODS
from tests.helpers import NOW, RECIPIENT, TOKEN0, TOKEN1, make_options, make_pair


class TestMethodSelector:
    """Selectors match the deployed router ABI."""

    @pytest.mark.parametrize(
        "method_name,selector",
        [
            ("swapExactTokensForTokens", "0x38ed1739"),
            ("swapTokensForExactTokens", "0x8803dbee"),
            ("swapExactETHForTokens", "0x7ff36ab5"),
            ("swapETHForExactTokens", "0xfb3bdb41"),
            ("swapExactTokensForETH", "0x18cbafe5"),
            ("swapTokensForExactETH", "0x4a25d94a"),
            ("swapExactTokensForTokensSupportingFeeOnTransferTokens", "0x5c11d795"),
            ("swapExactETHForTokensSupportingFeeOnTransferTokens", "0xb6f9de95"),
            ("swapExactTokensForETHSupportingFeeOnTransferTokens", "0x791ac947"),
            ("addLiquidity", "0xe8e33700"),
            ("addLiquidityETH", "0xf305d719"),
            ("removeLiquidity", "0xbaa2abde"),
            ("removeLiquidityETH", "0x02751cec"),
        ],
    )
    def test_known_selectors(self, method_name, selector):
        assert method_selector(method_name) == selector

    def test_unknown_method(self):
        with pytest.raises(InvariantViolation) as exc_info:
            method_selector("swapEverything")
        assert exc_info.value.tag == "METHOD"

    def test_every_swap_method_has_signature(self):
        for method in SWAP_METHODS.values():
            assert method.name in ROUTER_METHOD_SIGNATURES
            if method.supports_fee_on_transfer:
                assert method.name + FEE_ON_TRANSFER_SUFFIX in ROUTER_METHOD_SIGNATURES


class TestEncodeCallParameters:
    """Calldata is the selector followed by the ABI-encoded arguments."""

    def test_swap_exact_tokens_for_tokens(self, router):
        trade = Trade.exact_in(
            Route([make_pair(1000, 1000)], TOKEN0, TOKEN1), CurrencyAmount(TOKEN0, 100)
        )
        params = router.swap_call_parameters(trade, make_options())

        calldata = encode_call_parameters(params)

        expected_args = encode(
            ["uint256", "uint256", "address[]", "address", "uint256"],
            [100, 89, [TOKEN0.address, TOKEN1.address], RECIPIENT, NOW + 50],
        )
        assert calldata == "0x38ed1739" + expected_args.hex()

    def test_add_liquidity(self, router):
        params = router.add_call_parameters(
            make_pair(1000, 2000),
            CurrencyAmount(TOKEN0, 100),
            CurrencyAmount(TOKEN1, 200),
            make_options(deadline=99),
        )

        calldata = encode_call_parameters(params)

        assert calldata.startswith("0xe8e33700")
        # selector plus eight static words
        assert len(calldata) == 2 + 8 + 8 * 64
        assert calldata.endswith(f"{99:064x}")

    def test_wrong_arity(self):
        params = SwapParameters("addLiquidityETH", ("0x1",), "0x0")
        with pytest.raises(InvariantViolation) as exc_info:
            encode_call_parameters(params)
        assert exc_info.value.tag == "ARGS"

    def test_unknown_method(self):
        params = SwapParameters("drain", (), "0x0")
        with pytest.raises(InvariantViolation) as exc_info:
            encode_call_parameters(params)
        assert exc_info.value.tag == "METHOD"
