"""Tests for routes and trades."""

from fractions import Fraction

import pytest

from router_sdk import CurrencyAmount, InvariantViolation, Route, Trade, TradeType
from tests.helpers import ETHER, TOKEN0, TOKEN1, TOKEN2, WETH, make_pair


class TestRoute:
    """Tests for route construction."""

    def test_path_through_pairs(self, pair_0_1, pair_weth_0):
        route = Route([pair_weth_0, pair_0_1], ETHER, TOKEN1)
        assert route.path == (WETH, TOKEN0, TOKEN1)
        assert route.input == ETHER
        assert route.output == TOKEN1

    def test_empty_route_rejected(self):
        with pytest.raises(InvariantViolation) as exc_info:
            Route([], TOKEN0, TOKEN1)
        assert exc_info.value.tag == "PAIRS"

    def test_input_not_in_first_pair(self, pair_0_1):
        with pytest.raises(InvariantViolation) as exc_info:
            Route([pair_0_1], TOKEN2, TOKEN1)
        assert exc_info.value.tag == "INPUT"

    def test_output_not_in_last_pair(self, pair_0_1):
        with pytest.raises(InvariantViolation) as exc_info:
            Route([pair_0_1], TOKEN0, WETH)
        assert exc_info.value.tag == "OUTPUT"

    def test_disconnected_pairs(self, pair_0_1):
        pair_2_weth = make_pair(1000, 1000, TOKEN2, WETH)
        with pytest.raises(InvariantViolation) as exc_info:
            Route([pair_0_1, pair_2_weth], TOKEN0, WETH)
        assert exc_info.value.tag == "PATH"


class TestTrade:
    """Tests for exact-input and exact-output trades."""

    def test_exact_input_amounts(self, pair_0_1, pair_weth_0):
        route = Route([pair_weth_0, pair_0_1], ETHER, TOKEN1)
        trade = Trade.exact_in(route, CurrencyAmount(ETHER, 100))
        assert trade.trade_type == TradeType.EXACT_INPUT
        assert trade.input_amount == CurrencyAmount(ETHER, 100)
        # 100 -> 90 -> 82
        assert trade.output_amount == CurrencyAmount(TOKEN1, 82)

    def test_exact_output_amounts(self, pair_0_1, pair_weth_0):
        route = Route([pair_weth_0, pair_0_1], ETHER, TOKEN1)
        trade = Trade.exact_out(route, CurrencyAmount(TOKEN1, 100))
        assert trade.trade_type == TradeType.EXACT_OUTPUT
        # 100 <- 112 <- 127
        assert trade.input_amount == CurrencyAmount(ETHER, 127)
        assert trade.output_amount == CurrencyAmount(TOKEN1, 100)

    def test_amount_currency_must_match_route(self, pair_0_1):
        route = Route([pair_0_1], TOKEN0, TOKEN1)
        with pytest.raises(InvariantViolation):
            Trade.exact_in(route, CurrencyAmount(TOKEN1, 100))
        with pytest.raises(InvariantViolation):
            Trade.exact_out(route, CurrencyAmount(TOKEN0, 100))

    def test_minimum_amount_out_exact_input(self, pair_0_1):
        """Exact input: output / (1 + slippage), truncated."""
        trade = Trade.exact_in(Route([pair_0_1], TOKEN0, TOKEN1), CurrencyAmount(TOKEN0, 100))
        assert trade.output_amount.quotient == 90
        assert trade.minimum_amount_out(Fraction(1, 100)).quotient == 89
        assert trade.minimum_amount_out(0).quotient == 90

    def test_maximum_amount_in_exact_input_is_fixed(self, pair_0_1):
        trade = Trade.exact_in(Route([pair_0_1], TOKEN0, TOKEN1), CurrencyAmount(TOKEN0, 100))
        assert trade.maximum_amount_in(Fraction(1, 2)).quotient == 100

    def test_maximum_amount_in_exact_output(self, pair_0_1):
        """Exact output: input * (1 + slippage), truncated."""
        trade = Trade.exact_out(Route([pair_0_1], TOKEN0, TOKEN1), CurrencyAmount(TOKEN1, 100))
        assert trade.input_amount.quotient == 112
        assert trade.maximum_amount_in(Fraction(1, 100)).quotient == 113
        assert trade.minimum_amount_out(Fraction(1, 2)).quotient == 100

    def test_negative_slippage_rejected(self, pair_0_1):
        trade = Trade.exact_in(Route([pair_0_1], TOKEN0, TOKEN1), CurrencyAmount(TOKEN0, 100))
        with pytest.raises(InvariantViolation) as exc_info:
            trade.minimum_amount_out(Fraction(-1, 100))
        assert exc_info.value.tag == "SLIPPAGE_TOLERANCE"
