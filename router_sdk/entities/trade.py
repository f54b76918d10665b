"""Trades along a fixed route.

A trade is either exact-input (the input amount is fixed and the output is
computed through the pairs) or exact-output (the output is fixed and the
required input is computed backwards). Route discovery is left to callers.
"""

from __future__ import annotations

from enum import IntEnum
from fractions import Fraction

from router_sdk.entities.currency import CurrencyAmount
from router_sdk.entities.route import Route
from router_sdk.errors import InvariantViolation
from router_sdk.math.rational import ONE, as_fraction, quotient


class TradeType(IntEnum):
    """Which side of the trade is fixed."""

    EXACT_INPUT = 0
    EXACT_OUTPUT = 1


def _validated_slippage(slippage_tolerance: object) -> Fraction:
    slippage = as_fraction(slippage_tolerance)
    if slippage < 0:
        raise InvariantViolation("SLIPPAGE_TOLERANCE", f"Negative slippage: {slippage}")
    return slippage


class Trade:
    """A trade of a fixed amount along a route.

    Attributes:
        route: Route the trade executes on
        trade_type: EXACT_INPUT or EXACT_OUTPUT
        input_amount: Amount of route.input spent (before slippage)
        output_amount: Amount of route.output received (before slippage)
    """

    def __init__(self, route: Route, amount: CurrencyAmount, trade_type: TradeType) -> None:
        self.route = route
        self.trade_type = trade_type

        if trade_type == TradeType.EXACT_INPUT:
            if amount.currency != route.input:
                raise InvariantViolation("INPUT", "Amount is not in the route input currency")
            current = amount.wrapped
            for pair in route.pairs:
                current, _ = pair.get_output_amount(current)
            self.input_amount = CurrencyAmount(route.input, amount.quotient)
            self.output_amount = CurrencyAmount(route.output, current.quotient)
        else:
            if amount.currency != route.output:
                raise InvariantViolation("OUTPUT", "Amount is not in the route output currency")
            current = amount.wrapped
            for pair in reversed(route.pairs):
                current, _ = pair.get_input_amount(current)
            self.input_amount = CurrencyAmount(route.input, current.quotient)
            self.output_amount = CurrencyAmount(route.output, amount.quotient)

    @classmethod
    def exact_in(cls, route: Route, amount_in: CurrencyAmount) -> Trade:
        return cls(route, amount_in, TradeType.EXACT_INPUT)

    @classmethod
    def exact_out(cls, route: Route, amount_out: CurrencyAmount) -> Trade:
        return cls(route, amount_out, TradeType.EXACT_OUTPUT)

    def minimum_amount_out(self, slippage_tolerance: object) -> CurrencyAmount:
        """Minimum output to accept for the given slippage tolerance.

        For exact-output trades this is the fixed output. For exact-input
        trades it is output / (1 + slippage), truncated.

        Raises:
            InvariantViolation: If slippage is negative
        """
        slippage = _validated_slippage(slippage_tolerance)
        if self.trade_type == TradeType.EXACT_OUTPUT:
            return self.output_amount
        adjusted = quotient((ONE + slippage) ** -1 * self.output_amount.quotient)
        return CurrencyAmount(self.output_amount.currency, adjusted)

    def maximum_amount_in(self, slippage_tolerance: object) -> CurrencyAmount:
        """Maximum input to spend for the given slippage tolerance.

        For exact-input trades this is the fixed input. For exact-output
        trades it is input * (1 + slippage), truncated.

        Raises:
            InvariantViolation: If slippage is negative
        """
        slippage = _validated_slippage(slippage_tolerance)
        if self.trade_type == TradeType.EXACT_INPUT:
            return self.input_amount
        adjusted = quotient((ONE + slippage) * self.input_amount.quotient)
        return CurrencyAmount(self.input_amount.currency, adjusted)

    def __repr__(self) -> str:
        return (
            f"Trade({self.trade_type.name}, in={self.input_amount.quotient}, "
            f"out={self.output_amount.quotient}, {self.route!r})"
        )


__all__ = ["Trade", "TradeType"]
