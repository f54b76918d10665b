"""An ordered list of pairs connecting an input currency to an output currency."""

from __future__ import annotations

from collections.abc import Sequence

from router_sdk.entities.currency import Currency, Token
from router_sdk.entities.pair import Pair
from router_sdk.errors import InvariantViolation


class Route:
    """A path through one or more pairs.

    The input and output may be native currencies; the path itself is always
    expressed in tokens (the native currency is replaced by its wrapped token).

    Attributes:
        pairs: Pairs in swap order
        input: Currency entering the route
        output: Currency leaving the route
        path: Tokens visited, starting with the (wrapped) input
    """

    def __init__(self, pairs: Sequence[Pair], input: Currency, output: Currency) -> None:
        if len(pairs) == 0:
            raise InvariantViolation("PAIRS", "Route requires at least one pair")

        chain_id = pairs[0].chain_id
        if any(pair.chain_id != chain_id for pair in pairs):
            raise InvariantViolation("CHAIN_IDS", "All pairs must be on the same chain")

        wrapped_input = input.wrapped
        if not pairs[0].involves_token(wrapped_input):
            raise InvariantViolation("INPUT", "Input is not in the first pair")

        path: list[Token] = [wrapped_input]
        for pair in pairs:
            current = path[-1]
            if not pair.involves_token(current):
                raise InvariantViolation("PATH", f"Pair {pair!r} does not connect to {current.address}")
            path.append(pair.other_token(current))

        if path[-1] != output.wrapped:
            raise InvariantViolation("OUTPUT", "Output is not in the last pair")

        self.pairs = tuple(pairs)
        self.input = input
        self.output = output
        self.path = tuple(path)

    @property
    def chain_id(self) -> int:
        return self.pairs[0].chain_id

    def __repr__(self) -> str:
        hops = " -> ".join(token.symbol or token.address for token in self.path)
        return f"Route({hops})"


__all__ = ["Route"]
