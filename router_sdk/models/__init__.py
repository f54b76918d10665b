"""Option models and shared types for the router SDK."""

from router_sdk.models.options import (
    AnyTradeOptions,
    TradeOptions,
    TradeOptionsDeadline,
    parse_trade_options,
)
from router_sdk.models.types import (
    Slippage,
    is_valid_address,
    validate_and_parse_address,
    validate_slippage,
)

__all__ = [
    # Options
    "TradeOptions",
    "TradeOptionsDeadline",
    "AnyTradeOptions",
    "parse_trade_options",
    # Types
    "Slippage",
    "is_valid_address",
    "validate_and_parse_address",
    "validate_slippage",
]
