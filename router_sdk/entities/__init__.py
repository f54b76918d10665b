"""Entities the router encodes calls for: currencies, pairs, routes and trades."""

from router_sdk.entities.currency import Currency, CurrencyAmount, NativeCurrency, Token
from router_sdk.entities.pair import Pair, compute_pair_address
from router_sdk.entities.route import Route
from router_sdk.entities.trade import Trade, TradeType

__all__ = [
    # Currencies
    "Currency",
    "CurrencyAmount",
    "NativeCurrency",
    "Token",
    # Pools
    "Pair",
    "compute_pair_address",
    # Trading
    "Route",
    "Trade",
    "TradeType",
]
