"""V2 Router SDK - call parameter encoding for constant product AMM routers."""

from router_sdk.abi import encode_call_parameters, method_selector
from router_sdk.chains import ChainId
from router_sdk.config import DEFAULT_ROUTER_CONFIG, RouterConfig, configure_logging
from router_sdk.constants import (
    FACTORY_ADDRESS,
    FACTORY_ADDRESS_MAP,
    INIT_CODE_HASH,
    INIT_CODE_HASH_MAP,
    MINIMUM_LIQUIDITY,
    TRADE_FEE,
    TRADE_FEE_MAP,
    ZERO_HEX,
)
from router_sdk.entities import (
    Currency,
    CurrencyAmount,
    NativeCurrency,
    Pair,
    Route,
    Token,
    Trade,
    TradeType,
)
from router_sdk.errors import (
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvalidAddress,
    InvalidTTL,
    InvariantViolation,
    NativeCurrencyConflict,
    RouterSDKError,
    UnsupportedFeeOnTransferForExactOutput,
)
from router_sdk.models import TradeOptions, TradeOptionsDeadline, parse_trade_options
from router_sdk.router import (
    LiquidityAmounts,
    Reconciliation,
    SwapParameters,
    V2Router,
    add_call_parameters,
    quote,
    reconcile_liquidity,
    remove_call_parameters,
    swap_call_parameters,
    v2_router,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Router
    "V2Router",
    "v2_router",
    "SwapParameters",
    "LiquidityAmounts",
    "Reconciliation",
    "quote",
    "reconcile_liquidity",
    "swap_call_parameters",
    "add_call_parameters",
    "remove_call_parameters",
    "encode_call_parameters",
    "method_selector",
    # Options and config
    "TradeOptions",
    "TradeOptionsDeadline",
    "parse_trade_options",
    "RouterConfig",
    "DEFAULT_ROUTER_CONFIG",
    "configure_logging",
    # Entities
    "ChainId",
    "Currency",
    "CurrencyAmount",
    "NativeCurrency",
    "Pair",
    "Route",
    "Token",
    "Trade",
    "TradeType",
    # Constants
    "FACTORY_ADDRESS",
    "FACTORY_ADDRESS_MAP",
    "INIT_CODE_HASH",
    "INIT_CODE_HASH_MAP",
    "MINIMUM_LIQUIDITY",
    "TRADE_FEE",
    "TRADE_FEE_MAP",
    "ZERO_HEX",
    # Errors
    "RouterSDKError",
    "InvariantViolation",
    "NativeCurrencyConflict",
    "InvalidTTL",
    "UnsupportedFeeOnTransferForExactOutput",
    "InvalidAddress",
    "InsufficientReservesError",
    "InsufficientInputAmountError",
]
