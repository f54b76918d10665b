"""V2 router call parameter encoding.

Turns a trade or a liquidity position change into the router method to call,
its hex-encoded arguments and the native value to send. All amounts go
through exact rationals and are truncated the way the router contract
truncates them, so the produced bounds are the ones the contract re-checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

import structlog

from router_sdk.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from router_sdk.constants import WRAPPED_NATIVE_MAP, ZERO_HEX
from router_sdk.entities.currency import Currency, CurrencyAmount
from router_sdk.entities.pair import Pair
from router_sdk.entities.trade import Trade, TradeType
from router_sdk.errors import (
    InvalidTTL,
    InvariantViolation,
    NativeCurrencyConflict,
    UnsupportedFeeOnTransferForExactOutput,
)
from router_sdk.math.rational import as_fraction, quotient, slippage_adjusted, to_hex
from router_sdk.models.options import AnyTradeOptions, TradeOptions
from router_sdk.models.types import validate_and_parse_address

logger = structlog.get_logger()

FEE_ON_TRANSFER_SUFFIX = "SupportingFeeOnTransferTokens"


@dataclass(frozen=True)
class SwapParameters:
    """The parameters of a call to the V2 router.

    Attributes:
        method_name: Router method to call
        args: Arguments in ABI order; amounts are hex, addresses checksummed,
            paths are tuples of addresses
        value: Native currency to send with the call, in hex
    """

    method_name: str
    args: tuple[str | tuple[str, ...], ...]
    value: str


class Reconciliation(str, Enum):
    """How desired liquidity amounts were reconciled with the pool price."""

    POOL_UNINITIALIZED = "pool_uninitialized"
    WITHIN_TOLERANCE = "within_tolerance"
    ADJUSTED_A = "adjusted_a"
    ADJUSTED_B = "adjusted_b"
    # Neither optimal amount fits its desired counterpart; left as-is
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class LiquidityAmounts:
    """Desired and minimum deposit amounts for both pair tokens."""

    amount_a_desired: int
    amount_b_desired: int
    amount_a_min: int
    amount_b_min: int
    outcome: Reconciliation


@dataclass(frozen=True)
class _SwapMethod:
    """One row of the swap dispatch table."""

    name: str
    # Names of the values passed as arguments, in ABI order
    arg_names: tuple[str, ...]
    # Whether the maximum input is sent as call value
    value_is_input: bool
    supports_fee_on_transfer: bool


# Keyed by (trade type, native in, native out). Exhaustive for every
# combination the router accepts; native in and out together is rejected.
SWAP_METHODS: dict[tuple[TradeType, bool, bool], _SwapMethod] = {
    # (uint amountOutMin, address[] path, address to, uint deadline)
    (TradeType.EXACT_INPUT, True, False): _SwapMethod(
        "swapExactETHForTokens", ("amount_out", "path", "to", "deadline"), True, True
    ),
    # (uint amountIn, uint amountOutMin, address[] path, address to, uint deadline)
    (TradeType.EXACT_INPUT, False, True): _SwapMethod(
        "swapExactTokensForETH", ("amount_in", "amount_out", "path", "to", "deadline"), False, True
    ),
    (TradeType.EXACT_INPUT, False, False): _SwapMethod(
        "swapExactTokensForTokens",
        ("amount_in", "amount_out", "path", "to", "deadline"),
        False,
        True,
    ),
    # (uint amountOut, address[] path, address to, uint deadline)
    (TradeType.EXACT_OUTPUT, True, False): _SwapMethod(
        "swapETHForExactTokens", ("amount_out", "path", "to", "deadline"), True, False
    ),
    # (uint amountOut, uint amountInMax, address[] path, address to, uint deadline)
    (TradeType.EXACT_OUTPUT, False, True): _SwapMethod(
        "swapTokensForExactETH", ("amount_out", "amount_in", "path", "to", "deadline"), False, False
    ),
    (TradeType.EXACT_OUTPUT, False, False): _SwapMethod(
        "swapTokensForExactTokens",
        ("amount_out", "amount_in", "path", "to", "deadline"),
        False,
        False,
    ),
}


def quote(amount_a: object, reserve_a: object, reserve_b: object) -> int:
    """Amount of B equivalent to ``amount_a`` at the pool's reserve ratio.

    amount_b = amount_a * reserve_b / reserve_a, truncated.

    Args:
        amount_a: Amount of token A (int, Fraction or CurrencyAmount)
        reserve_a: Pool reserve of token A; must be non-zero
        reserve_b: Pool reserve of token B

    Raises:
        ZeroDivisionError: If reserve_a is zero
    """
    return quotient(as_fraction(amount_a) * as_fraction(reserve_b) / as_fraction(reserve_a))


def _min_with_bias(adjusted: Fraction, desired: int) -> int:
    return quotient(adjusted * desired + 1)


def reconcile_liquidity(
    pair: Pair,
    amount_a_desired: int,
    amount_b_desired: int,
    allowed_slippage: object,
) -> LiquidityAmounts:
    """Reconcile desired deposit amounts against the pair's current ratio.

    Minimums are ``floor(desired / (1 + slippage)) + 1``. On an initialized
    pool the side whose optimal amount (at the live ratio) falls below its
    minimum is lowered to that optimal amount.

    Args:
        pair: Pair snapshot; token A is token0, token B is token1
        amount_a_desired: Desired deposit of token0
        amount_b_desired: Desired deposit of token1
        allowed_slippage: Slippage tolerance as an exact rational

    Returns:
        LiquidityAmounts with the reconciliation outcome
    """
    adjusted = slippage_adjusted(allowed_slippage)
    amount_a_min = _min_with_bias(adjusted, amount_a_desired)
    amount_b_min = _min_with_bias(adjusted, amount_b_desired)

    if pair.reserve0.quotient == 0 and pair.reserve1.quotient == 0:
        return LiquidityAmounts(
            amount_a_desired,
            amount_b_desired,
            amount_a_min,
            amount_b_min,
            Reconciliation.POOL_UNINITIALIZED,
        )

    outcome = Reconciliation.WITHIN_TOLERANCE
    amount_b_optimal = quote(amount_a_desired, pair.reserve0, pair.reserve1)
    if amount_b_optimal <= amount_b_desired:
        if amount_b_optimal < amount_b_min:
            amount_b_desired = amount_b_optimal
            amount_b_min = _min_with_bias(adjusted, amount_b_desired)
            outcome = Reconciliation.ADJUSTED_B
    else:
        amount_a_optimal = quote(amount_b_desired, pair.reserve1, pair.reserve0)
        if amount_a_optimal <= amount_a_desired:
            if amount_a_optimal < amount_a_min:
                amount_a_desired = amount_a_optimal
                amount_a_min = _min_with_bias(adjusted, amount_a_desired)
                outcome = Reconciliation.ADJUSTED_A
        else:
            outcome = Reconciliation.UNRESOLVED
            logger.warning(
                "liquidity_ratio_unresolved",
                amount_a_desired=amount_a_desired,
                amount_a_optimal=amount_a_optimal,
                amount_b_desired=amount_b_desired,
                amount_b_optimal=amount_b_optimal,
            )

    logger.debug(
        "liquidity_reconciled",
        outcome=outcome.value,
        amount_a_desired=amount_a_desired,
        amount_a_min=amount_a_min,
        amount_b_desired=amount_b_desired,
        amount_b_min=amount_b_min,
    )
    return LiquidityAmounts(
        amount_a_desired, amount_b_desired, amount_a_min, amount_b_min, outcome
    )


class V2Router:
    """Call parameter encoding for the V2 router.

    Stateless apart from its configuration; every method is a pure function
    of its arguments, the pair/trade snapshot and (for ttl options) the clock.
    """

    def __init__(self, config: RouterConfig = DEFAULT_ROUTER_CONFIG) -> None:
        self.config = config

    def _validate_options(self, native_a: bool, native_b: bool, options: AnyTradeOptions) -> None:
        # the router does not support native in and out
        if native_a and native_b:
            raise NativeCurrencyConflict()
        if isinstance(options, TradeOptions) and options.ttl <= 0:
            raise InvalidTTL(message=f"ttl must be positive, got {options.ttl}")

    def _deadline(self, options: AnyTradeOptions) -> str:
        if isinstance(options, TradeOptions):
            return to_hex(self.config.now_seconds() + options.ttl)
        return to_hex(options.deadline)

    @staticmethod
    def _check_pair_tokens(pair: Pair, currency0: Currency, currency1: Currency) -> None:
        for currency, token in ((currency0, pair.token0), (currency1, pair.token1)):
            # native legs are only matched where the wrapped token is known
            if currency.is_native and currency.chain_id not in WRAPPED_NATIVE_MAP:
                if currency.chain_id != token.chain_id:
                    raise InvariantViolation("PAIR_TOKENS", "Native currency is on another chain")
                continue
            if currency.wrapped != token:
                raise InvariantViolation(
                    "PAIR_TOKENS", "Currencies do not match the pair tokens in order"
                )

    def swap_call_parameters(self, trade: Trade, options: AnyTradeOptions) -> SwapParameters:
        """Produce the router method and arguments for a trade.

        Args:
            trade: Trade to produce call parameters for
            options: Slippage, recipient, expiry and fee-on-transfer flag

        Returns:
            SwapParameters for the trade

        Raises:
            NativeCurrencyConflict: If both input and output are native
            InvalidTTL: If a relative ttl is not positive
            UnsupportedFeeOnTransferForExactOutput: If fee-on-transfer is
                requested for an exact-output trade
            InvalidAddress: If the recipient is not a valid address
        """
        native_in = trade.input_amount.currency.is_native
        native_out = trade.output_amount.currency.is_native
        self._validate_options(native_in, native_out, options)
        use_fee_on_transfer = bool(options.fee_on_transfer)

        method = SWAP_METHODS.get((trade.trade_type, native_in, native_out))
        if method is None:
            raise InvariantViolation(
                "METHOD", f"No router method for {trade.trade_type!r}, native_in={native_in}, native_out={native_out}"
            )
        if use_fee_on_transfer and not method.supports_fee_on_transfer:
            raise UnsupportedFeeOnTransferForExactOutput()

        to = validate_and_parse_address(options.recipient)
        values: dict[str, str | tuple[str, ...]] = {
            "amount_in": to_hex(trade.maximum_amount_in(options.allowed_slippage).quotient),
            "amount_out": to_hex(trade.minimum_amount_out(options.allowed_slippage).quotient),
            "path": tuple(token.address for token in trade.route.path),
            "to": to,
            "deadline": self._deadline(options),
        }

        method_name = method.name + FEE_ON_TRANSFER_SUFFIX if use_fee_on_transfer else method.name
        value = values["amount_in"] if method.value_is_input else ZERO_HEX
        params = SwapParameters(
            method_name=method_name,
            args=tuple(values[name] for name in method.arg_names),
            value=value,  # type: ignore[arg-type]
        )

        logger.debug(
            "swap_call_parameters",
            method=params.method_name,
            trade_type=trade.trade_type.name,
            amount_in=values["amount_in"],
            amount_out=values["amount_out"],
            hops=len(trade.route.path) - 1,
            value=params.value,
        )
        return params

    def add_call_parameters(
        self,
        pair: Pair,
        amount0: CurrencyAmount,
        amount1: CurrencyAmount,
        options: AnyTradeOptions,
    ) -> SwapParameters:
        """Produce the router method and arguments to add liquidity.

        Args:
            pair: Current pair snapshot
            amount0: Desired deposit of the pair's token0 (or its native form)
            amount1: Desired deposit of the pair's token1 (or its native form)
            options: Slippage, recipient and expiry

        Returns:
            SwapParameters for addLiquidity or addLiquidityETH

        Raises:
            NativeCurrencyConflict: If both amounts are native
            InvalidTTL: If a relative ttl is not positive
            InvariantViolation: If the amounts do not match the pair tokens
            InvalidAddress: If the recipient is not a valid address
        """
        native0 = amount0.currency.is_native
        native1 = amount1.currency.is_native
        self._validate_options(native0, native1, options)
        self._check_pair_tokens(pair, amount0.currency, amount1.currency)
        to = validate_and_parse_address(options.recipient)

        amounts = reconcile_liquidity(
            pair, amount0.quotient, amount1.quotient, options.allowed_slippage
        )
        a_desired = to_hex(amounts.amount_a_desired)
        b_desired = to_hex(amounts.amount_b_desired)
        a_min = to_hex(amounts.amount_a_min)
        b_min = to_hex(amounts.amount_b_min)
        deadline = self._deadline(options)

        if native0:
            # (address token, uint amountTokenDesired, uint amountTokenMin, uint amountETHMin, address to, uint deadline)
            params = SwapParameters(
                "addLiquidityETH",
                (pair.token1.address, b_desired, b_min, a_min, to, deadline),
                a_desired,
            )
        elif native1:
            params = SwapParameters(
                "addLiquidityETH",
                (pair.token0.address, a_desired, a_min, b_min, to, deadline),
                b_desired,
            )
        else:
            # (address tokenA, address tokenB, uint amountADesired, uint amountBDesired,
            #  uint amountAMin, uint amountBMin, address to, uint deadline)
            params = SwapParameters(
                "addLiquidity",
                (
                    pair.token0.address,
                    pair.token1.address,
                    a_desired,
                    b_desired,
                    a_min,
                    b_min,
                    to,
                    deadline,
                ),
                ZERO_HEX,
            )

        logger.debug(
            "add_call_parameters",
            method=params.method_name,
            outcome=amounts.outcome.value,
            value=params.value,
        )
        return params

    def remove_call_parameters(
        self,
        pair: Pair,
        currency0: Currency,
        currency1: Currency,
        total_supply: object,
        balance: object,
        decrease_percent: object,
        options: AnyTradeOptions,
    ) -> SwapParameters:
        """Produce the router method and arguments to remove liquidity.

        Args:
            pair: Current pair snapshot
            currency0: Currency to receive for token0 (native for ETH)
            currency1: Currency to receive for token1 (native for ETH)
            total_supply: Total supply of the pair's liquidity token
            balance: Liquidity token balance of the position
            decrease_percent: Share of the balance to remove, in (0, 100]
            options: Slippage, recipient and expiry

        Returns:
            SwapParameters for removeLiquidity or removeLiquidityETH

        Raises:
            NativeCurrencyConflict: If both currencies are native
            InvalidTTL: If a relative ttl is not positive
            InvariantViolation: If currencies, total supply, balance or percent
                are invalid
            InvalidAddress: If the recipient is not a valid address
        """
        native0 = currency0.is_native
        native1 = currency1.is_native
        self._validate_options(native0, native1, options)
        self._check_pair_tokens(pair, currency0, currency1)

        supply = as_fraction(total_supply)
        percent = as_fraction(decrease_percent)
        balance_value = as_fraction(balance)
        if supply <= 0:
            raise InvariantViolation("TOTAL_SUPPLY", f"Total supply must be positive: {supply}")
        if not 0 < percent <= 100:
            raise InvariantViolation("DECREASE_PERCENT", f"Percent must be in (0, 100]: {percent}")
        if not 0 <= balance_value <= supply:
            raise InvariantViolation("BALANCE", f"Balance must be in [0, total supply]: {balance_value}")
        to = validate_and_parse_address(options.recipient)

        adjusted = slippage_adjusted(options.allowed_slippage)
        liquidity = balance_value * percent / 100
        remove_percent = liquidity / supply
        amount_a_min = to_hex(quotient(pair.reserve0.as_fraction * remove_percent * adjusted))
        amount_b_min = to_hex(quotient(pair.reserve1.as_fraction * remove_percent * adjusted))
        liquidity_hex = to_hex(quotient(liquidity))
        deadline = self._deadline(options)

        if native0:
            # (address token, uint liquidity, uint amountTokenMin, uint amountETHMin, address to, uint deadline)
            params = SwapParameters(
                "removeLiquidityETH",
                (pair.token1.address, liquidity_hex, amount_b_min, amount_a_min, to, deadline),
                ZERO_HEX,
            )
        elif native1:
            params = SwapParameters(
                "removeLiquidityETH",
                (pair.token0.address, liquidity_hex, amount_a_min, amount_b_min, to, deadline),
                ZERO_HEX,
            )
        else:
            # (address tokenA, address tokenB, uint liquidity, uint amountAMin,
            #  uint amountBMin, address to, uint deadline)
            params = SwapParameters(
                "removeLiquidity",
                (
                    pair.token0.address,
                    pair.token1.address,
                    liquidity_hex,
                    amount_a_min,
                    amount_b_min,
                    to,
                    deadline,
                ),
                ZERO_HEX,
            )

        logger.debug(
            "remove_call_parameters",
            method=params.method_name,
            liquidity=liquidity_hex,
            amount_a_min=amount_a_min,
            amount_b_min=amount_b_min,
        )
        return params


# Singleton instance
v2_router = V2Router()


def swap_call_parameters(trade: Trade, options: AnyTradeOptions) -> SwapParameters:
    """Shortcut for ``v2_router.swap_call_parameters`` with the default config."""
    return v2_router.swap_call_parameters(trade, options)


def add_call_parameters(
    pair: Pair, amount0: CurrencyAmount, amount1: CurrencyAmount, options: AnyTradeOptions
) -> SwapParameters:
    """Shortcut for ``v2_router.add_call_parameters`` with the default config."""
    return v2_router.add_call_parameters(pair, amount0, amount1, options)


def remove_call_parameters(
    pair: Pair,
    currency0: Currency,
    currency1: Currency,
    total_supply: object,
    balance: object,
    decrease_percent: object,
    options: AnyTradeOptions,
) -> SwapParameters:
    """Shortcut for ``v2_router.remove_call_parameters`` with the default config."""
    return v2_router.remove_call_parameters(
        pair, currency0, currency1, total_supply, balance, decrease_percent, options
    )


__all__ = [
    "SwapParameters",
    "LiquidityAmounts",
    "Reconciliation",
    "SWAP_METHODS",
    "V2Router",
    "v2_router",
    "quote",
    "reconcile_liquidity",
    "swap_call_parameters",
    "add_call_parameters",
    "remove_call_parameters",
]
