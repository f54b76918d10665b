"""V2 pair snapshot and constant-product math.

The pair uses the constant product formula: x * y = k, with a fee taken on
input amounts. The fee multiplier is per chain (9970 / 10000 = 0.3% by
default, see TRADE_FEE_MAP).
"""

from __future__ import annotations

from functools import lru_cache
from math import isqrt

from eth_utils import keccak, to_checksum_address

from router_sdk.constants import (
    FEE_DENOMINATOR,
    MINIMUM_LIQUIDITY,
    factory_address,
    init_code_hash,
    trade_fee,
)
from router_sdk.entities.currency import CurrencyAmount, Token
from router_sdk.errors import (
    InsufficientInputAmountError,
    InsufficientReservesError,
    InvariantViolation,
)


@lru_cache(maxsize=1024)
def compute_pair_address(factory: str, token_a: str, token_b: str, code_hash: str) -> str:
    """CREATE2 address of the pair for two token addresses.

    Args:
        factory: Factory contract address
        token_a: Address of one token
        token_b: Address of the other token (order does not matter)
        code_hash: Keccak hash of the pair creation code

    Returns:
        Checksummed pair address
    """
    token0, token1 = sorted((token_a.lower(), token_b.lower()))
    salt = keccak(bytes.fromhex(token0[2:]) + bytes.fromhex(token1[2:]))
    digest = keccak(
        b"\xff" + bytes.fromhex(factory.lower()[2:]) + salt + bytes.fromhex(code_hash[2:])
    )
    return to_checksum_address("0x" + digest[12:].hex())


class Pair:
    """A snapshot of a V2 pool: two sorted tokens and their reserves."""

    def __init__(self, amount_a: CurrencyAmount, amount_b: CurrencyAmount) -> None:
        if not (amount_a.currency.is_token and amount_b.currency.is_token):
            raise InvariantViolation("TOKENS", "Pair reserves must be denominated in tokens")

        if amount_a.currency.sorts_before(amount_b.currency):
            self._reserves = (amount_a, amount_b)
        else:
            self._reserves = (amount_b, amount_a)

        self.liquidity_token = Token(
            self.token0.chain_id,
            Pair.get_address(self.token0, self.token1),
            18,
            "UNI-V2",
            "Uniswap V2",
        )

    @staticmethod
    def get_address(token_a: Token, token_b: Token) -> str:
        """Deterministic pair address for two tokens on their chain."""
        chain_id = token_a.chain_id
        return compute_pair_address(
            factory_address(chain_id),
            token_a.address,
            token_b.address,
            init_code_hash(chain_id),
        )

    def __repr__(self) -> str:
        return (
            f"Pair({self.token0.symbol or self.token0.address}={self.reserve0.quotient}, "
            f"{self.token1.symbol or self.token1.address}={self.reserve1.quotient})"
        )

    @property
    def chain_id(self) -> int:
        return self.token0.chain_id

    @property
    def token0(self) -> Token:
        return self._reserves[0].currency  # type: ignore[return-value]

    @property
    def token1(self) -> Token:
        return self._reserves[1].currency  # type: ignore[return-value]

    @property
    def reserve0(self) -> CurrencyAmount:
        return self._reserves[0]

    @property
    def reserve1(self) -> CurrencyAmount:
        return self._reserves[1]

    @property
    def fee_multiplier(self) -> int:
        """Fee multiplier out of FEE_DENOMINATOR (9970 for 0.3%)."""
        return trade_fee(self.chain_id)

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def reserve_of(self, token: Token) -> CurrencyAmount:
        """Reserve of the given token.

        Raises:
            InvariantViolation: If the token is not in this pair
        """
        if token == self.token0:
            return self.reserve0
        if token == self.token1:
            return self.reserve1
        raise InvariantViolation("TOKEN", f"Token {token.address} not in pair")

    def other_token(self, token: Token) -> Token:
        return self.token1 if token == self.token0 else self.token0

    def get_output_amount(self, input_amount: CurrencyAmount) -> tuple[CurrencyAmount, Pair]:
        """Output for an exact input, and the pair after the swap.

        Formula: out = (in * fee * res_out) / (res_in * 10000 + in * fee)

        Raises:
            InsufficientReservesError: If either reserve is zero
            InsufficientInputAmountError: If the output rounds down to zero
        """
        token_in = input_amount.currency
        if not self.involves_token(token_in):
            raise InvariantViolation("TOKEN", f"Token {token_in.address} not in pair")
        if self.reserve0.quotient == 0 or self.reserve1.quotient == 0:
            raise InsufficientReservesError("Pair has no reserves")

        reserve_in = self.reserve_of(token_in)
        reserve_out = self.reserve_of(self.other_token(token_in))

        amount_in_with_fee = input_amount.quotient * self.fee_multiplier
        numerator = amount_in_with_fee * reserve_out.quotient
        denominator = reserve_in.quotient * FEE_DENOMINATOR + amount_in_with_fee
        output_amount = CurrencyAmount(reserve_out.currency, numerator // denominator)

        if output_amount.quotient == 0:
            raise InsufficientInputAmountError("Input amount too small for any output")

        return output_amount, Pair(reserve_in + input_amount, reserve_out - output_amount)

    def get_input_amount(self, output_amount: CurrencyAmount) -> tuple[CurrencyAmount, Pair]:
        """Required input for an exact output, and the pair after the swap.

        Formula: in = (res_in * out * 10000) / ((res_out - out) * fee) + 1

        Raises:
            InsufficientReservesError: If a reserve is zero or out >= res_out
        """
        token_out = output_amount.currency
        if not self.involves_token(token_out):
            raise InvariantViolation("TOKEN", f"Token {token_out.address} not in pair")

        reserve_out = self.reserve_of(token_out)
        reserve_in = self.reserve_of(self.other_token(token_out))
        if (
            self.reserve0.quotient == 0
            or self.reserve1.quotient == 0
            or output_amount.quotient >= reserve_out.quotient
        ):
            raise InsufficientReservesError("Output exceeds available reserves")

        numerator = reserve_in.quotient * output_amount.quotient * FEE_DENOMINATOR
        denominator = (reserve_out.quotient - output_amount.quotient) * self.fee_multiplier
        input_amount = CurrencyAmount(reserve_in.currency, numerator // denominator + 1)

        return input_amount, Pair(reserve_in + input_amount, reserve_out - output_amount)

    def get_liquidity_minted(
        self,
        total_supply: CurrencyAmount,
        token_amount_a: CurrencyAmount,
        token_amount_b: CurrencyAmount,
    ) -> CurrencyAmount:
        """Liquidity tokens minted for a deposit, as the pair contract computes it.

        The first deposit locks MINIMUM_LIQUIDITY forever.

        Raises:
            InsufficientInputAmountError: If no liquidity would be minted
        """
        if total_supply.currency != self.liquidity_token:
            raise InvariantViolation("LIQUIDITY", "Total supply is not in the liquidity token")

        if token_amount_a.currency.sorts_before(token_amount_b.currency):
            amount0, amount1 = token_amount_a, token_amount_b
        else:
            amount0, amount1 = token_amount_b, token_amount_a
        if amount0.currency != self.token0 or amount1.currency != self.token1:
            raise InvariantViolation("TOKEN", "Deposit tokens do not match the pair")

        if total_supply.quotient == 0:
            liquidity = isqrt(amount0.quotient * amount1.quotient) - MINIMUM_LIQUIDITY
        else:
            liquidity = min(
                amount0.quotient * total_supply.quotient // self.reserve0.quotient,
                amount1.quotient * total_supply.quotient // self.reserve1.quotient,
            )

        if liquidity <= 0:
            raise InsufficientInputAmountError("Deposit too small to mint liquidity")
        return CurrencyAmount(self.liquidity_token, liquidity)

    def get_liquidity_value(
        self,
        token: Token,
        total_supply: CurrencyAmount,
        liquidity: CurrencyAmount,
        fee_on: bool = False,
        k_last: int | None = None,
    ) -> CurrencyAmount:
        """Amount of ``token`` redeemable for ``liquidity`` pool tokens.

        With the protocol fee switched on, the supply is first inflated by the
        fee liquidity the pair would mint on the next burn.
        """
        if total_supply.currency != self.liquidity_token or liquidity.currency != self.liquidity_token:
            raise InvariantViolation("LIQUIDITY", "Amounts must be in the liquidity token")
        if liquidity.quotient > total_supply.quotient:
            raise InvariantViolation("LIQUIDITY", "Liquidity exceeds total supply")

        supply = total_supply.quotient
        if fee_on:
            if k_last is None:
                raise InvariantViolation("K_LAST", "k_last is required when the fee is on")
            if k_last != 0:
                root_k = isqrt(self.reserve0.quotient * self.reserve1.quotient)
                root_k_last = isqrt(k_last)
                if root_k > root_k_last:
                    numerator = supply * (root_k - root_k_last)
                    denominator = root_k * 5 + root_k_last
                    supply += numerator // denominator

        return CurrencyAmount(token, liquidity.quotient * self.reserve_of(token).quotient // supply)


__all__ = ["Pair", "compute_pair_address"]
