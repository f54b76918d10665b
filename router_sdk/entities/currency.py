"""Currencies and amounts.

A currency is either an ERC-20 ``Token`` or the chain's ``NativeCurrency``.
Routers only move tokens, so the native currency is always handled through
its wrapped token when building pool paths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Union

from router_sdk.constants import UINT256_MAX, WRAPPED_NATIVE_MAP
from router_sdk.errors import InvariantViolation
from router_sdk.models.types import validate_and_parse_address


@dataclass(frozen=True)
class Token:
    """An ERC-20 token on a specific chain.

    The address is stored in EIP-55 checksummed form. Two tokens are equal
    when they share chain id and address; symbol and name are informational.
    """

    chain_id: int
    address: str
    decimals: int = field(default=18, compare=False)
    symbol: str | None = field(default=None, compare=False)
    name: str | None = field(default=None, compare=False)

    is_native = False
    is_token = True

    def __post_init__(self) -> None:
        if not 0 <= self.decimals < 255:
            raise InvariantViolation("DECIMALS", f"Invalid decimals: {self.decimals}")
        object.__setattr__(self, "address", validate_and_parse_address(self.address))

    @property
    def wrapped(self) -> Token:
        return self

    def sorts_before(self, other: Token) -> bool:
        """Whether this token is token0 of a pair with ``other``.

        Raises:
            InvariantViolation: If the tokens are on different chains or identical
        """
        if self.chain_id != other.chain_id:
            raise InvariantViolation("CHAIN_IDS", "Tokens are on different chains")
        if self.address == other.address:
            raise InvariantViolation("ADDRESSES", "Tokens have the same address")
        return self.address.lower() < other.address.lower()


@dataclass(frozen=True)
class NativeCurrency:
    """The chain's native currency (e.g. Ether)."""

    chain_id: int
    decimals: int = field(default=18, compare=False)
    symbol: str = field(default="ETH", compare=False)
    name: str = field(default="Ether", compare=False)

    is_native = True
    is_token = False

    @property
    def wrapped(self) -> Token:
        """The wrapped ERC-20 form of this currency.

        Raises:
            InvariantViolation: If no wrapped token is known for the chain
        """
        try:
            address, symbol = WRAPPED_NATIVE_MAP[self.chain_id]
        except KeyError as err:
            raise InvariantViolation(
                "WRAPPED", f"No wrapped native token for chain {self.chain_id}"
            ) from err
        return Token(self.chain_id, address, self.decimals, symbol, f"Wrapped {self.name}")


Currency = Union[Token, NativeCurrency]


@dataclass(frozen=True)
class CurrencyAmount:
    """A raw (smallest-unit) integer amount of a currency.

    Attributes:
        currency: Token or native currency the amount is denominated in
        quotient: Integer amount in the currency's smallest unit
    """

    currency: Currency
    quotient: int

    def __post_init__(self) -> None:
        if isinstance(self.quotient, bool) or not isinstance(self.quotient, int):
            raise TypeError(f"Amount must be int, got {type(self.quotient).__name__}")
        if not 0 <= self.quotient <= UINT256_MAX:
            raise InvariantViolation("AMOUNT", f"Amount out of uint256 range: {self.quotient}")

    @property
    def as_fraction(self) -> Fraction:
        return Fraction(self.quotient)

    @property
    def wrapped(self) -> CurrencyAmount:
        """The same amount denominated in the wrapped token."""
        if self.currency.is_token:
            return self
        return CurrencyAmount(self.currency.wrapped, self.quotient)

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.quotient + other.quotient)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.quotient - other.quotient)

    def _check_currency(self, other: CurrencyAmount) -> None:
        if self.currency != other.currency:
            raise InvariantViolation("CURRENCY", "Amounts are in different currencies")


__all__ = ["Token", "NativeCurrency", "Currency", "CurrencyAmount"]
