"""Error classes for router encoding and pair math.

Invariant violations carry a short machine-readable ``tag`` so callers can
branch on the failure without parsing messages.
"""

from __future__ import annotations

from typing import ClassVar


class RouterSDKError(Exception):
    """Base error for the router SDK."""

    pass


class InvariantViolation(RouterSDKError):
    """A precondition of an operation does not hold.

    Attributes:
        tag: Short identifier of the violated invariant (e.g. "TTL")
    """

    default_tag: ClassVar[str] = "INVARIANT"

    def __init__(self, tag: str | None = None, message: str | None = None) -> None:
        self.tag = tag or self.default_tag
        super().__init__(message or f"Invariant failed: {self.tag}")


class NativeCurrencyConflict(InvariantViolation):
    """Both legs of the operation are the native currency."""

    default_tag = "ETHER_IN_OUT"


class InvalidTTL(InvariantViolation):
    """Relative expiry of zero or negative seconds."""

    default_tag = "TTL"


class UnsupportedFeeOnTransferForExactOutput(InvariantViolation):
    """Fee-on-transfer routing requested for an exact-output trade."""

    default_tag = "EXACT_OUT_FOT"


class InvalidAddress(InvariantViolation, ValueError):
    """Address failed validation."""

    default_tag = "ADDRESS"


class InsufficientReservesError(RouterSDKError):
    """Pool reserves cannot satisfy the requested amount."""

    pass


class InsufficientInputAmountError(RouterSDKError):
    """Input amount is too small to produce any output."""

    pass


__all__ = [
    "RouterSDKError",
    "InvariantViolation",
    "NativeCurrencyConflict",
    "InvalidTTL",
    "UnsupportedFeeOnTransferForExactOutput",
    "InvalidAddress",
    "InsufficientReservesError",
    "InsufficientInputAmountError",
]
