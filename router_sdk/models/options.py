"""Pydantic models for router call options.

A call either expires ``ttl`` seconds after the parameters are produced, or
at an absolute ``deadline``. The two shapes are separate models that forbid
unknown fields, so a mapping carrying both keys (or neither) never validates.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from router_sdk.models.types import Slippage


class _BaseTradeOptions(BaseModel):
    """Fields shared by both expiry shapes."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    allowed_slippage: Slippage = Field(
        description="How much the execution price may move unfavorably, as a fraction."
    )
    recipient: str = Field(description="Account receiving the output of the call.")
    fee_on_transfer: bool = Field(
        default=False,
        description="Whether any token in the path takes a fee on transfer.",
    )


class TradeOptions(_BaseTradeOptions):
    """Options with a relative expiry.

    The deadline is computed from ``ttl`` when the call parameters are
    generated. Non-positive values are rejected by the router (InvalidTTL).
    """

    ttl: int = Field(description="Seconds until the call expires.")


class TradeOptionsDeadline(_BaseTradeOptions):
    """Options with an absolute expiry, for callers not relying on local time."""

    deadline: int = Field(ge=0, description="Unix timestamp (seconds) when the call expires.")


AnyTradeOptions = TradeOptions | TradeOptionsDeadline

_trade_options_adapter: TypeAdapter[AnyTradeOptions] = TypeAdapter(AnyTradeOptions)


def parse_trade_options(data: dict[str, Any]) -> AnyTradeOptions:
    """Validate a raw mapping into one of the two option shapes.

    Raises:
        pydantic.ValidationError: If both or neither of ttl/deadline are given,
            or any field is invalid
    """
    return _trade_options_adapter.validate_python(data)


__all__ = [
    "TradeOptions",
    "TradeOptionsDeadline",
    "AnyTradeOptions",
    "parse_trade_options",
]
