"""Tests for trade option models."""

from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import ValidationError

from router_sdk import TradeOptions, TradeOptionsDeadline, parse_trade_options
from tests.helpers import RECIPIENT


class TestTradeOptions:
    """Tests for the ttl and deadline option shapes."""

    def test_ttl_options(self):
        options = TradeOptions(allowed_slippage=Fraction(1, 100), recipient=RECIPIENT, ttl=60)
        assert options.ttl == 60
        assert options.fee_on_transfer is False

    def test_deadline_options(self):
        options = TradeOptionsDeadline(allowed_slippage=0, recipient=RECIPIENT, deadline=1234)
        assert options.deadline == 1234

    def test_ttl_model_rejects_deadline(self):
        """The ttl shape cannot also carry a deadline."""
        with pytest.raises(ValidationError):
            TradeOptions(allowed_slippage=0, recipient=RECIPIENT, ttl=60, deadline=1234)

    def test_deadline_model_rejects_ttl(self):
        with pytest.raises(ValidationError):
            TradeOptionsDeadline(allowed_slippage=0, recipient=RECIPIENT, ttl=60, deadline=1234)

    def test_ttl_required(self):
        with pytest.raises(ValidationError):
            TradeOptions(allowed_slippage=0, recipient=RECIPIENT)

    def test_non_positive_ttl_is_left_to_router(self):
        """ttl <= 0 validates here; the router raises InvalidTTL."""
        options = TradeOptions(allowed_slippage=0, recipient=RECIPIENT, ttl=0)
        assert options.ttl == 0

    def test_negative_deadline_rejected(self):
        with pytest.raises(ValidationError):
            TradeOptionsDeadline(allowed_slippage=0, recipient=RECIPIENT, deadline=-1)

    def test_options_are_frozen(self):
        options = TradeOptions(allowed_slippage=0, recipient=RECIPIENT, ttl=60)
        with pytest.raises(ValidationError):
            options.ttl = 120  # type: ignore[misc]


class TestSlippageValidation:
    """Tests for the allowed_slippage field."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (Fraction(1, 200), Fraction(1, 200)),
            ("1/200", Fraction(1, 200)),
            ("0.005", Fraction(1, 200)),
            (Decimal("0.005"), Fraction(1, 200)),
            (0, Fraction(0)),
        ],
    )
    def test_accepted_forms(self, raw, expected):
        options = TradeOptions(allowed_slippage=raw, recipient=RECIPIENT, ttl=60)
        assert options.allowed_slippage == expected
        assert isinstance(options.allowed_slippage, Fraction)

    def test_float_rejected(self):
        with pytest.raises(ValidationError):
            TradeOptions(allowed_slippage=0.005, recipient=RECIPIENT, ttl=60)

    @pytest.mark.parametrize("raw", [1, "3/2", Fraction(-1, 100)])
    def test_out_of_range_rejected(self, raw):
        """Slippage must lie in [0, 1)."""
        with pytest.raises(ValidationError):
            TradeOptions(allowed_slippage=raw, recipient=RECIPIENT, ttl=60)


class TestParseTradeOptions:
    """Tests for validating raw mappings against the option union."""

    def test_parses_ttl_shape(self):
        options = parse_trade_options(
            {"allowed_slippage": "1/100", "recipient": RECIPIENT, "ttl": 60}
        )
        assert isinstance(options, TradeOptions)

    def test_parses_deadline_shape(self):
        options = parse_trade_options(
            {"allowed_slippage": "1/100", "recipient": RECIPIENT, "deadline": 99}
        )
        assert isinstance(options, TradeOptionsDeadline)

    def test_both_rejected(self):
        with pytest.raises(ValidationError):
            parse_trade_options(
                {"allowed_slippage": "1/100", "recipient": RECIPIENT, "ttl": 60, "deadline": 99}
            )

    def test_neither_rejected(self):
        with pytest.raises(ValidationError):
            parse_trade_options({"allowed_slippage": "1/100", "recipient": RECIPIENT})
