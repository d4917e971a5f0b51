"""Tests for shared argument validation and filter payloads."""

from datetime import datetime, timezone

import pytest

from payeer_trade.api.errors import (
    ErrorKind,
    InvalidActionError,
    InvalidAmountError,
    InvalidLimitError,
    InvalidPriceError,
    InvalidStatusError,
    ValidationError,
)
from payeer_trade.api.filters import (
    build_history_filter,
    build_order_filter,
    validate_action,
    validate_positive,
    validate_status,
)


class TestValidators:

    @pytest.mark.parametrize("action", ["buy", "sell"])
    def test_valid_action(self, action):
        assert validate_action(action) == action

    @pytest.mark.parametrize("action", ["BUY", "hold", ""])
    def test_invalid_action(self, action):
        with pytest.raises(InvalidActionError) as exc_info:
            validate_action(action)
        assert exc_info.value.kind is ErrorKind.WRONG_ACTION

    def test_invalid_status_lists_allowed_values(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            validate_status("bogus")

        message = str(exc_info.value)
        for status in ("success", "processing", "waiting", "canceled"):
            assert status in message
        assert "bogus" in message

    @pytest.mark.parametrize(
        "kind,error",
        [
            (ErrorKind.AMOUNT_NOT_POSITIVE, InvalidAmountError),
            (ErrorKind.PRICE_NOT_POSITIVE, InvalidPriceError),
            (ErrorKind.STOP_PRICE_NOT_POSITIVE, InvalidPriceError),
            (ErrorKind.LIMIT_NOT_POSITIVE, InvalidLimitError),
        ],
    )
    def test_not_positive(self, kind, error):
        for value in (0, -1, None):
            with pytest.raises(error) as exc_info:
                validate_positive(value, kind)
            assert exc_info.value.kind is kind

    def test_positive_passes(self):
        assert validate_positive(0.0001, ErrorKind.AMOUNT_NOT_POSITIVE) == 0.0001

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_action("hold")
        assert issubclass(InvalidActionError, ValidationError)


class TestOrderFilter:

    def test_empty(self):
        assert build_order_filter() == {}

    def test_empty_strings_skipped(self):
        assert build_order_filter("", "") == {}

    def test_pair_and_action(self):
        assert build_order_filter("buy", "btc/usdt") == {"pair": "BTC_USDT", "action": "buy"}

    def test_invalid_action(self):
        with pytest.raises(InvalidActionError):
            build_order_filter("long", "BTC_USDT")


class TestHistoryFilter:

    def test_limit_only(self):
        assert build_history_filter(50) == {"limit": 50}

    def test_last_id_sent_as_append(self):
        fields = build_history_filter(10, last_id=42)

        assert fields["append"] == 42
        assert "last_id" not in fields
        assert "lastId" not in fields

    def test_all_fields(self):
        fields = build_history_filter(
            20,
            pair="BTC_USDT,ETH_USDT",
            action="sell",
            date_from=1630000000,
            date_to=1640000000,
            last_id=7,
        )

        assert fields == {
            "pair": "BTC_USDT,ETH_USDT",
            "action": "sell",
            "date_from": 1630000000,
            "date_to": 1640000000,
            "append": 7,
            "limit": 20,
        }

    def test_datetime_bounds(self):
        fields = build_history_filter(
            5,
            date_from=datetime(2024, 1, 1, tzinfo=timezone.utc),
            date_to=datetime(2024, 1, 2),
        )

        assert fields["date_from"] == 1704067200
        assert fields["date_to"] == 1704153600

    @pytest.mark.parametrize("limit", [0, -5])
    def test_limit_not_positive(self, limit):
        with pytest.raises(InvalidLimitError, match="Limit must be greater than 0"):
            build_history_filter(limit)

    def test_invalid_action(self):
        with pytest.raises(InvalidActionError):
            build_history_filter(50, action="short")
