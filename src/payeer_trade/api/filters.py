"""Argument validation and filter payloads shared by the order and history queries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from .errors import (
    ErrorKind,
    InvalidActionError,
    InvalidAmountError,
    InvalidLimitError,
    InvalidPriceError,
    InvalidStatusError,
)
from .normalization import normalize_pair
from .protocol import ACTIONS, ORDER_STATUSES

_POSITIVE_ERRORS = {
    ErrorKind.AMOUNT_NOT_POSITIVE: InvalidAmountError,
    ErrorKind.PRICE_NOT_POSITIVE: InvalidPriceError,
    ErrorKind.STOP_PRICE_NOT_POSITIVE: InvalidPriceError,
    ErrorKind.LIMIT_NOT_POSITIVE: InvalidLimitError,
}


def validate_action(action: str) -> str:
    """Return ``action`` if it is a valid order side."""
    if action not in ACTIONS:
        raise InvalidActionError(ErrorKind.WRONG_ACTION, action)
    return action


def validate_status(status: str) -> str:
    """Return ``status`` if it is a known order status."""
    if status not in ORDER_STATUSES:
        raise InvalidStatusError(ErrorKind.WRONG_STATUS, status)
    return status


def validate_positive(value: float, kind: ErrorKind) -> float:
    """Return ``value`` if it is greater than zero.

    Raises:
        ValidationError: The subclass registered for ``kind``
    """
    if value is None or value <= 0:
        raise _POSITIVE_ERRORS[kind](kind, value)
    return value


def _to_timestamp(value: int | datetime) -> int:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return value


def build_order_filter(action: str | None = None, pair: str | None = None) -> dict[str, Any]:
    """Build the filter used by ``my_orders`` and ``orders_cancel``.

    Only non-empty values are included.
    """
    fields: dict[str, Any] = {}
    if pair:
        fields["pair"] = normalize_pair(pair)
    if action:
        fields["action"] = validate_action(action)
    return fields


def build_history_filter(
    limit: int,
    pair: str | None = None,
    action: str | None = None,
    date_from: int | datetime | None = None,
    date_to: int | datetime | None = None,
    last_id: int | None = None,
) -> dict[str, Any]:
    """Build the filter used by ``my_trades`` and ``my_history``.

    Args:
        limit: Page size, must be positive
        pair: Pair or comma-separated pairs
        action: ``sell`` or ``buy``
        date_from: Lower bound, unix seconds or datetime
        date_to: Upper bound, unix seconds or datetime
        last_id: Id to page from, sent as ``append``

    Returns:
        Payload fields, optional ones only when given
    """
    validate_positive(limit, ErrorKind.LIMIT_NOT_POSITIVE)

    fields: dict[str, Any] = {}
    if pair:
        fields["pair"] = normalize_pair(pair)
    if action:
        fields["action"] = validate_action(action)
    if date_from:
        fields["date_from"] = _to_timestamp(date_from)
    if date_to:
        fields["date_to"] = _to_timestamp(date_to)
    if last_id:
        fields["append"] = last_id
    fields["limit"] = limit
    return fields
