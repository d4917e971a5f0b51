"""Exceptions raised by the Payeer trade client."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Fixed validation messages."""

    WRONG_ACTION = "Wrong action. Allowed values: sell, buy"
    WRONG_STATUS = "Wrong status. Allowed values: success, processing, waiting, canceled"
    AMOUNT_NOT_POSITIVE = "Amount must be greater than 0"
    PRICE_NOT_POSITIVE = "Price must be greater than 0"
    STOP_PRICE_NOT_POSITIVE = "Stop price must be greater than 0"
    LIMIT_NOT_POSITIVE = "Limit must be greater than 0"
    AMOUNT_OR_VALUE_REQUIRED = "Either amount or value must be greater than 0"
    AMOUNT_AND_VALUE_EXCLUSIVE = "Only one of amount or value may be set"


class PayeerError(Exception):
    """Base exception for all client errors."""


class ValidationError(PayeerError, ValueError):
    """Raised when caller input is rejected before any request is sent."""

    def __init__(self, kind: ErrorKind, value: Any = None):
        self.kind = kind
        self.value = value
        if value is None:
            super().__init__(kind.value)
        else:
            super().__init__(f"{kind.value} (got {value!r})")


class InvalidActionError(ValidationError):
    """Order side is not sell or buy."""


class InvalidAmountError(ValidationError):
    """Amount or value is out of range."""


class InvalidPriceError(ValidationError):
    """Price or stop price is not positive."""


class InvalidLimitError(ValidationError):
    """History page size is not positive."""


class InvalidStatusError(ValidationError):
    """Order status filter is not a known status."""


class SerializationError(PayeerError):
    """Raised when request fields cannot be encoded as JSON."""


class TransportError(PayeerError):
    """Raised when the HTTP request itself fails."""


class MalformedResponseError(PayeerError):
    """Raised when the exchange answers with something other than the JSON envelope."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        if status is not None:
            message = f"{message} (HTTP {status})"
        super().__init__(message)


class ApiError(PayeerError):
    """Raised when the exchange reports ``success: false``.

    The message is the exchange error code, ``error`` keeps the whole error
    object for inspection.
    """

    def __init__(self, code: str, error: dict[str, Any] | None = None):
        self.code = code
        self.error = error or {}
        super().__init__(code)
