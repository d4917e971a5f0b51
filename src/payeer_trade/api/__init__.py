"""Signed client for the Payeer trade API."""

from .base import DEFAULT_BASE_URL, ProxyConfig, SignedApiClient, SignedRequest
from .client import PayeerClient
from .errors import (
    ApiError,
    ErrorKind,
    InvalidActionError,
    InvalidAmountError,
    InvalidLimitError,
    InvalidPriceError,
    InvalidStatusError,
    MalformedResponseError,
    PayeerError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .factory import create_client, create_client_from_settings
from .filters import build_history_filter, build_order_filter
from .normalization import normalize_pair
from .protocol import ApiFailure, ApiResponse, ApiSuccess, parse_response

__all__ = [
    "DEFAULT_BASE_URL",
    "ProxyConfig",
    "SignedApiClient",
    "SignedRequest",
    "PayeerClient",
    "ApiError",
    "ErrorKind",
    "InvalidActionError",
    "InvalidAmountError",
    "InvalidLimitError",
    "InvalidPriceError",
    "InvalidStatusError",
    "MalformedResponseError",
    "PayeerError",
    "SerializationError",
    "TransportError",
    "ValidationError",
    "create_client",
    "create_client_from_settings",
    "build_history_filter",
    "build_order_filter",
    "normalize_pair",
    "ApiFailure",
    "ApiResponse",
    "ApiSuccess",
    "parse_response",
]
