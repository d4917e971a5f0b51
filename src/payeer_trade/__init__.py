"""payeer_trade: signed client for the Payeer trade API."""

from .settings import Settings
from .config import load_settings
from .api import (
    ApiError,
    PayeerClient,
    PayeerError,
    ValidationError,
    create_client,
    create_client_from_settings,
    normalize_pair,
)

__all__ = [
    "Settings",
    "load_settings",
    "ApiError",
    "PayeerClient",
    "PayeerError",
    "ValidationError",
    "create_client",
    "create_client_from_settings",
    "normalize_pair",
]
