"""Response envelope types for the Payeer trade API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .errors import MalformedResponseError

ACTIONS = ("sell", "buy")
ORDER_STATUSES = ("success", "processing", "waiting", "canceled")

ORDER_TYPE_LIMIT = "limit"
ORDER_TYPE_MARKET = "market"
ORDER_TYPE_STOP_LIMIT = "stop_limit"


@dataclass(frozen=True, slots=True)
class ApiSuccess:
    """Successful response; ``payload`` is the whole decoded envelope."""

    payload: dict[str, Any]

    def get(self, key: str) -> Any:
        """Return a required response field."""
        if key not in self.payload:
            raise MalformedResponseError(f"Response is missing field {key!r}")
        return self.payload[key]


@dataclass(frozen=True, slots=True)
class ApiFailure:
    """Failed response as reported by the exchange."""

    code: str
    details: dict[str, Any] = field(default_factory=dict)


ApiResponse = Union[ApiSuccess, ApiFailure]


def parse_response(data: Any, status: int | None = None) -> ApiResponse:
    """Classify a decoded response body by its ``success`` flag.

    Args:
        data: Decoded JSON body
        status: HTTP status code, only used in error messages

    Returns:
        ApiSuccess when ``success`` is exactly ``true``, ApiFailure otherwise

    Raises:
        MalformedResponseError: If the body is not an object or has no ``success`` key
    """
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Response root must be an object, got {type(data).__name__}", status
        )
    if "success" not in data:
        raise MalformedResponseError("Response is missing field 'success'", status)

    if data["success"] is True:
        return ApiSuccess(data)

    error = data.get("error")
    if not isinstance(error, dict):
        error = {"code": str(error)} if error is not None else {}
    code = error.get("code")
    return ApiFailure(str(code) if code is not None else "UNKNOWN_ERROR", error)
