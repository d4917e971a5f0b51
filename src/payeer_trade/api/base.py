"""Request signing and dispatch for the Payeer trade API."""

from __future__ import annotations

import asyncio
import hashlib
import hmac
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping

import aiohttp

from .errors import (
    ApiError,
    MalformedResponseError,
    SerializationError,
    TransportError,
)
from .protocol import ApiFailure, ApiSuccess, parse_response

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://payeer.com/api/trade"


class ProxyConfig:
    """HTTP proxy configuration."""

    def __init__(self, url: str | None = None, username: str | None = None, password: str | None = None):
        self.url = url
        self.username = username
        self.password = password

    @property
    def proxy_url(self) -> str | None:
        if not self.url:
            return None
        if self.username and self.password:
            protocol = self.url.split("://")[0] if "://" in self.url else "http"
            rest = self.url.split("://")[1] if "://" in self.url else self.url
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        return self.url


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Everything needed to send one authenticated call."""

    url: str
    body: str
    headers: dict[str, str]

    def __repr__(self) -> str:
        return f"SignedRequest(url={self.url!r}, body={self.body!r})"


class SignedApiClient:
    """Signs requests with the account secret and posts them to the exchange.

    Every API call goes through :meth:`dispatch`.
    """

    def __init__(
        self,
        api_id: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        proxy: ProxyConfig | None = None,
    ):
        """Initialize client.

        Args:
            api_id: API identifier sent in the ``API-ID`` header
            api_secret: Shared secret used to sign requests
            base_url: Trade API root, endpoint names are appended to it
            timeout: Total request timeout in seconds (None disables it)
            proxy: Proxy configuration
        """
        self._api_id = api_id
        self._api_secret = api_secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.proxy = proxy or ProxyConfig()
        self._last_error: dict[str, Any] | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"

    @property
    def api_id(self) -> str:
        return self._api_id

    @property
    def last_error(self) -> dict[str, Any] | None:
        """Error object of the most recent failed call, None if none failed yet.

        Shared by every call on this instance; prefer ``ApiError.error``.
        """
        return self._last_error

    @staticmethod
    def generate_signature(secret: str, message: str) -> str:
        """Return the hex-encoded HMAC-SHA256 of ``message`` keyed by ``secret``."""
        return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()

    @staticmethod
    def timestamp_ms() -> int:
        """Current time in whole milliseconds since epoch."""
        return round(time.time() * 1000)

    def get_url(self, method: str) -> str:
        return f"{self.base_url}/{method}"

    def sign_request(self, method: str, fields: Mapping[str, Any] | None = None) -> SignedRequest:
        """Stamp, serialize and sign a request.

        ``ts`` is always appended last and replaces any caller value.

        Raises:
            ValueError: If ``method`` is empty
            SerializationError: If a field cannot be encoded as JSON
        """
        if not method:
            raise ValueError("API method name must not be empty")

        payload = dict(fields or {})
        payload.pop("ts", None)
        payload["ts"] = self.timestamp_ms()

        try:
            body = json.dumps(payload, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot encode request for {method}: {exc}") from exc

        signature = self.generate_signature(self._api_secret, method + body)
        headers = {
            "Content-Type": "application/json",
            "API-ID": self._api_id,
            "API-SIGN": signature,
        }
        return SignedRequest(self.get_url(method), body, headers)

    def _new_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))

    async def _post(self, request: SignedRequest) -> tuple[int, bytes]:
        try:
            async with self._new_session() as session:
                async with session.post(
                    request.url,
                    data=request.body,
                    headers=request.headers,
                    proxy=self.proxy.proxy_url,
                ) as resp:
                    return resp.status, await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error("Request to %s failed: %s", request.url, exc)
            raise TransportError(f"Request to {request.url} failed: {exc}") from exc

    async def dispatch(self, method: str, fields: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Send one signed call and return the decoded response.

        Args:
            method: Endpoint name, e.g. ``order_create``
            fields: Request fields; the mapping is not modified

        Returns:
            Decoded response object (``success`` is true)

        Raises:
            SerializationError: Fields are not JSON-encodable
            TransportError: Network or TLS failure
            MalformedResponseError: Body is not the JSON envelope
            ApiError: Exchange reported a failure
        """
        request = self.sign_request(method, fields)
        status, body = await self._post(request)
        logger.debug("POST %s -> HTTP %s", method, status)

        try:
            data = json.loads(body)
        except ValueError as exc:
            logger.error("Non-JSON response from %s (HTTP %s)", method, status)
            raise MalformedResponseError(f"Response from {method} is not valid JSON", status) from exc

        result = parse_response(data, status)
        if isinstance(result, ApiFailure):
            self._last_error = result.details
            logger.warning("API call %s failed with code %s", method, result.code)
            raise ApiError(result.code, result.details)
        return result.payload

    async def request(self, method: str, fields: Mapping[str, Any] | None = None) -> ApiSuccess:
        """Like :meth:`dispatch` but returns the typed success envelope."""
        return ApiSuccess(await self.dispatch(method, fields))
