"""Pytest configuration and fixtures."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from payeer_trade.api.client import PayeerClient


def create_async_response(status=200, json_data=None, text=None):
    """Create a mock aiohttp response."""
    resp = AsyncMock()
    resp.status = status
    body = text if text is not None else json.dumps(json_data if json_data is not None else {})
    if isinstance(body, str):
        body = body.encode()
    resp.read = AsyncMock(return_value=body)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=None)
    return resp


def create_mock_session(resp=None, error=None):
    """Create a mock aiohttp session usable as an async context manager."""
    session = MagicMock()
    if error is not None:
        session.post = MagicMock(side_effect=error)
    else:
        session.post = MagicMock(return_value=resp)
    session.__aenter__ = AsyncMock(return_value=session)
    session.__aexit__ = AsyncMock(return_value=None)
    return session


@pytest.fixture
def api_id():
    """Test API id."""
    return "test_api_id_123456"


@pytest.fixture
def api_secret():
    """Test API secret."""
    return "test_api_secret_789012"


@pytest.fixture
def client(api_id, api_secret):
    """Client with no real network access."""
    return PayeerClient(api_id, api_secret)


@pytest.fixture
def respond(client):
    """Make the client's next session answer with the given response.

    Returns the mock session so tests can inspect ``session.post.call_args``.
    """

    def _respond(json_data=None, *, status=200, text=None, error=None):
        resp = create_async_response(status, json_data, text)
        session = create_mock_session(resp, error)
        client._new_session = MagicMock(return_value=session)
        return session

    return _respond


@pytest.fixture
def sent_fields():
    """Decode the JSON body of the last request posted through a mock session."""

    def _sent_fields(session):
        return json.loads(session.post.call_args.kwargs["data"])

    return _sent_fields


@pytest.fixture
def sample_ticker_response():
    """Sample ticker response data."""
    return {
        "success": True,
        "pairs": {
            "BTC_USDT": {
                "ask": "43790.00",
                "bid": "43520.00",
                "last": "43520.00",
                "min24": "43520.00",
                "max24": "43520.00",
                "delta": "0.00",
                "delta_price": "0.00",
            }
        },
    }


@pytest.fixture
def sample_order_response():
    """Sample order_create response data."""
    return {
        "success": True,
        "order_id": 37054293,
        "params": {
            "pair": "BTC_USDT",
            "type": "limit",
            "action": "buy",
            "amount": "0.0010000000",
            "price": "25000.00",
            "value": "25.00",
        },
    }


@pytest.fixture
def mock_session():
    """Build a standalone mock session answering with ``json_data``."""

    def _mock_session(json_data=None, *, status=200):
        return create_mock_session(create_async_response(status, json_data))

    return _mock_session
