"""Payeer trade API client."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from .base import SignedApiClient
from .errors import ErrorKind, InvalidAmountError
from .filters import (
    build_history_filter,
    build_order_filter,
    validate_action,
    validate_positive,
    validate_status,
)
from .normalization import normalize_pair
from .protocol import ORDER_TYPE_LIMIT, ORDER_TYPE_MARKET, ORDER_TYPE_STOP_LIMIT

logger = logging.getLogger(__name__)


class PayeerClient(SignedApiClient):
    """Payeer exchange client.

    Each method performs exactly one signed call. Arguments are validated
    before anything is sent.
    """

    async def info(self, pair: str | None = None) -> dict[str, Any]:
        """Fetch limits, fees and precision for all pairs or the given ones."""
        fields = {"pair": normalize_pair(pair)} if pair else {}
        return (await self.request("info", fields)).payload

    async def ticker(self, pair: str | None = None) -> dict[str, Any]:
        """Fetch price statistics keyed by pair."""
        fields = {"pair": normalize_pair(pair)} if pair else {}
        return (await self.request("ticker", fields)).get("pairs")

    async def orders(self, pair: str) -> dict[str, Any]:
        """Fetch the order book for ``pair``."""
        return (await self.request("orders", {"pair": normalize_pair(pair)})).get("pairs")

    async def trades(self, pair: str) -> dict[str, Any]:
        """Fetch recent public trades for ``pair``."""
        return (await self.request("trades", {"pair": normalize_pair(pair)})).get("pairs")

    async def account(self) -> dict[str, Any]:
        """Fetch account balances keyed by currency."""
        return (await self.request("account")).get("balances")

    async def order_status(self, order_id: int | str) -> dict[str, Any]:
        return (await self.request("order_status", {"order_id": order_id})).get("order")

    async def time(self) -> int:
        """Fetch server time in milliseconds."""
        return (await self.request("time")).get("time")

    async def _order_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        logger.info(
            "Creating %s %s order on %s",
            fields.get("type"),
            fields.get("action"),
            fields.get("pair"),
        )
        return await self.dispatch("order_create", fields)

    async def limit_order(self, pair: str, action: str, amount: float, price: float) -> dict[str, Any]:
        """Place a limit order.

        Args:
            pair: Trading pair, e.g. BTC_USDT
            action: ``buy`` or ``sell``
            amount: Quantity of the base currency
            price: Limit price

        Returns:
            Full order_create response
        """
        validate_action(action)
        validate_positive(amount, ErrorKind.AMOUNT_NOT_POSITIVE)
        validate_positive(price, ErrorKind.PRICE_NOT_POSITIVE)

        return await self._order_create({
            "type": ORDER_TYPE_LIMIT,
            "pair": normalize_pair(pair),
            "action": action,
            "amount": amount,
            "price": price,
        })

    async def market_order(
        self,
        pair: str,
        action: str,
        amount: float | None = None,
        value: float | None = None,
    ) -> dict[str, Any]:
        """Place a market order sized by ``amount`` (base) or ``value`` (quote).

        Exactly one of the two must be positive.
        """
        validate_action(action)
        has_amount = amount is not None and amount > 0
        has_value = value is not None and value > 0
        if not has_amount and not has_value:
            raise InvalidAmountError(ErrorKind.AMOUNT_OR_VALUE_REQUIRED)
        if has_amount and has_value:
            raise InvalidAmountError(ErrorKind.AMOUNT_AND_VALUE_EXCLUSIVE)

        fields: dict[str, Any] = {
            "type": ORDER_TYPE_MARKET,
            "pair": normalize_pair(pair),
            "action": action,
        }
        if has_amount:
            fields["amount"] = amount
        else:
            fields["value"] = value
        return await self._order_create(fields)

    async def stop_limit_order(
        self,
        pair: str,
        action: str,
        amount: float,
        price: float,
        stop_price: float,
    ) -> dict[str, Any]:
        """Place a stop-limit order that becomes a limit order at ``stop_price``."""
        validate_action(action)
        validate_positive(amount, ErrorKind.AMOUNT_NOT_POSITIVE)
        validate_positive(price, ErrorKind.PRICE_NOT_POSITIVE)
        validate_positive(stop_price, ErrorKind.STOP_PRICE_NOT_POSITIVE)

        return await self._order_create({
            "type": ORDER_TYPE_STOP_LIMIT,
            "pair": normalize_pair(pair),
            "action": action,
            "amount": amount,
            "price": price,
            "stop_price": stop_price,
        })

    async def cancel_order(self, order_id: int | str) -> bool:
        return (await self.request("order_cancel", {"order_id": order_id})).get("success")

    async def cancel_orders(self, pair: str | None = None, action: str | None = None) -> Any:
        """Cancel all open orders matching the filter; returns cancelled ids."""
        fields = build_order_filter(action, pair)
        return (await self.request("orders_cancel", fields)).get("items")

    async def my_orders(self, pair: str | None = None, action: str | None = None) -> Any:
        """Fetch open orders matching the filter."""
        fields = build_order_filter(action, pair)
        return (await self.request("my_orders", fields)).get("items")

    async def my_trades(
        self,
        pair: str | None = None,
        action: str | None = None,
        date_from: int | datetime | None = None,
        date_to: int | datetime | None = None,
        last_id: int | None = None,
        limit: int = 50,
    ) -> Any:
        """Fetch own trades, newest first, paged by ``last_id``."""
        fields = build_history_filter(limit, pair, action, date_from, date_to, last_id)
        return (await self.request("my_trades", fields)).get("items")

    async def my_history(
        self,
        pair: str | None = None,
        action: str | None = None,
        status: str | None = None,
        date_from: int | datetime | None = None,
        date_to: int | datetime | None = None,
        last_id: int | None = None,
        limit: int = 50,
    ) -> Any:
        """Fetch own order history, optionally filtered by order status."""
        if status:
            validate_status(status)
        fields = build_history_filter(limit, pair, action, date_from, date_to, last_id)
        if status:
            fields["status"] = status
        return (await self.request("my_history", fields)).get("items")
