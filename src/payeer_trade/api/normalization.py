"""Pair normalization for Payeer instrument names."""

from __future__ import annotations


def normalize_pair(pair: str) -> str:
    """Normalize a pair (or comma-separated list of pairs) to Payeer format.

    Payeer names instruments as ``BASE_QUOTE``:
    - btc_usdt -> BTC_USDT
    - BTC-USDT -> BTC_USDT
    - BTC/USDT -> BTC_USDT
    - "btc/usdt, eth_rub" -> BTC_USDT,ETH_RUB

    Args:
        pair: Pair in any of the above formats

    Returns:
        Normalized pair
    """
    if not pair:
        return pair

    items = [item.strip() for item in pair.split(",")]
    return ",".join(
        item.replace("-", "_").replace("/", "_").replace(" ", "").upper()
        for item in items
        if item
    )
