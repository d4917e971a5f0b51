"""Client construction helpers."""

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from .base import ProxyConfig
from .client import PayeerClient

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)


def create_client(
    api_id: str,
    api_secret: str,
    *,
    proxy: dict[str, Any] | None = None,
    **options: Any,
) -> PayeerClient:
    """Create a Payeer client instance.

    Args:
        api_id: API identifier
        api_secret: API shared secret
        proxy: Proxy configuration (url, username, password)
        **options: ``base_url`` and ``timeout``

    Returns:
        Configured client

    Raises:
        ValueError: If a credential is empty
    """
    if not api_id or not api_secret:
        raise ValueError("Payeer client requires both api_id and api_secret")

    proxy_config = None
    if proxy:
        proxy_config = ProxyConfig(
            url=proxy.get("url"),
            username=proxy.get("username"),
            password=proxy.get("password"),
        )

    return PayeerClient(api_id, api_secret, proxy=proxy_config, **options)


def create_client_from_settings(settings: "Settings") -> PayeerClient:
    """Create a client from loaded settings.

    Raises:
        ValueError: If no credentials are configured
    """
    if settings.credentials is None:
        raise ValueError("No Payeer credentials configured")

    proxy = None
    if settings.proxy.enabled:
        proxy = {
            "url": settings.proxy.url,
            "username": settings.proxy.username,
            "password": settings.proxy.password.get_secret_value() if settings.proxy.password else None,
        }

    client = create_client(
        settings.credentials.api_id.get_secret_value(),
        settings.credentials.api_secret.get_secret_value(),
        proxy=proxy,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )
    logger.info("Initialized Payeer client for %s (env=%s)", settings.base_url, settings.env)
    return client
