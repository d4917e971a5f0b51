from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, SecretStr

from .api.base import DEFAULT_BASE_URL


class ProxySettings(BaseModel):
    enabled: bool = False
    url: str | None = None
    username: str | None = None
    password: SecretStr | None = None

    model_config = {"extra": "forbid"}


class Credentials(BaseModel):
    api_id: SecretStr
    api_secret: SecretStr

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    env: str = "dev"
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = Field(default=None, gt=0)
    credentials: Credentials | None = None
    proxy: ProxySettings = Field(default_factory=ProxySettings)

    model_config = {"extra": "forbid"}

    def redacted(self) -> dict[str, Any]:
        data = self.model_dump(mode="json")
        creds = data.get("credentials")
        if isinstance(creds, dict):
            if "api_id" in creds:
                creds["api_id"] = "***"
            if "api_secret" in creds:
                creds["api_secret"] = "***"
        proxy = data.get("proxy")
        if isinstance(proxy, dict) and proxy.get("password") is not None:
            proxy["password"] = "***"
        return data
