"""Settings loading from a YAML file and ``PAYEER_TRADE_*`` environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .settings import Settings

ENV_PREFIX = "PAYEER_TRADE_"
_RESERVED = {"CONFIG", "LOG_LEVEL"}


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
    return loaded


def env_overrides(environ: Mapping[str, str], prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Collect nested overrides, e.g. ``PAYEER_TRADE_PROXY__URL`` -> ``{"proxy": {"url": ...}}``.

    Values are parsed as YAML scalars except under ``credentials``, which stay strings.
    """
    overrides: dict[str, Any] = {}
    for key, raw in environ.items():
        if not key.startswith(prefix) or key[len(prefix):] in _RESERVED:
            continue
        *parents, leaf = [part.lower() for part in key[len(prefix):].split("__") if part] or [""]
        if not leaf:
            continue

        if parents[:1] == ["credentials"] or (not parents and leaf == "credentials"):
            value: Any = raw
        else:
            try:
                value = yaml.safe_load(raw)
            except yaml.YAMLError:
                value = raw

        node = overrides
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
    return overrides


def _merge(base: dict[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings; the file is optional and environment variables win over it.

    Raises:
        ValueError: If the file root is not a mapping or validation fails
    """
    if config_path is None:
        config_path = os.environ.get(f"{ENV_PREFIX}CONFIG", "config.yml")

    data = _merge(_read_yaml(Path(config_path)), env_overrides(os.environ))
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
