# trapper/app/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from trapper.core.errors import ConfigError
from trapper.model import DEFAULT_PORT


@dataclass(frozen=True)
class SenderConfig:
    server: str
    port: int = DEFAULT_PORT
    timeout_s: Optional[float] = 10.0
    max_payload: Optional[int] = None
    host: Optional[str] = None  # default sample host for CLI input


_TYPES: Dict[str, tuple] = {
    "server": (str,),
    "port": (int,),
    "timeout_s": (int, float, type(None)),
    "max_payload": (int, type(None)),
    "host": (str, type(None)),
}


def config_from_dict(data: Dict[str, Any]) -> SenderConfig:
    known = {f.name for f in fields(SenderConfig)}
    for key in data:
        if key not in known:
            raise ConfigError(
                f"Unknown config key '{key}'.",
                hint=f"Valid keys: {sorted(known)}",
                details={"key": key},
            )

    if "server" not in data:
        raise ConfigError("Missing required config key 'server'.")

    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, _TYPES[key]):
            raise ConfigError(
                f"Invalid value for config key '{key}': {value!r}",
                details={"key": key, "value": value},
            )

    if data.get("max_payload") is not None and data["max_payload"] <= 0:
        raise ConfigError("max_payload must be a positive number of bytes.", details={"max_payload": data["max_payload"]})
    if data.get("timeout_s") is not None and data["timeout_s"] <= 0:
        raise ConfigError("timeout_s must be positive (or null to block).", details={"timeout_s": data["timeout_s"]})

    return SenderConfig(**data)


def load_config(path: str | Path) -> SenderConfig:
    """Read a sender config from a YAML mapping."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}", hint=str(e)) from None

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    return config_from_dict(data)
