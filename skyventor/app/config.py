"""Runtime configuration for the client, with ``SKYVENTOR_*`` environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from ..domain.rate_ladder import DEFAULT_MULTIPLIERS
from ..utils.logging import env_truthy

ENV_PREFIX = "SKYVENTOR_"


def _default_settings_dir() -> str:
    return str(Path.home() / ".skyventor")


@dataclass
class AppConfig:
    """Typed runtime settings consumed by ``AppController``."""

    backend_url: str = ""
    api_key: str = ""
    request_timeout_s: float = 10
    retries: int = 2
    # Upper bound for one backend call as seen by the view models.
    conversion_timeout_s: float = 30
    settings_dir: str = field(default_factory=_default_settings_dir)
    ladder_multipliers: Tuple[int, ...] = DEFAULT_MULTIPLIERS
    default_from: str = "USD"
    default_to: str = "RUB"
    offline: bool = False

    def __post_init__(self) -> None:
        if self.request_timeout_s <= 0:
            raise ValueError("request_timeout_s must be positive.")
        if self.conversion_timeout_s <= 0:
            raise ValueError("conversion_timeout_s must be positive.")
        if self.retries < 0:
            raise ValueError("retries must be non-negative.")
        if not self.ladder_multipliers or any(m <= 0 for m in self.ladder_multipliers):
            raise ValueError("ladder_multipliers must be positive integers.")

    @property
    def use_offline_backend(self) -> bool:
        return self.offline or not self.backend_url.strip()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ

        def _get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        updates: Dict[str, Any] = {}
        if _get("BACKEND_URL"):
            updates["backend_url"] = _get("BACKEND_URL")
        if _get("API_KEY"):
            updates["api_key"] = _get("API_KEY")
        if _get("REQUEST_TIMEOUT_S"):
            updates["request_timeout_s"] = _coerce_float("REQUEST_TIMEOUT_S", _get("REQUEST_TIMEOUT_S"))
        if _get("RETRIES"):
            updates["retries"] = _coerce_int("RETRIES", _get("RETRIES"))
        if _get("CONVERSION_TIMEOUT_S"):
            updates["conversion_timeout_s"] = _coerce_float(
                "CONVERSION_TIMEOUT_S", _get("CONVERSION_TIMEOUT_S")
            )
        if _get("SETTINGS_DIR"):
            updates["settings_dir"] = _get("SETTINGS_DIR")
        if _get("LADDER_MULTIPLIERS"):
            updates["ladder_multipliers"] = parse_multipliers(_get("LADDER_MULTIPLIERS"))
        if _get("DEFAULT_FROM"):
            updates["default_from"] = _get("DEFAULT_FROM").upper()
        if _get("DEFAULT_TO"):
            updates["default_to"] = _get("DEFAULT_TO").upper()
        if _get("OFFLINE"):
            updates["offline"] = env_truthy(_get("OFFLINE"))
        return cls(**updates)


def parse_multipliers(text: str) -> Tuple[int, ...]:
    """Parse ``"1,10,100"`` into ``(1, 10, 100)`` keeping order and duplicates."""
    values = []
    for token in text.replace(";", ",").split(","):
        token = token.strip()
        if not token:
            continue
        values.append(_coerce_int("LADDER_MULTIPLIERS", token))
    if not values:
        raise ValueError("LADDER_MULTIPLIERS must list at least one integer.")
    return tuple(values)


def _coerce_int(name: str, value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer.") from exc


def _coerce_float(name: str, value: Any) -> float:
    try:
        return float(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number.") from exc


__all__ = ["AppConfig", "parse_multipliers"]
