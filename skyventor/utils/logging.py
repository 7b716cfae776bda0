"""Root logger setup for the SkyVentor client.

Environment overrides:
  - SKYVENTOR_LOG_LEVEL: explicit level, by name or number
  - SKYVENTOR_DEBUG / SKYVENTOR_DEBUG_LOGGING: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "SKYVENTOR_LOG_LEVEL"
DEBUG_ENV_VARS = ("SKYVENTOR_DEBUG", "SKYVENTOR_DEBUG_LOGGING")
# Connection-pool chatter from requests; only shown when debugging.
TRANSPORT_LOGGERS = ("urllib3",)


def env_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


def parse_level(value: Union[int, str, None], fallback: int = logging.INFO) -> int:
    """Level for a name (``"debug"``) or number (``"10"``); ``fallback`` otherwise."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper()) if text else None
    return candidate if isinstance(candidate, int) else fallback


def level_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV_VAR)
    if explicit and explicit.strip():
        return parse_level(explicit)
    if any(env_truthy(env.get(name)) for name in DEBUG_ENV_VARS):
        return logging.DEBUG
    return None


def configure_root(
    default_level: Union[int, str] = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Configure the root logger once and return the effective level."""
    forced = level_from_env(environ)
    effective = forced if forced is not None else parse_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    transport_level = logging.DEBUG if effective <= logging.DEBUG else logging.WARNING
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)
