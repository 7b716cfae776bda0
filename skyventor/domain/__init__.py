"""Domain package exports for value objects and pure rules."""

from .entities import (
    DEFAULT_SETTINGS,
    ConversionRequest,
    ConversionResult,
    Currency,
    CurrencyCode,
    CurrencyKind,
    Language,
    RateRow,
    Settings,
    Theme,
    ThemePreference,
)
from .rate_ladder import DEFAULT_MULTIPLIERS, build_ladder
from .theme import effective_theme

__all__ = [
    "DEFAULT_MULTIPLIERS",
    "DEFAULT_SETTINGS",
    "ConversionRequest",
    "ConversionResult",
    "Currency",
    "CurrencyCode",
    "CurrencyKind",
    "Language",
    "RateRow",
    "Settings",
    "Theme",
    "ThemePreference",
    "build_ladder",
    "effective_theme",
]
