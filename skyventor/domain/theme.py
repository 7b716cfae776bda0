"""Effective theme resolution from the stored preference and the OS signal."""

from __future__ import annotations

from .entities import THEME_PREFERENCES, Theme, ThemePreference


def effective_theme(preference: ThemePreference, system_is_dark: bool) -> Theme:
    """Map a theme preference to the theme actually applied.

    ``dark`` and ``light`` are returned as-is; ``auto`` follows the system.
    """
    if preference not in THEME_PREFERENCES:
        raise ValueError(f"Unsupported theme preference: {preference!r}")
    if preference == "auto":
        return "dark" if system_is_dark else "light"
    return preference


__all__ = ["effective_theme"]
