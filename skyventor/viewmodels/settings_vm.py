from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from ..domain.entities import DEFAULT_SETTINGS, Language, Settings, Theme, ThemePreference
from ..domain.errors import UseCaseError
from ..domain.theme import effective_theme
from ..usecases.user_settings import LoadSettings, SaveSettings
from .notifications import ToastFn, discard_toast
from .text_vm import TextResolver

ThemeFn = Callable[[Theme], None]


class SettingsSession:
    """Owns the process-wide Settings and applies them to text and theme.

    Setters mutate, apply, then persist. A failed save is reported with a
    toast and the in-memory value is kept.
    """

    def __init__(
        self,
        *,
        load_settings: LoadSettings,
        save_settings: SaveSettings,
        text: TextResolver,
        on_theme: Optional[ThemeFn] = None,
        on_toast: ToastFn = discard_toast,
        system_is_dark: bool = True,
    ) -> None:
        self._load_settings = load_settings
        self._save_settings = save_settings
        self.text = text
        self.on_theme = on_theme
        self.on_toast = on_toast
        self.system_is_dark = bool(system_is_dark)
        self.settings: Settings = DEFAULT_SETTINGS
        self.applied_theme: Theme = effective_theme(self.settings.theme, self.system_is_dark)
        self._log = logging.getLogger(__name__)

    @property
    def theme(self) -> ThemePreference:
        return self.settings.theme

    @property
    def language(self) -> Language:
        return self.settings.language

    async def initialize(self) -> Settings:
        """Load stored settings, falling back to the defaults on any failure."""
        try:
            loaded = await self._load_settings()
        except UseCaseError as err:
            self._log.warning("Settings load failed (%s): %s; using defaults", err.code, err.message)
            loaded = DEFAULT_SETTINGS
        self.settings = loaded
        self._apply_theme()
        self.text.set_language(self.settings.language)
        return self.settings

    async def set_theme(self, theme: ThemePreference) -> bool:
        """Apply and persist a theme preference; returns whether the save succeeded."""
        self.settings = replace(self.settings, theme=theme)
        self._apply_theme()
        return await self._persist()

    async def set_language(self, language: Language) -> bool:
        """Apply and persist a language; the text refresh runs on every call."""
        self.settings = replace(self.settings, language=language)
        self.text.set_language(language)
        return await self._persist()

    def on_system_theme_changed(self, system_is_dark: bool) -> Theme:
        """Signal from the OS; only changes the applied theme under ``auto``."""
        self.system_is_dark = bool(system_is_dark)
        return self._apply_theme()

    # ------------------------------------------------------------------
    def _apply_theme(self) -> Theme:
        self.applied_theme = effective_theme(self.settings.theme, self.system_is_dark)
        if self.on_theme:
            self.on_theme(self.applied_theme)
        return self.applied_theme

    async def _persist(self) -> bool:
        try:
            await self._save_settings(self.settings)
        except UseCaseError as err:
            self._log.warning("Settings save failed (%s): %s", err.code, err.message)
            self.on_toast("error", self.text.resolve("toast.error"))
            return False
        self.on_toast("success", self.text.resolve("toast.settings_saved"))
        return True


__all__ = ["SettingsSession"]
