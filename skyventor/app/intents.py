"""User intents and their dispatch to view-model commands.

A rendering surface turns clicks and key presses into intent objects and
awaits :meth:`IntentDispatcher.dispatch`; the core never sees UI events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Type, Union

from ..domain.entities import CurrencyCode, Language, ThemePreference
from .controller import AppController


@dataclass(frozen=True)
class Convert:
    pass


@dataclass(frozen=True)
class Swap:
    pass


@dataclass(frozen=True)
class SetAmount:
    amount: str


@dataclass(frozen=True)
class SelectPair:
    from_code: CurrencyCode
    to_code: CurrencyCode


@dataclass(frozen=True)
class SelectRatesPair:
    from_code: CurrencyCode
    to_code: CurrencyCode


@dataclass(frozen=True)
class RefreshRates:
    pass


@dataclass(frozen=True)
class SetTheme:
    theme: ThemePreference


@dataclass(frozen=True)
class SetLanguage:
    language: Language


@dataclass(frozen=True)
class SystemThemeChanged:
    is_dark: bool


Intent = Union[
    Convert,
    Swap,
    SetAmount,
    SelectPair,
    SelectRatesPair,
    RefreshRates,
    SetTheme,
    SetLanguage,
    SystemThemeChanged,
]


class IntentDispatcher:
    """Route intents to the controller's view models."""

    def __init__(self, controller: AppController) -> None:
        self.controller = controller
        self._log = logging.getLogger(__name__)
        self._handlers: Dict[Type[Any], Callable[[Any], Awaitable[Any]]] = {
            Convert: self._convert,
            Swap: self._swap,
            SetAmount: self._set_amount,
            SelectPair: self._select_pair,
            SelectRatesPair: self._select_rates_pair,
            RefreshRates: self._refresh_rates,
            SetTheme: self._set_theme,
            SetLanguage: self._set_language,
            SystemThemeChanged: self._system_theme_changed,
        }

    async def dispatch(self, intent: Intent) -> Any:
        handler = self._handlers.get(type(intent))
        if handler is None:
            raise TypeError(f"Unsupported intent: {intent!r}")
        self._log.debug("Dispatching %r", intent)
        return await handler(intent)

    async def _convert(self, intent: Convert) -> Any:
        return await self.controller.converter.cmd_convert()

    async def _swap(self, intent: Swap) -> Any:
        return await self.controller.converter.cmd_swap()

    async def _set_amount(self, intent: SetAmount) -> Any:
        return await self.controller.converter.cmd_set_amount(intent.amount)

    async def _select_pair(self, intent: SelectPair) -> None:
        self.controller.converter.select_pair(intent.from_code, intent.to_code)

    async def _select_rates_pair(self, intent: SelectRatesPair) -> Any:
        return await self.controller.rates.cmd_select_pair(intent.from_code, intent.to_code)

    async def _refresh_rates(self, intent: RefreshRates) -> Any:
        return await self.controller.rates.cmd_refresh()

    async def _set_theme(self, intent: SetTheme) -> bool:
        return await self.controller.settings.set_theme(intent.theme)

    async def _set_language(self, intent: SetLanguage) -> bool:
        return await self.controller.settings.set_language(intent.language)

    async def _system_theme_changed(self, intent: SystemThemeChanged) -> Any:
        return self.controller.settings.on_system_theme_changed(intent.is_dark)


__all__ = [
    "Convert",
    "Intent",
    "IntentDispatcher",
    "RefreshRates",
    "SelectPair",
    "SelectRatesPair",
    "SetAmount",
    "SetLanguage",
    "SetTheme",
    "Swap",
    "SystemThemeChanged",
]
