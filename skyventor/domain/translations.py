"""Static translation table keyed by language, then by dotted message key.

Templates use ``{name}`` placeholders filled by
:meth:`skyventor.viewmodels.text_vm.TextResolver.resolve`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

_RU = {
    # Navigation
    "nav.converter": "Конвертер",
    "nav.rates": "Таблица курсов",
    "nav.settings": "Настройки",
    "nav.about": "О проекте",
    # Converter
    "converter.title": "Конвертер валют",
    "converter.button": "Конвертировать",
    "converter.rate": "{from} = {to}",
    "converter.updated": "Обновлено: {time}",
    # Rates
    "rates.title": "Таблица курсов",
    "rates.multiplier": "Множитель",
    # Settings
    "settings.title": "Настройки",
    "settings.theme": "Тема оформления",
    "settings.theme.dark": "Темная",
    "settings.theme.light": "Светлая",
    "settings.theme.auto": "Авто",
    "settings.language": "Язык интерфейса",
    "settings.language.ru": "Русский",
    "settings.language.en": "English",
    "settings.info": "Настройки автоматически сохраняются",
    # About
    "about.title": "О проекте",
    "about.version": "Версия {version} (Stable)",
    "about.author": "Автор:",
    "about.tech": "Используемые технологии:",
    "about.github": "GitHub репозиторий",
    # Footer
    "footer.text": "SkyVentor // 2026 V2 (Stable)",
    # Toast
    "toast.success": "Успешно!",
    "toast.error": "Ошибка!",
    "toast.converted": "Конвертация выполнена",
    "toast.settings_saved": "Настройки сохранены",
    # Errors
    "error.amount": "Введите корректную сумму",
    "error.network": "Ошибка сети. Проверьте подключение.",
    "error.api": "Не удалось получить курс валют",
    "error.currencies": "Не удалось загрузить список валют",
}

_EN = {
    # Navigation
    "nav.converter": "Converter",
    "nav.rates": "Rates Table",
    "nav.settings": "Settings",
    "nav.about": "About",
    # Converter
    "converter.title": "Currency Converter",
    "converter.button": "Convert",
    "converter.rate": "{from} = {to}",
    "converter.updated": "Updated: {time}",
    # Rates
    "rates.title": "Exchange Rates",
    "rates.multiplier": "Multiplier",
    # Settings
    "settings.title": "Settings",
    "settings.theme": "Theme",
    "settings.theme.dark": "Dark",
    "settings.theme.light": "Light",
    "settings.theme.auto": "Auto",
    "settings.language": "Language",
    "settings.language.ru": "Русский",
    "settings.language.en": "English",
    "settings.info": "Settings are saved automatically",
    # About
    "about.title": "About",
    "about.version": "Version {version} (Stable)",
    "about.author": "Author:",
    "about.tech": "Technologies used:",
    "about.github": "GitHub Repository",
    # Footer
    "footer.text": "SkyVentor // 2026 V2 (Stable)",
    # Toast
    "toast.success": "Success!",
    "toast.error": "Error!",
    "toast.converted": "Conversion completed",
    "toast.settings_saved": "Settings saved",
    # Errors
    "error.amount": "Enter valid amount",
    "error.network": "Network error. Check your connection.",
    "error.api": "Failed to fetch exchange rate",
    "error.currencies": "Failed to load currencies",
}

TRANSLATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {"ru": MappingProxyType(_RU), "en": MappingProxyType(_EN)}
)

# Static labels shown on every page; re-resolved on each language switch.
PAGE_TEXT_KEYS: Tuple[str, ...] = (
    "nav.converter",
    "nav.rates",
    "nav.settings",
    "nav.about",
    "converter.title",
    "converter.button",
    "rates.title",
    "rates.multiplier",
    "settings.title",
    "settings.theme",
    "settings.language",
    "settings.theme.dark",
    "settings.theme.light",
    "settings.theme.auto",
    "settings.language.ru",
    "settings.language.en",
    "settings.info",
    "about.title",
    "about.author",
    "about.tech",
    "about.github",
    "footer.text",
)
