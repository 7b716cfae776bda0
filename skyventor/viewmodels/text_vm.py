"""Localized text resolution for view models.

Call context:
    One ``TextResolver`` is created by ``skyventor.app.controller.AppController``
    and shared by every view model that shows user-visible text.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, Mapping, Optional

from ..domain.entities import LANGUAGES, Language
from ..domain.translations import PAGE_TEXT_KEYS, TRANSLATIONS

RefreshFn = Callable[[Dict[str, str]], None]

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class TextResolver:
    """Resolves translation keys for the active language.

    Keys displayed on screen are registered with :meth:`bind`; every
    :meth:`set_language` call re-resolves all of them and hands the complete
    mapping to ``on_refresh`` in one call.
    """

    def __init__(
        self,
        *,
        language: Language = "ru",
        table: Mapping[str, Mapping[str, str]] = TRANSLATIONS,
        on_refresh: Optional[RefreshFn] = None,
        bound_keys=PAGE_TEXT_KEYS,
    ) -> None:
        self._table = table
        self._language = self._coerce_language(language)
        self.on_refresh = on_refresh
        self._bound: Dict[str, Dict[str, str]] = {key: {} for key in bound_keys}
        self._log = logging.getLogger(__name__)

    @property
    def language(self) -> Language:
        return self._language

    def resolve(self, key: str, params: Optional[Mapping[str, object]] = None) -> str:
        """Return the template for ``key`` with ``{name}`` placeholders filled.

        A key missing from the active table resolves to the key itself.
        Placeholders without a matching parameter are left as they are.
        """
        text = self._table.get(self._language, {}).get(key)
        if text is None:
            self._log.debug("Missing translation for %r (%s)", key, self._language)
            text = key
        if not params:
            return text
        values = {str(name): str(value) for name, value in params.items()}
        # One pass over the template; inserted values are never rescanned.
        return _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), text)

    __call__ = resolve

    def bind(self, key: str, params: Optional[Mapping[str, object]] = None) -> str:
        """Register ``key`` as displayed and return its current text."""
        self._bound[key] = {str(k): str(v) for k, v in (params or {}).items()}
        return self.resolve(key, self._bound[key])

    def unbind(self, key: str) -> None:
        self._bound.pop(key, None)

    def set_language(self, language: Language) -> Dict[str, str]:
        """Switch the active table and refresh every bound text.

        The refresh runs on every call, including repeated calls with the
        current language.
        """
        self._language = self._coerce_language(language)
        return self.refresh()

    def refresh(self) -> Dict[str, str]:
        texts = {key: self.resolve(key, params) for key, params in self._bound.items()}
        if self.on_refresh:
            self.on_refresh(texts)
        return texts

    def _coerce_language(self, language: str) -> Language:
        if language not in LANGUAGES or language not in self._table:
            raise ValueError(f"Unsupported language: {language!r}")
        return language  # type: ignore[return-value]


__all__ = ["TextResolver"]
