"""Adapter, use-case, and view-model wiring for the client runtime.

This module owns construction of the backend adapter and of the session-scoped
objects (settings session, currency catalog, text resolver). View models get
references to those objects; nothing reaches into module-level globals.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from ..adapters.backend_mock import BackendMock
from ..adapters.backend_rest import BackendRestAdapter
from ..adapters.storage_local import StorageLocal
from ..domain.entities import Theme
from ..domain.errors import UseCaseError
from ..domain.ports import BackendPort
from ..usecases.convert_currency import ConvertCurrency
from ..usecases.currency_catalog import CurrencyCatalog
from ..usecases.fetch_rate_ladder import FetchRateLadder
from ..usecases.user_settings import LoadSettings, SaveSettings
from ..viewmodels.converter_vm import ConverterVM
from ..viewmodels.notifications import ToastFn, ToastKind
from ..viewmodels.rates_vm import RatesVM
from ..viewmodels.settings_vm import SettingsSession
from ..viewmodels.text_vm import TextResolver
from .config import AppConfig


def build_backend(config: AppConfig) -> BackendPort:
    """Return the REST adapter, or the offline backend when no URL is configured."""
    if config.use_offline_backend:
        return BackendMock(storage=StorageLocal(root_dir=config.settings_dir))
    return BackendRestAdapter(
        config.backend_url,
        api_key=config.api_key or None,
        request_timeout_s=config.request_timeout_s,
        retries=config.retries,
    )


class AppController:
    """Composition root for one client session.

    Call chain:
        The entry point creates one instance, awaits :meth:`startup`, then
        hands it to :class:`skyventor.app.intents.IntentDispatcher`.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        backend: Optional[BackendPort] = None,
        on_toast: Optional[ToastFn] = None,
        on_theme: Optional[Callable[[Theme], None]] = None,
        on_texts: Optional[Callable[[Dict[str, str]], None]] = None,
        system_is_dark: bool = True,
    ) -> None:
        self.config = config or AppConfig()
        self.backend = backend or build_backend(self.config)
        self._on_toast = on_toast
        self._on_texts = on_texts
        self._log = logging.getLogger(__name__)
        timeout = self.config.conversion_timeout_s

        self.text = TextResolver(on_refresh=self._texts_refreshed)
        self.catalog = CurrencyCatalog(self.backend, timeout_s=timeout)
        self.settings = SettingsSession(
            load_settings=LoadSettings(self.backend, timeout_s=timeout),
            save_settings=SaveSettings(self.backend, timeout_s=timeout),
            text=self.text,
            on_theme=on_theme,
            on_toast=self.toast,
            system_is_dark=system_is_dark,
        )
        self.converter = ConverterVM(
            convert=ConvertCurrency(self.backend, timeout_s=timeout),
            catalog=self.catalog,
            text=self.text,
            on_toast=self.toast,
            multipliers=self.config.ladder_multipliers,
            from_code=self.config.default_from,
            to_code=self.config.default_to,
        )
        self.rates = RatesVM(
            fetch_ladder=FetchRateLadder(self.backend, timeout_s=timeout),
            text=self.text,
            on_toast=self.toast,
            from_code=self.config.default_from,
            to_code=self.config.default_to,
        )

    def toast(self, kind: ToastKind, message: str) -> None:
        log = self._log.info if kind == "success" else self._log.warning
        log("toast[%s]: %s", kind, message)
        if self._on_toast:
            self._on_toast(kind, message)

    async def startup(self) -> None:
        """Settings first, then the catalog, then the initial conversion and ladder."""
        await self.settings.initialize()
        await self.load_catalog()
        from_code, to_code = self.catalog.default_pair(self.config.default_from, self.config.default_to)
        self.converter.select_pair(from_code, to_code)
        self.rates.from_code, self.rates.to_code = from_code, to_code
        await self.converter.cmd_convert()
        await self.rates.cmd_refresh()

    async def load_catalog(self) -> bool:
        """Load currencies; a failure leaves the catalog empty and shows a toast."""
        try:
            await self.catalog.load()
        except UseCaseError as err:
            self._log.warning("Currency catalog unavailable (%s): %s", err.code, err.message)
            self.toast("error", self.text.resolve("error.currencies"))
            return False
        return True

    def _texts_refreshed(self, texts: Dict[str, str]) -> None:
        # The text resolver is created before the view models.
        converter = getattr(self, "converter", None)
        if converter is not None:
            converter.refresh_texts()
        if self._on_texts:
            self._on_texts(texts)


__all__ = ["AppController", "build_backend"]
