from __future__ import annotations

import asyncio
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from skyventor.domain.entities import ConversionResult, Currency, RateRow, Settings
from skyventor.domain.rate_ladder import build_ladder
from skyventor.usecases.convert_currency import ConvertCurrency
from skyventor.usecases.currency_catalog import CurrencyCatalog
from skyventor.viewmodels.converter_vm import ConverterVM
from skyventor.viewmodels.text_vm import TextResolver


def ok_result(
    amount: str = "100",
    from_code: str = "USD",
    to_code: str = "RUB",
    rate: str = "90",
    last_update: str = "12:00",
) -> ConversionResult:
    return ConversionResult(
        amount=Decimal(amount),
        from_code=from_code,
        to_code=to_code,
        converted_amount=Decimal(amount) * Decimal(rate),
        rate=Decimal(rate),
        last_update=last_update,
        ok=True,
    )


class StubBackend:
    """In-memory ``BackendPort`` recording calls; errors are raised when set."""

    def __init__(
        self,
        *,
        currencies: Optional[List[Currency]] = None,
        result: Optional[ConversionResult] = None,
        ladder: Optional[List[RateRow]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.currencies = list(currencies or [])
        self.result = result or ok_result()
        self.ladder = ladder if ladder is not None else build_ladder(Decimal("90"))
        self.settings = settings or Settings()
        self.convert_calls: List[Tuple[Decimal, str, str]] = []
        self.ladder_calls: List[Tuple[str, str]] = []
        self.saved: List[Settings] = []
        self.convert_error: Optional[BaseException] = None
        self.ladder_error: Optional[BaseException] = None
        self.load_error: Optional[BaseException] = None
        self.save_error: Optional[BaseException] = None
        self.currencies_error: Optional[BaseException] = None
        self.gate: Optional[asyncio.Event] = None
        self.delay_s: float = 0

    async def load_settings(self) -> Settings:
        if self.load_error:
            raise self.load_error
        return self.settings

    async def save_settings(self, theme: Any, language: Any) -> None:
        if self.save_error:
            raise self.save_error
        self.settings = Settings(theme=theme, language=language)
        self.saved.append(self.settings)

    async def list_currencies(self) -> List[Currency]:
        if self.currencies_error:
            raise self.currencies_error
        return list(self.currencies)

    async def convert(self, amount: Decimal, from_code: str, to_code: str) -> ConversionResult:
        self.convert_calls.append((amount, from_code, to_code))
        if self.gate is not None:
            await self.gate.wait()
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.convert_error:
            raise self.convert_error
        return self.result

    async def get_rate_ladder(self, from_code: str, to_code: str) -> List[RateRow]:
        self.ladder_calls.append((from_code, to_code))
        if self.ladder_error:
            raise self.ladder_error
        return list(self.ladder)


SAMPLE_CURRENCIES = [
    Currency("USD", "US Dollar", "fiat", "$", flag_image="https://flagcdn.com/w40/us.png"),
    Currency("RUB", "Russian Ruble", "fiat", "₽", flag_image="https://flagcdn.com/w40/ru.png"),
    Currency("BTC", "Bitcoin", "crypto", "₿", icon_image="https://cryptologos.cc/logos/bitcoin-btc-logo.png"),
    Currency("XYZ", "No Image", "fiat"),
]


class ToastRecorder:
    def __init__(self) -> None:
        self.toasts: List[Tuple[str, str]] = []

    def __call__(self, kind: str, message: str) -> None:
        self.toasts.append((kind, message))

    @property
    def last(self) -> Tuple[str, str]:
        return self.toasts[-1]


def make_converter(
    backend: StubBackend,
    *,
    language: str = "en",
    timeout_s: Optional[float] = None,
) -> Tuple[ConverterVM, ToastRecorder]:
    toasts = ToastRecorder()
    text = TextResolver(language=language)
    vm = ConverterVM(
        convert=ConvertCurrency(backend, timeout_s=timeout_s),
        catalog=CurrencyCatalog(backend),
        text=text,
        on_toast=toasts,
    )
    return vm, toasts


__all__ = [
    "SAMPLE_CURRENCIES",
    "StubBackend",
    "ToastRecorder",
    "make_converter",
    "ok_result",
]
