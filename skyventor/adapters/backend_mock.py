from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

from skyventor.domain.entities import (
    ConversionResult,
    Currency,
    CurrencyCode,
    Language,
    RateRow,
    Settings,
    ThemePreference,
)
from skyventor.domain.ports import BackendPort, SettingsStoragePort
from skyventor.domain.rate_ladder import DEFAULT_MULTIPLIERS, build_ladder

_FLAG_URL = "https://flagcdn.com/w40/{}.png"
_ICON_URL = "https://cryptologos.cc/logos/{}-logo.png"

CURRENCIES: Tuple[Currency, ...] = (
    Currency("USD", "US Dollar", "fiat", "$", flag_image=_FLAG_URL.format("us")),
    Currency("EUR", "Euro", "fiat", "€", flag_image=_FLAG_URL.format("eu")),
    Currency("RUB", "Russian Ruble", "fiat", "₽", flag_image=_FLAG_URL.format("ru")),
    Currency("KZT", "Kazakhstani Tenge", "fiat", "₸", flag_image=_FLAG_URL.format("kz")),
    Currency("CNY", "Chinese Yuan", "fiat", "¥", flag_image=_FLAG_URL.format("cn")),
    Currency("GBP", "British Pound", "fiat", "£", flag_image=_FLAG_URL.format("gb")),
    Currency("JPY", "Japanese Yen", "fiat", "¥", flag_image=_FLAG_URL.format("jp")),
    Currency("CHF", "Swiss Franc", "fiat", "Fr", flag_image=_FLAG_URL.format("ch")),
    Currency("CAD", "Canadian Dollar", "fiat", "$", flag_image=_FLAG_URL.format("ca")),
    Currency("AUD", "Australian Dollar", "fiat", "$", flag_image=_FLAG_URL.format("au")),
    Currency("BTC", "Bitcoin", "crypto", "₿", icon_image=_ICON_URL.format("bitcoin-btc")),
    Currency("ETH", "Ethereum", "crypto", "Ξ", icon_image=_ICON_URL.format("ethereum-eth")),
    Currency("USDT", "Tether", "crypto", "₮", icon_image=_ICON_URL.format("tether-usdt")),
    Currency("TON", "Toncoin", "crypto", "💎", icon_image=_ICON_URL.format("toncoin-ton")),
    Currency("SOL", "Solana", "crypto", "◎", icon_image=_ICON_URL.format("solana-sol")),
    Currency("XRP", "Ripple", "crypto", "✕", icon_image=_ICON_URL.format("xrp-xrp")),
    Currency("BNB", "Binance Coin", "crypto", "BNB", icon_image=_ICON_URL.format("bnb-bnb")),
    Currency("DOGE", "Dogecoin", "crypto", "Ð", icon_image=_ICON_URL.format("dogecoin-doge")),
)

# Units of each currency bought by one US dollar.
UNITS_PER_USD: Dict[CurrencyCode, Decimal] = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "RUB": Decimal("90"),
    "KZT": Decimal("450"),
    "CNY": Decimal("7.2"),
    "GBP": Decimal("0.79"),
    "JPY": Decimal("150"),
    "CHF": Decimal("0.88"),
    "CAD": Decimal("1.36"),
    "AUD": Decimal("1.52"),
    "BTC": Decimal("0.000016"),
    "ETH": Decimal("0.0004"),
    "USDT": Decimal("1"),
    "TON": Decimal("0.2"),
    "SOL": Decimal("0.008"),
    "XRP": Decimal("1.6"),
    "BNB": Decimal("0.0017"),
    "DOGE": Decimal("6.5"),
}


def _clock_label() -> str:
    return datetime.now().strftime("%H:%M:%S")


@dataclass
class BackendMock(BackendPort):
    """Offline substitute for ``BackendRestAdapter`` with deterministic rates.

    Settings go to ``storage`` when one is given, otherwise they live in memory.
    """

    storage: Optional[SettingsStoragePort] = None
    clock: Callable[[], str] = _clock_label
    currencies: Tuple[Currency, ...] = CURRENCIES
    units_per_usd: Dict[CurrencyCode, Decimal] = field(default_factory=lambda: dict(UNITS_PER_USD))

    def __post_init__(self) -> None:
        self._settings = Settings()

    # ---------- BackendPort ----------

    async def load_settings(self) -> Settings:
        if self.storage is None:
            return self._settings
        payload = self.storage.load_settings()
        self._settings = Settings.from_payload(payload or {})
        return self._settings

    async def save_settings(self, theme: ThemePreference, language: Language) -> None:
        self._settings = Settings(theme=theme, language=language)
        if self.storage is not None:
            self.storage.save_settings(self._settings.to_payload())

    async def list_currencies(self) -> List[Currency]:
        return list(self.currencies)

    async def convert(
        self, amount: Decimal, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> ConversionResult:
        if amount <= 0:
            return ConversionResult.failure("Amount must be greater than 0")
        rate = self._rate(from_code, to_code)
        if rate is None:
            missing = from_code if from_code not in self.units_per_usd else to_code
            return ConversionResult.failure(
                f"currency {missing} not found",
                amount=amount,
                from_code=from_code,
                to_code=to_code,
            )
        return ConversionResult(
            amount=amount,
            from_code=from_code,
            to_code=to_code,
            converted_amount=amount * rate,
            rate=rate,
            last_update=self.clock(),
            ok=True,
        )

    async def get_rate_ladder(
        self, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> List[RateRow]:
        rate = self._rate(from_code, to_code)
        if rate is None:
            return []
        return build_ladder(rate, DEFAULT_MULTIPLIERS)

    def _rate(self, from_code: CurrencyCode, to_code: CurrencyCode) -> Optional[Decimal]:
        if from_code == to_code:
            return Decimal(1)
        from_units = self.units_per_usd.get(from_code)
        to_units = self.units_per_usd.get(to_code)
        if from_units is None or to_units is None:
            return None
        return to_units / from_units


__all__ = ["BackendMock", "CURRENCIES", "UNITS_PER_USD"]
