from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional, Protocol

from .entities import (
    ConversionResult,
    Currency,
    CurrencyCode,
    Language,
    RateRow,
    Settings,
    ThemePreference,
)


# ---- Ports (Hexagonal boundaries) ----
class BackendPort(Protocol):
    """Conversion/rates backend.

    Every operation except ``convert`` signals failure by raising. ``convert``
    encodes business failures as ``ConversionResult.ok = False`` and raises
    only for transport faults.
    """

    async def load_settings(self) -> Settings: ...
    async def save_settings(self, theme: ThemePreference, language: Language) -> None: ...
    async def list_currencies(self) -> List[Currency]: ...
    async def convert(
        self, amount: Decimal, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> ConversionResult: ...
    async def get_rate_ladder(
        self, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> List[RateRow]: ...


class SettingsStoragePort(Protocol):
    """Persistence for user preferences."""

    def save_settings(self, payload: Dict) -> None: ...
    def load_settings(self) -> Optional[Dict]: ...
