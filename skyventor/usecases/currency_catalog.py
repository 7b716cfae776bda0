"""Session-scoped cache of supported currencies.

The catalog is filled by one backend round trip at startup. All other
components keep only currency codes and resolve full records here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from skyventor.domain.entities import Currency, CurrencyCode
from skyventor.domain.errors import NotFoundError
from skyventor.domain.ports import BackendPort

from .error_mapping import map_api_error


class CurrencyCatalog:
    """Use-case object owning the currency list for the whole session."""

    def __init__(self, backend: BackendPort, *, timeout_s: Optional[float] = None) -> None:
        self.backend = backend
        self.timeout_s = timeout_s
        self._currencies: Tuple[Currency, ...] = ()
        self._by_code: Dict[CurrencyCode, Currency] = {}
        self._log = logging.getLogger(__name__)

    async def load(self) -> Sequence[Currency]:
        """Fetch the currency list once and index it by code.

        Raises:
            UseCaseError: Mapped transport failure. The cache is left empty.
        """
        self._currencies = ()
        self._by_code = {}
        try:
            fetched = await asyncio.wait_for(self.backend.list_currencies(), timeout=self.timeout_s)
        except Exception as exc:
            raise map_api_error(exc, default_code="LOAD_CURRENCIES_FAILED") from exc

        by_code: Dict[CurrencyCode, Currency] = {}
        for currency in fetched:
            if currency.code in by_code:
                self._log.warning("Duplicate currency code %s ignored", currency.code)
                continue
            by_code[currency.code] = currency
        self._by_code = by_code
        self._currencies = tuple(by_code.values())
        self._log.info("Currency catalog loaded: %d entries", len(self._currencies))
        return self._currencies

    @property
    def currencies(self) -> Tuple[Currency, ...]:
        return self._currencies

    @property
    def codes(self) -> List[CurrencyCode]:
        return [currency.code for currency in self._currencies]

    def find_by_code(self, code: CurrencyCode) -> Optional[Currency]:
        return self._by_code.get(code)

    def get(self, code: CurrencyCode) -> Currency:
        currency = self.find_by_code(code)
        if currency is None:
            raise NotFoundError("CURRENCY_NOT_FOUND", f"Unknown currency code: {code}")
        return currency

    def image_for(self, code: CurrencyCode) -> Optional[str]:
        """Image URL to show next to ``code``; ``None`` means hide the image."""
        currency = self.find_by_code(code)
        if currency is None:
            return None
        return currency.image

    def default_pair(
        self, preferred_from: CurrencyCode = "USD", preferred_to: CurrencyCode = "RUB"
    ) -> Tuple[CurrencyCode, CurrencyCode]:
        """Preferred codes when present, else the first catalog entries."""
        codes = self.codes
        if not codes:
            return preferred_from, preferred_to
        from_code = preferred_from if preferred_from in self._by_code else codes[0]
        fallback_to = codes[1] if len(codes) > 1 else codes[0]
        to_code = preferred_to if preferred_to in self._by_code else fallback_to
        return from_code, to_code


__all__ = ["CurrencyCatalog"]
