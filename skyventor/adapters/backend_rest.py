"""REST implementation of :class:`skyventor.domain.ports.BackendPort`.

Endpoints (relative to the configured base URL):
    ``GET /settings``, ``PUT /settings``, ``GET /currencies``,
    ``GET /convert?amount=&from=&to=``, ``GET /rates?from=&to=``.

``requests`` is blocking, so each port coroutine runs its request in a worker
thread via ``asyncio.to_thread`` and the event loop stays responsive.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Any, List, Optional

import requests

from skyventor.domain.entities import (
    ConversionResult,
    Currency,
    CurrencyCode,
    Language,
    RateRow,
    Settings,
    ThemePreference,
)
from skyventor.domain.ports import BackendPort

from .api_errors import ApiError, raise_for_status
from .http_client import HttpConfig, RetryingSession


class BackendRestAdapter(BackendPort):
    """Talks JSON to the conversion backend over HTTP."""

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: float = 10,
        retries: int = 2,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("BackendRestAdapter requires a base URL")
        self.base_url = base_url.strip().rstrip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key, self.cfg)
        self._log = logging.getLogger(__name__)

    # ---------- BackendPort ----------

    async def load_settings(self) -> Settings:
        return await asyncio.to_thread(self._load_settings)

    async def save_settings(self, theme: ThemePreference, language: Language) -> None:
        await asyncio.to_thread(self._save_settings, theme, language)

    async def list_currencies(self) -> List[Currency]:
        return await asyncio.to_thread(self._list_currencies)

    async def convert(
        self, amount: Decimal, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> ConversionResult:
        return await asyncio.to_thread(self._convert, amount, from_code, to_code)

    async def get_rate_ladder(
        self, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> List[RateRow]:
        return await asyncio.to_thread(self._get_rate_ladder, from_code, to_code)

    # ---------- blocking implementations ----------

    def _load_settings(self) -> Settings:
        data = self._get_json("/settings", ctx="settings")
        if not isinstance(data, dict):
            raise ApiError("settings: expected object response", context="settings")
        return Settings.from_payload(data)

    def _save_settings(self, theme: ThemePreference, language: Language) -> None:
        payload = Settings(theme=theme, language=language).to_payload()
        resp = self.session.put(self._url("/settings"), json_body=payload)
        raise_for_status(resp, "save_settings")
        self._log.debug("Settings saved: %s", payload)

    def _list_currencies(self) -> List[Currency]:
        data = self._get_json("/currencies", ctx="currencies")
        if not isinstance(data, list):
            raise ApiError("currencies: expected list response", context="currencies")
        currencies: List[Currency] = []
        for entry in data:
            if not isinstance(entry, dict):
                continue
            try:
                currencies.append(Currency.from_payload(entry))
            except ValueError as exc:
                self._log.warning("Skipping malformed currency entry %r: %s", entry, exc)
        return currencies

    def _convert(
        self, amount: Decimal, from_code: CurrencyCode, to_code: CurrencyCode
    ) -> ConversionResult:
        params = {"amount": str(amount), "from": from_code, "to": to_code}
        data = self._get_json("/convert", ctx="convert", params=params)
        if not isinstance(data, dict):
            raise ApiError("convert: expected object response", context="convert")
        try:
            return ConversionResult.from_payload(data)
        except ValueError as exc:
            raise ApiError(f"convert: malformed result ({exc})", context="convert") from exc

    def _get_rate_ladder(self, from_code: CurrencyCode, to_code: CurrencyCode) -> List[RateRow]:
        data = self._get_json("/rates", ctx="rates", params={"from": from_code, "to": to_code})
        if not isinstance(data, list):
            raise ApiError("rates: expected list response", context="rates")
        try:
            return [RateRow.from_payload(entry) for entry in data if isinstance(entry, dict)]
        except (TypeError, ValueError) as exc:
            raise ApiError(f"rates: malformed row ({exc})", context="rates") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_json(self, path: str, *, ctx: str, params: Optional[dict] = None) -> Any:
        resp = self.session.get(self._url(path), params=params)
        raise_for_status(resp, ctx)
        return self._json_any(resp, ctx)

    @staticmethod
    def _json_any(resp: requests.Response, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            snippet = getattr(resp, "text", "")[:400]
            raise ApiError(f"{ctx}: invalid JSON response: {snippet}", context=ctx) from exc


__all__ = ["BackendRestAdapter"]
