from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..domain.entities import CurrencyCode
from ..domain.errors import UseCaseError
from ..usecases.fetch_rate_ladder import FetchRateLadder
from .notifications import ToastFn, discard_toast
from .number_format import LadderRowView, format_ladder_row
from .text_vm import TextResolver


class RatesVM:
    """Rates page: a ladder table for the selected pair, reloaded on each change."""

    def __init__(
        self,
        *,
        fetch_ladder: FetchRateLadder,
        text: TextResolver,
        on_toast: ToastFn = discard_toast,
        on_update: Optional[Callable[[Dict[str, Any]], None]] = None,
        from_code: CurrencyCode = "USD",
        to_code: CurrencyCode = "RUB",
    ) -> None:
        self._fetch_ladder = fetch_ladder
        self.text = text
        self.on_toast = on_toast
        self.on_update = on_update
        self.from_code = from_code
        self.to_code = to_code
        self.rows: List[LadderRowView] = []
        self._generation = 0
        self._log = logging.getLogger(__name__)

    @property
    def headers(self) -> Tuple[str, str, str]:
        return (self.text.resolve("rates.multiplier"), self.from_code, self.to_code)

    async def cmd_select_pair(self, from_code: CurrencyCode, to_code: CurrencyCode) -> List[LadderRowView]:
        self.from_code = str(from_code).strip()
        self.to_code = str(to_code).strip()
        return await self.cmd_refresh()

    async def cmd_refresh(self) -> List[LadderRowView]:
        """Reload the ladder for the current pair.

        A response that arrives after the pair changed again is dropped.
        """
        self._generation += 1
        generation = self._generation
        from_code, to_code = self.from_code, self.to_code
        self._emit()
        try:
            rows = await self._fetch_ladder(from_code, to_code)
        except UseCaseError as err:
            if generation != self._generation:
                return self.rows
            self._log.warning("Rate ladder %s/%s failed (%s): %s", from_code, to_code, err.code, err.message)
            self.rows = []
            self.on_toast("error", self.text.resolve("error.api"))
            self._emit()
            return self.rows
        if generation != self._generation:
            self._log.debug("Dropping stale ladder for %s/%s", from_code, to_code)
            return self.rows
        self.rows = [format_ladder_row(row) for row in rows]
        self._emit()
        return self.rows

    def display_rows(self) -> List[Tuple[str, str, str]]:
        """Rows as shown in the table: ``10×``, ``10 USD``, ``900.00 RUB``."""
        return [
            (f"{row.multiplier}×", f"{row.from_text} {self.from_code}", f"{row.to_text} {self.to_code}")
            for row in self.rows
        ]

    def _emit(self) -> None:
        if self.on_update:
            self.on_update(
                {
                    "headers": self.headers,
                    "rows": list(self.rows),
                    "from_code": self.from_code,
                    "to_code": self.to_code,
                }
            )


__all__ = ["RatesVM"]
