from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from skyventor.domain.entities import CurrencyCode, RateRow
from skyventor.domain.errors import BusinessError
from skyventor.domain.ports import BackendPort

from .error_mapping import map_api_error


@dataclass
class FetchRateLadder:
    """Load the server-side rate ladder for a currency pair."""

    backend: BackendPort
    timeout_s: Optional[float] = None

    async def __call__(self, from_code: CurrencyCode, to_code: CurrencyCode) -> List[RateRow]:
        try:
            rows = await asyncio.wait_for(
                self.backend.get_rate_ladder(from_code, to_code), timeout=self.timeout_s
            )
        except Exception as exc:
            raise map_api_error(exc, default_code="RATES_FAILED") from exc
        # The backend answers with an empty list when it has no rate for the pair.
        if not rows:
            raise BusinessError("RATE_UNAVAILABLE", f"No rate for {from_code}/{to_code}.")
        return list(rows)
