"""Use case for one currency conversion round trip.

Validation happens before the backend is touched; business failures come back
as ``ConversionResult.ok = False`` and transport failures as ``TransportError``.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from skyventor.domain.entities import ConversionRequest, ConversionResult, to_decimal
from skyventor.domain.errors import ValidationError
from skyventor.domain.ports import BackendPort

from .error_mapping import map_api_error


def parse_amount(raw: Any) -> Decimal:
    """Return the amount as a positive ``Decimal``.

    Raises:
        ValidationError: For missing, non-numeric, or non-positive input.
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("AMOUNT_MISSING", "Amount is required.")
    try:
        amount = to_decimal(raw)
    except ValueError as exc:
        raise ValidationError("AMOUNT_INVALID", f"Amount is not a number: {raw!r}") from exc
    if amount <= 0:
        raise ValidationError("AMOUNT_NOT_POSITIVE", "Amount must be greater than 0.")
    return amount


@dataclass
class ConvertCurrency:
    """Use-case callable wrapping ``BackendPort.convert``."""

    backend: BackendPort
    timeout_s: Optional[float] = None

    def build_request(self, raw_amount: Any, from_code: str, to_code: str) -> ConversionRequest:
        return ConversionRequest(
            amount=parse_amount(raw_amount), from_code=from_code, to_code=to_code
        )

    async def __call__(self, request: ConversionRequest) -> ConversionResult:
        try:
            return await asyncio.wait_for(
                self.backend.convert(request.amount, request.from_code, request.to_code),
                timeout=self.timeout_s,
            )
        except Exception as exc:
            raise map_api_error(exc, default_code="CONVERT_FAILED") from exc


__all__ = ["ConvertCurrency", "parse_amount"]
