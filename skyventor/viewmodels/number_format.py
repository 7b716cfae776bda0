"""Number rendering helpers for view models.

Call context:
    ``ConverterVM`` and ``RatesVM`` call these helpers so converted amounts,
    unit rates, and ladder rows share one rounding rule.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import NamedTuple

from ..domain.entities import RateRow, to_decimal


def format_amount(value, places: int = 2) -> str:
    """Render ``value`` with exactly ``places`` fraction digits (half-up)."""
    quantum = Decimal(1).scaleb(-places)
    amount = to_decimal(value)
    with localcontext() as ctx:
        # Quantizing needs every integer digit plus the fraction digits.
        ctx.prec = max(28, amount.adjusted() + places + 2)
        return str(amount.quantize(quantum, rounding=ROUND_HALF_UP))


def format_rate_line(from_code: str, rate, to_code: str) -> str:
    """``1 USD = 90.00 RUB`` style unit rate."""
    return f"1 {from_code} = {format_amount(rate)} {to_code}"


class LadderRowView(NamedTuple):
    multiplier: int
    from_text: str
    to_text: str


def format_ladder_row(row: RateRow) -> LadderRowView:
    # The unit row shows a bare "1"; larger multiples are whole units.
    from_text = "1" if row.multiplier == 1 else format_amount(row.from_amount, 0)
    return LadderRowView(row.multiplier, from_text, format_amount(row.to_amount, 2))


__all__ = ["LadderRowView", "format_amount", "format_ladder_row", "format_rate_line"]
