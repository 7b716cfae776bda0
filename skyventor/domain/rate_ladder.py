"""Rate ladder derivation: one exchange rate fanned out over fixed multipliers."""

from __future__ import annotations

from typing import Iterable, List

from .entities import RateRow, to_decimal

DEFAULT_MULTIPLIERS = (1, 10, 100, 1000)


def build_ladder(rate, multipliers: Iterable[int] = DEFAULT_MULTIPLIERS) -> List[RateRow]:
    """Return one row per multiplier, in the given order.

    Rows are neither sorted nor deduplicated; ``from_amount`` equals the
    multiplier and ``to_amount`` is ``multiplier * rate``.

    Raises:
        ValueError: If ``rate`` is not a positive number or a multiplier is
            not a positive integer.
    """
    unit_rate = to_decimal(rate)
    if unit_rate <= 0:
        raise ValueError(f"Rate must be positive, got {rate!r}")
    rows: List[RateRow] = []
    for multiplier in multipliers:
        rows.append(
            RateRow(
                multiplier=multiplier,
                from_amount=to_decimal(multiplier),
                to_amount=unit_rate * multiplier,
            )
        )
    return rows


__all__ = ["DEFAULT_MULTIPLIERS", "build_ladder"]
