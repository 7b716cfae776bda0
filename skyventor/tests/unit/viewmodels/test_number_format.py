from __future__ import annotations

from decimal import Decimal

from skyventor.domain.entities import RateRow
from skyventor.viewmodels.number_format import format_amount, format_ladder_row, format_rate_line


def test_format_amount_rounds_half_up() -> None:
    assert format_amount(Decimal("2.345")) == "2.35"
    assert format_amount(Decimal("2.344")) == "2.34"
    assert format_amount(9000) == "9000.00"
    assert format_amount("0.125") == "0.13"


def test_format_rate_line() -> None:
    assert format_rate_line("USD", Decimal("90"), "RUB") == "1 USD = 90.00 RUB"


def test_ladder_row_texts() -> None:
    unit = format_ladder_row(RateRow(1, Decimal("1"), Decimal("90.005")))
    tens = format_ladder_row(RateRow(10, Decimal("10"), Decimal("900.05")))

    assert (unit.from_text, unit.to_text) == ("1", "90.01")
    assert (tens.from_text, tens.to_text) == ("10", "900.05")


def test_format_amount_beyond_default_precision() -> None:
    big = Decimal("9" + "0" * 27)

    assert format_amount(big) == "9" + "0" * 27 + ".00"
    assert format_amount(Decimal("12345678901234567890123456789.125")) == "12345678901234567890123456789.13"
