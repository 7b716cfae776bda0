from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from skyventor.adapters.api_errors import ApiServerError
from skyventor.domain.entities import ConversionResult
from skyventor.domain.errors import TransportError, ValidationError
from skyventor.tests.unit.helpers import StubBackend, ok_result
from skyventor.usecases.convert_currency import ConvertCurrency, parse_amount


@pytest.mark.parametrize(
    ("raw", "code"),
    [
        ("", "AMOUNT_MISSING"),
        ("   ", "AMOUNT_MISSING"),
        (None, "AMOUNT_MISSING"),
        ("abc", "AMOUNT_INVALID"),
        ("1,5", "AMOUNT_INVALID"),
        ("nan", "AMOUNT_INVALID"),
        ("inf", "AMOUNT_INVALID"),
        ("-Infinity", "AMOUNT_INVALID"),
        ("0", "AMOUNT_NOT_POSITIVE"),
        ("-3", "AMOUNT_NOT_POSITIVE"),
    ],
)
def test_parse_amount_rejects_bad_input(raw, code) -> None:
    with pytest.raises(ValidationError) as err:
        parse_amount(raw)
    assert err.value.code == code
    assert err.value.category == "validation"


def test_parse_amount_accepts_decimal_text() -> None:
    assert parse_amount(" 12.50 ") == Decimal("12.50")


@pytest.mark.asyncio
async def test_call_forwards_request_to_backend() -> None:
    backend = StubBackend(result=ok_result(amount="2"))
    uc = ConvertCurrency(backend)

    result = await uc(uc.build_request("2", "USD", "RUB"))

    assert backend.convert_calls == [(Decimal("2"), "USD", "RUB")]
    assert result.ok is True


@pytest.mark.asyncio
async def test_business_failure_is_returned_not_raised() -> None:
    backend = StubBackend(result=ConversionResult.failure("currency XYZ not found"))
    uc = ConvertCurrency(backend)

    result = await uc(uc.build_request("1", "USD", "XYZ"))

    assert result.ok is False
    assert result.error_message == "currency XYZ not found"


@pytest.mark.asyncio
async def test_adapter_errors_become_transport_errors() -> None:
    backend = StubBackend()
    backend.convert_error = ApiServerError("convert: HTTP 500", status=500)
    uc = ConvertCurrency(backend)

    with pytest.raises(TransportError) as err:
        await uc(uc.build_request("1", "USD", "RUB"))
    assert err.value.code == "SERVER_ERROR"


@pytest.mark.asyncio
async def test_slow_backend_times_out() -> None:
    backend = StubBackend()
    backend.gate = asyncio.Event()
    uc = ConvertCurrency(backend, timeout_s=0.01)

    with pytest.raises(TransportError) as err:
        await uc(uc.build_request("1", "USD", "RUB"))
    assert err.value.code == "REQUEST_TIMEOUT"
