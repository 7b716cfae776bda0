from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from skyventor.adapters.api_errors import ApiClientError, ApiTimeoutError
from skyventor.domain.entities import ConversionResult
from skyventor.tests.unit.helpers import SAMPLE_CURRENCIES, StubBackend, make_converter, ok_result


@pytest.mark.asyncio
async def test_successful_conversion_updates_texts_and_ladder() -> None:
    backend = StubBackend()
    vm, toasts = make_converter(backend)
    phases = []
    vm.on_phase = phases.append
    vm.amount_text = "100"

    result = await vm.cmd_convert()

    assert result is not None and result.ok
    assert backend.convert_calls == [(Decimal("100"), "USD", "RUB")]
    assert vm.result_text == "9000.00"
    assert vm.rate_text == "1 USD = 90.00 RUB"
    assert vm.updated_text == "Updated: 12:00"
    assert [(row.from_text, row.to_text) for row in vm.ladder] == [
        ("1", "90.00"),
        ("10", "900.00"),
        ("100", "9000.00"),
        ("1000", "90000.00"),
    ]
    assert phases == ["pending", "succeeded", "idle"]
    assert vm.outcome == "succeeded"
    assert toasts.last == ("success", "Conversion completed")


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["", "abc", "0", "-5"])
async def test_invalid_amount_never_reaches_backend(amount) -> None:
    backend = StubBackend()
    vm, toasts = make_converter(backend)
    vm.amount_text = amount

    assert await vm.cmd_convert() is None

    assert backend.convert_calls == []
    assert toasts.last == ("error", "Enter valid amount")
    assert vm.phase == "idle"
    assert vm.control_enabled is True


@pytest.mark.asyncio
async def test_business_failure_shows_backend_message() -> None:
    backend = StubBackend(result=ConversionResult.failure("currency XYZ not found"))
    vm, toasts = make_converter(backend)
    vm.select_pair("USD", "XYZ")

    result = await vm.cmd_convert()

    assert result is not None and not result.ok
    assert toasts.last == ("error", "currency XYZ not found")
    assert vm.outcome == "failed"
    assert vm.control_enabled is True
    assert vm.result_text == ""


@pytest.mark.asyncio
async def test_business_failure_without_message_uses_generic_text() -> None:
    backend = StubBackend(result=ConversionResult.failure(""))
    vm, toasts = make_converter(backend)

    await vm.cmd_convert()

    assert toasts.last == ("error", "Failed to fetch exchange rate")


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [ApiTimeoutError("slow"), ApiClientError("ctx", status=401), RuntimeError("x")])
async def test_transport_failure_shows_network_text(error) -> None:
    backend = StubBackend()
    backend.convert_error = error
    vm, toasts = make_converter(backend)

    assert await vm.cmd_convert() is None

    assert toasts.last == ("error", "Network error. Check your connection.")
    assert vm.outcome == "failed"
    assert vm.phase == "idle"
    assert vm.is_loading is False
    assert vm.control_enabled is True
    assert vm.last_error is not None and vm.last_error.category == "transport"


@pytest.mark.asyncio
async def test_second_convert_while_pending_is_rejected() -> None:
    backend = StubBackend()
    backend.gate = asyncio.Event()
    vm, _toasts = make_converter(backend)

    first = asyncio.create_task(vm.cmd_convert())
    for _ in range(10):
        await asyncio.sleep(0)
        if backend.convert_calls:
            break

    assert vm.phase == "pending"
    assert vm.control_enabled is False
    assert await vm.cmd_convert() is None
    assert len(backend.convert_calls) == 1

    backend.gate.set()
    result = await first

    assert result is not None and result.ok
    assert vm.control_enabled is True
    assert len(backend.convert_calls) == 1


@pytest.mark.asyncio
async def test_swap_exchanges_codes_and_converts() -> None:
    backend = StubBackend()
    vm, _toasts = make_converter(backend)

    await vm.cmd_swap()

    assert (vm.from_code, vm.to_code) == ("RUB", "USD")
    assert backend.convert_calls == [(Decimal("1"), "RUB", "USD")]


@pytest.mark.asyncio
async def test_set_amount_converts_only_non_empty_text() -> None:
    backend = StubBackend()
    vm, _toasts = make_converter(backend)

    assert await vm.cmd_set_amount("  ") is None
    assert backend.convert_calls == []

    await vm.cmd_set_amount("2.5")
    assert backend.convert_calls == [(Decimal("2.5"), "USD", "RUB")]


@pytest.mark.asyncio
async def test_slow_backend_times_out_and_reenables_control() -> None:
    backend = StubBackend()
    backend.gate = asyncio.Event()
    vm, toasts = make_converter(backend, timeout_s=0.01)

    assert await vm.cmd_convert() is None

    assert vm.last_error is not None and vm.last_error.code == "REQUEST_TIMEOUT"
    assert toasts.last == ("error", "Network error. Check your connection.")
    assert vm.control_enabled is True


@pytest.mark.asyncio
async def test_images_follow_catalog_and_language_refresh() -> None:
    backend = StubBackend(currencies=SAMPLE_CURRENCIES)
    vm, _toasts = make_converter(backend)
    await vm.catalog.load()
    updates = []
    vm.on_update = updates.append

    vm.select_pair("BTC", "XYZ")
    assert vm.from_image == "https://cryptologos.cc/logos/bitcoin-btc-logo.png"
    assert vm.to_image is None
    assert updates[-1]["from_code"] == "BTC"

    vm.select_pair("USD", "RUB")
    await vm.cmd_convert()
    vm.text.set_language("ru")
    vm.refresh_texts()
    assert vm.updated_text == "Обновлено: 12:00"


@pytest.mark.asyncio
async def test_large_amount_is_formatted_and_succeeds() -> None:
    backend = StubBackend(result=ok_result(amount="1" + "0" * 26))
    vm, toasts = make_converter(backend)
    vm.amount_text = "1" + "0" * 26

    result = await vm.cmd_convert()

    assert result is not None and result.ok
    assert vm.outcome == "succeeded"
    assert vm.result_text == "9" + "0" * 27 + ".00"
    assert toasts.last == ("success", "Conversion completed")


@pytest.mark.asyncio
async def test_undisplayable_result_ends_in_failed() -> None:
    broken = ConversionResult(
        amount=Decimal("1"),
        from_code="USD",
        to_code="RUB",
        converted_amount=Decimal("NaN"),
        rate=Decimal("NaN"),
        last_update="12:00",
        ok=True,
    )
    vm, toasts = make_converter(StubBackend(result=broken))
    phases = []
    vm.on_phase = phases.append

    assert await vm.cmd_convert() is None

    assert phases == ["pending", "failed", "idle"]
    assert vm.outcome == "failed"
    assert vm.control_enabled is True
    assert vm.result_text == ""
    assert vm.last_error is not None and vm.last_error.code == "RESULT_UNREADABLE"
    assert toasts.last == ("error", "Failed to fetch exchange rate")


@pytest.mark.asyncio
async def test_swap_is_ignored_while_pending() -> None:
    backend = StubBackend()
    backend.gate = asyncio.Event()
    vm, _toasts = make_converter(backend)

    first = asyncio.create_task(vm.cmd_convert())
    for _ in range(10):
        await asyncio.sleep(0)
        if backend.convert_calls:
            break

    assert await vm.cmd_swap() is None
    assert (vm.from_code, vm.to_code) == ("USD", "RUB")

    backend.gate.set()
    await first

    assert vm.rate_text == "1 USD = 90.00 RUB"
    assert len(backend.convert_calls) == 1


@pytest.mark.asyncio
async def test_rejected_input_still_notifies_subscribers() -> None:
    vm, _toasts = make_converter(StubBackend())
    updates = []
    vm.on_update = updates.append
    vm.amount_text = "abc"

    await vm.cmd_convert()

    assert len(updates) == 1
    assert updates[0]["amount"] == "abc"
    assert updates[0]["control_enabled"] is True
