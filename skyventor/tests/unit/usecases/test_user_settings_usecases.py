from __future__ import annotations

import pytest

from skyventor.adapters.api_errors import ApiServerError
from skyventor.domain.entities import Settings
from skyventor.domain.errors import TransportError
from skyventor.tests.unit.helpers import StubBackend
from skyventor.usecases.user_settings import LoadSettings, SaveSettings


@pytest.mark.asyncio
async def test_load_and_save_round_trip() -> None:
    backend = StubBackend(settings=Settings(theme="auto", language="en"))

    assert await LoadSettings(backend)() == Settings(theme="auto", language="en")

    await SaveSettings(backend)(Settings(theme="light", language="ru"))
    assert backend.saved == [Settings(theme="light", language="ru")]


@pytest.mark.asyncio
async def test_failures_are_mapped() -> None:
    backend = StubBackend()
    backend.load_error = RuntimeError("disk gone")
    backend.save_error = ApiServerError("ctx", status=500)

    with pytest.raises(TransportError) as load_err:
        await LoadSettings(backend)()
    assert load_err.value.code == "LOAD_SETTINGS_FAILED"

    with pytest.raises(TransportError) as save_err:
        await SaveSettings(backend)(Settings())
    assert save_err.value.code == "SERVER_ERROR"
