from __future__ import annotations

import pytest

from skyventor.app.config import AppConfig, parse_multipliers


def test_defaults_use_offline_backend() -> None:
    config = AppConfig.from_env({})

    assert config.backend_url == ""
    assert config.use_offline_backend is True
    assert config.ladder_multipliers == (1, 10, 100, 1000)
    assert (config.default_from, config.default_to) == ("USD", "RUB")


def test_env_overrides() -> None:
    config = AppConfig.from_env(
        {
            "SKYVENTOR_BACKEND_URL": "http://backend.test",
            "SKYVENTOR_API_KEY": "secret",
            "SKYVENTOR_REQUEST_TIMEOUT_S": "4.5",
            "SKYVENTOR_RETRIES": "0",
            "SKYVENTOR_CONVERSION_TIMEOUT_S": "12",
            "SKYVENTOR_LADDER_MULTIPLIERS": "1, 5,10;50",
            "SKYVENTOR_DEFAULT_FROM": "eur",
            "SKYVENTOR_SETTINGS_DIR": "/tmp/sky",
        }
    )

    assert config.backend_url == "http://backend.test"
    assert config.use_offline_backend is False
    assert config.api_key == "secret"
    assert config.request_timeout_s == 4.5
    assert config.retries == 0
    assert config.conversion_timeout_s == 12
    assert config.ladder_multipliers == (1, 5, 10, 50)
    assert config.default_from == "EUR"
    assert config.settings_dir == "/tmp/sky"


def test_offline_flag_wins_over_url() -> None:
    config = AppConfig.from_env({"SKYVENTOR_BACKEND_URL": "http://x", "SKYVENTOR_OFFLINE": "yes"})

    assert config.use_offline_backend is True


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        AppConfig.from_env({"SKYVENTOR_RETRIES": "many"})
    with pytest.raises(ValueError):
        AppConfig(conversion_timeout_s=0)
    with pytest.raises(ValueError):
        parse_multipliers(" , ")
    with pytest.raises(ValueError):
        AppConfig(ladder_multipliers=(1, -10))
