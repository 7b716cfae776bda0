from __future__ import annotations

import pytest

from skyventor.domain.theme import effective_theme


@pytest.mark.parametrize(
    ("preference", "system_is_dark", "expected"),
    [
        ("dark", True, "dark"),
        ("dark", False, "dark"),
        ("light", True, "light"),
        ("light", False, "light"),
        ("auto", True, "dark"),
        ("auto", False, "light"),
    ],
)
def test_effective_theme_table(preference, system_is_dark, expected) -> None:
    assert effective_theme(preference, system_is_dark) == expected


def test_unknown_preference_is_rejected() -> None:
    with pytest.raises(ValueError):
        effective_theme("sepia", True)  # type: ignore[arg-type]
