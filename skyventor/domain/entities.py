"""Domain value objects shared across adapters, use-cases, and view models."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Literal, Mapping, Optional, Tuple

CurrencyCode = str
CurrencyKind = Literal["fiat", "crypto"]
ThemePreference = Literal["dark", "light", "auto"]
Theme = Literal["dark", "light"]
Language = Literal["ru", "en"]

CURRENCY_KINDS: Tuple[str, ...] = ("fiat", "crypto")
THEME_PREFERENCES: Tuple[str, ...] = ("dark", "light", "auto")
LANGUAGES: Tuple[str, ...] = ("ru", "en")


def to_decimal(value: Any) -> Decimal:
    """Convert numbers and numeric strings to ``Decimal`` via their text form.

    Raises:
        ValueError: When the value is not a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, AttributeError, ValueError) as exc:
            raise ValueError(f"Not a number: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


@dataclass(frozen=True)
class Currency:
    """Catalog entry for one supported currency."""

    code: CurrencyCode
    name: str
    kind: CurrencyKind
    symbol: str = ""
    flag_image: str = ""
    icon_image: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError("Currency code must be a non-empty string.")
        if self.kind not in CURRENCY_KINDS:
            raise ValueError(f"Unsupported currency kind: {self.kind!r}")

    @property
    def image(self) -> Optional[str]:
        """Flag for fiat, icon for crypto, ``None`` when there is nothing to show."""
        if self.kind == "fiat" and self.flag_image:
            return self.flag_image
        if self.kind == "crypto" and self.icon_image:
            return self.icon_image
        return None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Currency":
        def _text(key: str) -> str:
            value = payload.get(key)
            return str(value).strip() if value is not None else ""

        return cls(
            code=_text("code"),
            name=_text("name"),
            kind=(_text("type") or _text("kind") or "fiat"),  # type: ignore[arg-type]
            symbol=_text("symbol"),
            flag_image=_text("flag"),
            icon_image=_text("icon"),
        )


@dataclass(frozen=True)
class ConversionRequest:
    """One user-triggered conversion; the amount is already validated."""

    amount: Decimal
    from_code: CurrencyCode
    to_code: CurrencyCode

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("ConversionRequest.amount must be a Decimal.")
        if self.amount <= 0:
            raise ValueError("ConversionRequest.amount must be positive.")


@dataclass(frozen=True)
class ConversionResult:
    """Backend answer for one conversion.

    When ``ok`` is false, ``converted_amount`` and ``rate`` are not meaningful
    and ``error_message`` (possibly empty) describes the failure.
    """

    amount: Decimal
    from_code: CurrencyCode
    to_code: CurrencyCode
    converted_amount: Decimal
    rate: Decimal
    last_update: str
    ok: bool
    error_message: str = ""

    @classmethod
    def failure(
        cls,
        message: str,
        *,
        amount: Decimal = Decimal(0),
        from_code: CurrencyCode = "",
        to_code: CurrencyCode = "",
    ) -> "ConversionResult":
        return cls(
            amount=amount,
            from_code=from_code,
            to_code=to_code,
            converted_amount=Decimal(0),
            rate=Decimal(0),
            last_update="",
            ok=False,
            error_message=message,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ConversionResult":
        ok = bool(payload.get("success", payload.get("ok", False)))
        message = payload.get("errorMessage") or payload.get("error_message") or ""

        def _number(key: str) -> Decimal:
            raw = payload.get(key)
            if raw is None:
                return Decimal(0)
            try:
                return to_decimal(raw)
            except ValueError:
                if ok:
                    raise
                return Decimal(0)

        return cls(
            amount=_number("amount"),
            from_code=str(payload.get("from") or ""),
            to_code=str(payload.get("to") or ""),
            converted_amount=_number("result"),
            rate=_number("rate"),
            last_update=str(payload.get("lastUpdate") or ""),
            ok=ok,
            error_message=str(message).strip(),
        )


@dataclass(frozen=True)
class RateRow:
    """One line of a rate ladder: ``multiplier`` units of the source currency."""

    multiplier: int
    from_amount: Decimal
    to_amount: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.multiplier, bool) or not isinstance(self.multiplier, int):
            raise TypeError("RateRow.multiplier must be an int.")
        if self.multiplier <= 0:
            raise ValueError("RateRow.multiplier must be positive.")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RateRow":
        multiplier = int(payload.get("multiplier") or 0)
        return cls(
            multiplier=multiplier,
            from_amount=to_decimal(payload.get("fromAmount", multiplier)),
            to_amount=to_decimal(payload.get("toAmount", 0)),
        )


@dataclass(frozen=True)
class Settings:
    """Persisted user preferences."""

    theme: ThemePreference = "dark"
    language: Language = "ru"

    def __post_init__(self) -> None:
        if self.theme not in THEME_PREFERENCES:
            raise ValueError(f"Unsupported theme: {self.theme!r}")
        if self.language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {self.language!r}")

    def to_payload(self) -> dict:
        return {"theme": self.theme, "language": self.language}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Settings":
        """Build settings from a stored mapping; unknown values fall back per field."""
        defaults = cls()
        theme = str(payload.get("theme") or "").strip().lower()
        language = str(payload.get("language") or "").strip().lower()
        return cls(
            theme=theme if theme in THEME_PREFERENCES else defaults.theme,  # type: ignore[arg-type]
            language=language if language in LANGUAGES else defaults.language,  # type: ignore[arg-type]
        )


DEFAULT_SETTINGS = Settings()
