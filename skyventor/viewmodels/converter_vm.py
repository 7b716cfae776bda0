from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Literal, Optional, Sequence

from ..domain.entities import ConversionResult, CurrencyCode
from ..domain.errors import BusinessError, UseCaseError, ValidationError
from ..domain.rate_ladder import DEFAULT_MULTIPLIERS, build_ladder
from ..usecases.convert_currency import ConvertCurrency
from ..usecases.currency_catalog import CurrencyCatalog
from .notifications import ToastFn, discard_toast
from .number_format import LadderRowView, format_amount, format_ladder_row, format_rate_line
from .text_vm import TextResolver

Phase = Literal["idle", "pending", "succeeded", "failed"]
Outcome = Literal["succeeded", "failed"]


class ConverterVM:
    """Converter page state: selected pair, amount, and one conversion at a time.

    Each attempt walks ``idle -> pending -> succeeded|failed -> idle``; every
    transition is reported through ``on_phase``. While an attempt is pending
    the convert control is disabled and further attempts are rejected.
    """

    def __init__(
        self,
        *,
        convert: ConvertCurrency,
        catalog: CurrencyCatalog,
        text: TextResolver,
        on_toast: ToastFn = discard_toast,
        on_phase: Optional[Callable[[Phase], None]] = None,
        on_update: Optional[Callable[[Dict[str, Any]], None]] = None,
        multipliers: Sequence[int] = DEFAULT_MULTIPLIERS,
        from_code: CurrencyCode = "USD",
        to_code: CurrencyCode = "RUB",
        amount_text: str = "1",
    ) -> None:
        self._convert = convert
        self.catalog = catalog
        self.text = text
        self.on_toast = on_toast
        self.on_phase = on_phase
        self.on_update = on_update
        self.multipliers = tuple(multipliers)

        self.from_code = from_code
        self.to_code = to_code
        self.amount_text = amount_text

        self.phase: Phase = "idle"
        self.outcome: Optional[Outcome] = None
        self.is_loading = False
        self.control_enabled = True
        self.last_result: Optional[ConversionResult] = None
        self.last_error: Optional[UseCaseError] = None
        self.result_text = ""
        self.rate_text = ""
        self.updated_text = ""
        self.ladder: List[LadderRowView] = []
        self._log = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Selection state
    # ------------------------------------------------------------------
    @property
    def from_image(self) -> Optional[str]:
        return self.catalog.image_for(self.from_code)

    @property
    def to_image(self) -> Optional[str]:
        return self.catalog.image_for(self.to_code)

    def select_pair(self, from_code: CurrencyCode, to_code: CurrencyCode) -> None:
        self.from_code = str(from_code).strip()
        self.to_code = str(to_code).strip()
        self._emit()

    async def cmd_set_amount(self, amount_text: Any) -> Optional[ConversionResult]:
        """Store the typed amount and convert right away when it is non-empty."""
        self.amount_text = "" if amount_text is None else str(amount_text)
        if not self.amount_text.strip():
            self._emit()
            return None
        return await self.cmd_convert()

    async def cmd_swap(self) -> Optional[ConversionResult]:
        """Exchange the two codes, then start a new conversion for the new pair.

        Ignored while a conversion is pending, so the shown result always
        belongs to the shown pair.
        """
        if self.phase == "pending":
            self._log.debug("Conversion pending; swap ignored")
            return None
        self.from_code, self.to_code = self.to_code, self.from_code
        self._emit()
        return await self.cmd_convert()

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    async def cmd_convert(self) -> Optional[ConversionResult]:
        """Run one conversion attempt.

        Returns the backend result (``ok`` may be false), or ``None`` when the
        input was invalid, a transport error occurred, the result could not
        be displayed, or another attempt is still pending.
        """
        if self.phase == "pending":
            self._log.debug("Conversion already pending; request ignored")
            return None

        try:
            request = self._convert.build_request(self.amount_text, self.from_code, self.to_code)
        except ValidationError as err:
            self.last_error = err
            self._log.info("Conversion rejected: %s", err.message)
            self.on_toast("error", self.text.resolve("error.amount"))
            self._emit()
            return None

        self.is_loading = True
        self.control_enabled = False
        self._transition("pending")
        result: Optional[ConversionResult] = None
        try:
            result = await self._convert(request)
        except UseCaseError as err:
            self.last_error = err
            self._log.warning("Conversion failed (%s): %s", err.code, err.message)
            self._transition("failed")
            self.on_toast("error", self._error_text(err))
        else:
            if not result.ok:
                self.last_result = result
                self.last_error = None
                self._log.info("Conversion declined: %s", result.error_message or "<no message>")
                self._transition("failed")
                self.on_toast("error", result.error_message or self.text.resolve("error.api"))
            elif self._apply_success(result):
                self._transition("succeeded")
                self.on_toast("success", self.text.resolve("toast.converted"))
            else:
                result = None
                self._transition("failed")
                self.on_toast("error", self.text.resolve("error.api"))
        finally:
            self.is_loading = False
            self.control_enabled = True
            self._transition("idle")
        return result

    def _apply_success(self, result: ConversionResult) -> bool:
        """Format a successful result; returns False when it cannot be displayed."""
        try:
            result_text = format_amount(result.converted_amount)
            rate_text = format_rate_line(self.from_code, result.rate, self.to_code)
            if result.rate > 0:
                ladder = [format_ladder_row(row) for row in build_ladder(result.rate, self.multipliers)]
            else:
                ladder = []
        except (ArithmeticError, ValueError) as exc:
            self.last_error = BusinessError("RESULT_UNREADABLE", f"Conversion result not displayable: {exc}")
            self._log.warning("Conversion result for %s/%s not displayable: %r", self.from_code, self.to_code, exc)
            return False
        self.last_result = result
        self.last_error = None
        self.result_text = result_text
        self.rate_text = rate_text
        self.updated_text = self.text.resolve("converter.updated", {"time": result.last_update})
        self.ladder = ladder
        return True

    def _error_text(self, err: UseCaseError) -> str:
        if err.category == "transport":
            return self.text.resolve("error.network")
        return err.message or self.text.resolve("error.api")

    def refresh_texts(self) -> None:
        """Re-resolve the localized parts of the last result after a language switch."""
        if self.last_result is not None and self.last_result.ok:
            self.updated_text = self.text.resolve(
                "converter.updated", {"time": self.last_result.last_update}
            )
        self._emit()

    # ------------------------------------------------------------------
    def _transition(self, phase: Phase) -> None:
        if phase in ("succeeded", "failed"):
            self.outcome = phase
        self.phase = phase
        if self.on_phase:
            self.on_phase(phase)
        self._emit()

    def _emit(self) -> None:
        if self.on_update:
            self.on_update(self.to_dto())

    def to_dto(self) -> Dict[str, Any]:
        return {
            "from_code": self.from_code,
            "to_code": self.to_code,
            "from_image": self.from_image,
            "to_image": self.to_image,
            "amount": self.amount_text,
            "phase": self.phase,
            "loading": self.is_loading,
            "control_enabled": self.control_enabled,
            "result": self.result_text,
            "rate": self.rate_text,
            "updated": self.updated_text,
            "ladder": list(self.ladder),
        }


__all__ = ["ConverterVM"]
