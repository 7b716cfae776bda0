"""Toast notification types shared by view models."""

from __future__ import annotations

from typing import Callable, Literal

ToastKind = Literal["success", "error"]
ToastFn = Callable[[ToastKind, str], None]


def discard_toast(kind: ToastKind, message: str) -> None:
    """Default sink for view models built without a notification surface."""


__all__ = ["ToastFn", "ToastKind", "discard_toast"]
