"""Translate adapter errors into user-facing UseCaseError instances."""

from __future__ import annotations

import asyncio
from typing import Optional

from skyventor.adapters.api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    ApiTimeoutError,
    extract_error_hint,
)
from skyventor.domain.errors import TransportError, UseCaseError


def map_api_error(
    exc: BaseException,
    *,
    default_code: str,
    default_message: Optional[str] = None,
) -> UseCaseError:
    """Map adapter exceptions to stable error codes.

    ``UseCaseError`` instances pass through untouched. Everything else is a
    transport-level failure from the caller's point of view.
    """
    if isinstance(exc, UseCaseError):
        return exc
    if isinstance(exc, (ApiTimeoutError, asyncio.TimeoutError)):
        return TransportError("REQUEST_TIMEOUT", "Request timed out. Check connection.")
    if isinstance(exc, ApiClientError):
        status = exc.status or 0
        hint = exc.hint or extract_error_hint(exc.payload)
        if status in (401, 403):
            return TransportError("AUTH_FAILED", "Auth failed / API key invalid.")
        label = f"Request failed (HTTP {status})" if status else "Request failed"
        return TransportError("REQUEST_FAILED", _compose_error_message(label, hint))
    if isinstance(exc, ApiServerError):
        return TransportError("SERVER_ERROR", "Backend error, try again.")
    if isinstance(exc, ApiError):
        return TransportError("API_ERROR", str(exc))

    message = default_message or str(exc) or "Unexpected error."
    return TransportError(default_code, message)


def _compose_error_message(base: str, hint: Optional[str]) -> str:
    hint_text = (hint or "").strip()
    if hint_text:
        return f"{base}: {hint_text}"
    if base.endswith("."):
        return base
    return f"{base}."


__all__ = ["map_api_error"]
