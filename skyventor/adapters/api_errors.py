from __future__ import annotations

from typing import Any, Optional


class ApiError(RuntimeError):
    """Base class for backend adapter failures."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        payload: Any = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code
        self.hint = hint
        self.payload = payload
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx from the conversion backend."""


class ApiServerError(ApiError):
    """HTTP 5xx from the conversion backend."""


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


def raise_for_status(resp: Any, ctx: str) -> None:
    """Raise the typed ``ApiError`` matching a non-2xx response."""
    status = int(resp.status_code)
    if 200 <= status < 300:
        return
    payload = parse_error_payload(resp)
    message = build_error_message(ctx, status, payload)
    hint = extract_error_hint(payload)
    code = extract_error_code(payload)
    if 400 <= status < 500:
        raise ApiClientError(
            message, status=status, code=code, hint=hint, payload=payload, context=ctx
        )
    if 500 <= status < 600:
        raise ApiServerError(message, status=status, payload=payload, context=ctx)
    raise ApiError(message, status=status, payload=payload, context=ctx)


def parse_error_payload(resp: Any) -> Any:
    """Best-effort extraction of error payload without raising."""
    try:
        return resp.json()
    except ValueError:
        snippet = getattr(resp, "text", "")
        if not snippet:
            return None
        return snippet[:400]


def build_error_message(ctx: str, status: int, payload: Any) -> str:
    detail = first_string(payload)
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"


def extract_error_code(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("code", "error_code"):
            value = payload.get(key)
            if value is not None:
                return str(value)
    return None


def extract_error_hint(payload: Any) -> Optional[str]:
    if isinstance(payload, dict):
        for key in ("hint", "errorMessage", "details"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()[:200]
    if isinstance(payload, str):
        return payload.strip()[:200] or None
    return None


def first_string(payload: Any) -> Optional[str]:
    if isinstance(payload, str):
        text = payload.strip()
        return text or None
    if isinstance(payload, dict):
        for key in ("detail", "message", "errorMessage", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            if isinstance(value, (dict, list)):
                candidate = first_string(value)
                if candidate:
                    return candidate
    if isinstance(payload, list):
        for item in payload:
            candidate = first_string(item)
            if candidate:
                return candidate
    return None
