"""Domain-level error types for use-case and adapter mapping.

Errors cross layer boundaries without leaking transport-specific exception
details. Every type carries a stable ``code`` plus a ``category`` so view
models can pick the matching notification text.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Optional

ErrorCategory = Literal["validation", "business", "transport", "not_found"]


class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    category: ErrorCategory = "business"

    def __init__(self, code: str, message: str, *, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}


class ValidationError(UseCaseError):
    """Bad user input, detected before any backend call."""

    category: ErrorCategory = "validation"


class BusinessError(UseCaseError):
    """Backend answered but declined the operation."""

    category: ErrorCategory = "business"


class TransportError(UseCaseError):
    """Backend unreachable, faulted, or timed out."""

    category: ErrorCategory = "transport"


class NotFoundError(UseCaseError):
    """Lookup miss; callers degrade the display instead of notifying."""

    category: ErrorCategory = "not_found"


__all__ = [
    "BusinessError",
    "ErrorCategory",
    "NotFoundError",
    "TransportError",
    "UseCaseError",
    "ValidationError",
]
