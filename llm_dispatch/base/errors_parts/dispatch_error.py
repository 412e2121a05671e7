"""
Structured dispatch error exception type.

Every failure of a dispatch, whatever its origin, reaches the caller as a
``DispatchError``. The record is always fully populated except for
``status_code``, which is present only when the upstream failure carried a
numeric HTTP status.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..constants import ERROR_MESSAGE_PREVIEW_CHARS
from .error_kind import ErrorKind


@dataclass
class DispatchError(Exception):
    """Represents a normalized dispatch failure.

    Attributes:
        provider: Provider id where the error originated, ``"unknown"`` when
            the failure happened before (or without) a resolved provider.
        message: Human-readable description of the failure (the original
            upstream message, credentials removed).
        status_code: HTTP status when one was available upstream.
        kind: Normalized :class:`ErrorKind` classification.
        model: Model identifier of the failed dispatch, when known.
        retryable: Hint for caller-side retry policy (not authoritative).
    """

    provider: str
    message: str
    status_code: Optional[int] = None
    kind: ErrorKind = ErrorKind.UNANTICIPATED
    model: Optional[str] = None
    retryable: bool = False

    def __str__(self) -> str:
        status = f" ({self.status_code})" if self.status_code is not None else ""
        text = self.message
        if len(text) > ERROR_MESSAGE_PREVIEW_CHARS:
            text = text[:ERROR_MESSAGE_PREVIEW_CHARS] + "..."
        return f"LLM API error from {self.provider}{status}: {text}"

    def to_dict(self) -> dict:
        """Return a JSON-serializable view of the error."""
        return {
            "provider": self.provider,
            "model": self.model,
            "status_code": self.status_code,
            "kind": self.kind.value,
            "message": self.message,
            "retryable": self.retryable,
        }


__all__ = ["DispatchError"]
