"""
Error classification and normalization helpers.

Maps arbitrary failures (``httpx`` transport errors, vendor SDK exceptions,
bare values) onto :class:`ErrorKind` and coerces them into a
:class:`DispatchError`. HTTP status extraction mirrors the attribute shapes
used by ``httpx`` and the vendor SDKs.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

import httpx

from ..cancellation_parts.cancelled_error import CancelledError
from ..constants import REDACTED, UNKNOWN_PROVIDER
from .dispatch_error import DispatchError
from .error_kind import ErrorKind


# Statuses a caller may reasonably retry.
_RETRYABLE_STATUSES = frozenset({408, 429, 500, 502, 503, 504})

_RETRYABLE_KINDS = frozenset({ErrorKind.TRANSPORT, ErrorKind.TIMEOUT})


def _extract_status(value: Any) -> Optional[int]:
    """Attempt to extract an HTTP status code from a failure value.

    Supported attribute shapes (checked in order):
    - ``value.status_code``
    - ``value.status``
    - ``value.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(value, attr, None)
        if isinstance(val, int) and not isinstance(val, bool) and 100 <= val < 600:
            return val
    resp = getattr(value, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and not isinstance(sc, bool) and 100 <= sc < 600:
            return sc
    return None


def _name_hint(value: Any) -> str:
    return type(value).__name__.lower()


def classify_exception(value: Any) -> ErrorKind:
    """Classify a failure value into a normalized :class:`ErrorKind`.

    Precedence:
        1. ``DispatchError`` passthrough.
        2. Cooperative cancellation.
        3. Timeouts (builtin, ``httpx``, SDK classes named ``*Timeout*``).
        4. Numeric HTTP status.
        5. Transport failures (``httpx.TransportError``, ``ConnectionError``,
           SDK classes named ``*Connection*``).
        6. ``UNANTICIPATED`` fallback.
    """
    if isinstance(value, DispatchError):
        return value.kind
    if isinstance(value, CancelledError):
        return ErrorKind.CANCELLED
    hint = _name_hint(value)
    if isinstance(value, (TimeoutError, httpx.TimeoutException)) or "timeout" in hint:
        return ErrorKind.TIMEOUT
    if _extract_status(value) is not None:
        return ErrorKind.HTTP_STATUS
    if isinstance(value, (httpx.TransportError, ConnectionError)) or "connection" in hint:
        return ErrorKind.TRANSPORT
    return ErrorKind.UNANTICIPATED


def is_retryable(kind: ErrorKind, status_code: Optional[int]) -> bool:
    """Return the retry hint for a failure kind and optional status."""
    if kind in _RETRYABLE_KINDS:
        return True
    return kind is ErrorKind.HTTP_STATUS and status_code in _RETRYABLE_STATUSES


def redact(text: str, secrets: Iterable[Optional[str]]) -> str:
    """Replace every occurrence of each non-empty secret in ``text``."""
    clean = text
    for secret in secrets:
        if secret:
            clean = clean.replace(secret, REDACTED)
    return clean


def _message_of(value: Any) -> str:
    if isinstance(value, BaseException):
        text = str(value)
        return text or type(value).__name__
    return str(value)


def normalize_error(
    value: Any,
    *,
    provider: str = UNKNOWN_PROVIDER,
    model: Optional[str] = None,
    secrets: Iterable[Optional[str]] = (),
) -> DispatchError:
    """Coerce any failure value into a :class:`DispatchError`.

    Parameters:
        value: The failure. A ``DispatchError`` is returned unchanged;
            anything else (exceptions or bare values such as strings) is
            converted, its string form becoming the message.
        provider: Provider id known at the point of capture.
        model: Model identifier of the dispatch, when known.
        secrets: Credentials to scrub from the message.

    Returns:
        DispatchError: ``status_code`` is set only when a numeric status was
        found on the failure value.
    """
    if isinstance(value, DispatchError):
        return value
    kind = classify_exception(value)
    status = _extract_status(value)
    return DispatchError(
        provider=provider,
        message=redact(_message_of(value), secrets),
        status_code=status,
        kind=kind,
        model=model,
        retryable=is_retryable(kind, status),
    )


__all__ = [
    "classify_exception",
    "normalize_error",
    "is_retryable",
    "redact",
    "_extract_status",
]
