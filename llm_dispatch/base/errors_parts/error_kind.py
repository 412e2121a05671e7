"""
Normalized dispatch failure kinds (taxonomy).

Defines the ``ErrorKind`` enumeration carried by every ``DispatchError``.
Values are lowercase snake_case and are a stable contract for logging and
for callers deciding whether to retry, alert, or surface a failure.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure categories of a dispatch."""

    UNKNOWN_MODEL = "unknown_model"
    PROVIDER_NOT_CONFIGURED = "provider_not_configured"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    RESPONSE_PARSE = "response_parse"
    EMPTY_RESPONSE = "empty_response"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    UNANTICIPATED = "unanticipated"


__all__ = ["ErrorKind"]
