"""Dispatch error taxonomy public surface."""

from .errors_parts import (
    DispatchError,
    ErrorKind,
    classify_exception,
    is_retryable,
    normalize_error,
    redact,
)

__all__ = [
    "DispatchError",
    "ErrorKind",
    "classify_exception",
    "is_retryable",
    "normalize_error",
    "redact",
]
