"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from ``llm_dispatch.base.errors`` for the stable surface.
"""

from .error_kind import ErrorKind
from .dispatch_error import DispatchError
from .classification import classify_exception, is_retryable, normalize_error, redact

__all__ = [
    "ErrorKind",
    "DispatchError",
    "classify_exception",
    "is_retryable",
    "normalize_error",
    "redact",
]
