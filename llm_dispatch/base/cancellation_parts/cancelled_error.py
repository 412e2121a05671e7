"""Cancellation error type.

Defines the public ``CancelledError`` raised when a dispatch observes a
cancellation request. The dispatcher converts it into a ``DispatchError``
tagged ``cancelled`` before it reaches the caller.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively."""


__all__ = ["CancelledError"]
