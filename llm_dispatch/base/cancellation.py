"""Cooperative cancellation primitives (public API facade).

- ``CancellationToken`` lets a caller abandon a dispatch from another thread.
- ``CancelledError`` is raised inside the pipeline when cancellation is
  observed and surfaces to callers as a ``DispatchError`` of kind
  ``cancelled``.
- ``run_cancellable`` runs a blocking call that the token can abandon.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.runner import run_cancellable

__all__ = ["CancellationToken", "CancelledError", "run_cancellable"]
