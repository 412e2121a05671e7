"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` used by callers to abandon an in-flight
dispatch. Besides polling via ``raise_if_cancelled`` the token runs registered
callbacks on cancel; capabilities use this to close their HTTP client so a
blocked request is interrupted and its connection released.
"""

from __future__ import annotations

import contextlib
from threading import Lock
from typing import Callable, Iterator, List

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A cooperative cancellation token with optional cascading semantics.

    Thread-safe: ``cancel`` may be called from any thread while another thread
    is blocked inside a dispatch. Child tokens inherit cancellation when the
    parent is cancelled.
    """

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._state.cancelled

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation, run callbacks, and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            callbacks = list(self._state.callbacks)
            self._state.callbacks.clear()
            children = list(self._children)
        for callback in callbacks:
            # A failing cleanup hook must not stop the remaining ones.
            with contextlib.suppress(Exception):
                callback()
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Register ``callback`` to run on cancel; runs now if already cancelled."""
        with self._lock:
            if not self._state.cancelled:
                self._state.callbacks.append(callback)
                return
        with contextlib.suppress(Exception):
            callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        """Unregister a callback added with :meth:`add_callback` (no-op if absent)."""
        with self._lock:
            with contextlib.suppress(ValueError):
                self._state.callbacks.remove(callback)

    @contextlib.contextmanager
    def on_cancel(self, callback: Callable[[], None]) -> Iterator[None]:
        """Scope a callback registration to a ``with`` block."""
        self.add_callback(callback)
        try:
            yield
        finally:
            self.remove_callback(callback)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
