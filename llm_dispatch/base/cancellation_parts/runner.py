"""Run a blocking call so a cancellation token can abandon it.

A thread blocked in a socket read is not woken when another thread closes the
socket, so polling the token around a blocking call is not enough. The call
runs on a single-use worker thread instead and the caller waits on whichever
comes first: the result or the token. On cancel the caller raises
``CancelledError`` at once; the worker is left to unwind on its own once its
resources are closed (or its own timeout fires).
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Event
from typing import Callable, Optional, TypeVar

from .cancellation_token import CancellationToken
from .cancelled_error import CancelledError

T = TypeVar("T")


def run_cancellable(func: Callable[[], T], cancel: Optional[CancellationToken] = None) -> T:
    """Return ``func()`` unless ``cancel`` fires first.

    Exceptions raised by ``func`` propagate unchanged. Without a token the
    call runs inline.

    Raises:
        CancelledError: when the token is (or becomes) cancelled before
            ``func`` finishes.
    """
    if cancel is None:
        return func()
    cancel.raise_if_cancelled()
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="llm-dispatch-call")
    try:
        future = executor.submit(func)
        wake = Event()
        future.add_done_callback(lambda _f: wake.set())
        with cancel.on_cancel(wake.set):
            wake.wait()
        if not future.done():
            future.cancel()
            raise CancelledError(cancel.reason or "operation cancelled")
        return future.result()
    finally:
        executor.shutdown(wait=False)


__all__ = ["run_cancellable"]
