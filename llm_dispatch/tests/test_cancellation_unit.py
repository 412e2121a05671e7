from __future__ import annotations

import threading
import time

import pytest

from llm_dispatch.base.cancellation import CancellationToken, CancelledError, run_cancellable


def test_raise_if_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("stop")
    with pytest.raises(CancelledError, match="stop"):
        token.raise_if_cancelled()


def test_callbacks_run_once_on_cancel():
    token = CancellationToken()
    calls = []
    token.add_callback(lambda: calls.append(1))
    token.cancel()
    token.cancel()
    assert calls == [1]  # nosec B101


def test_callback_added_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel()
    calls = []
    token.add_callback(lambda: calls.append(1))
    assert calls == [1]  # nosec B101


def test_on_cancel_scope_unregisters():
    token = CancellationToken()
    calls = []
    with token.on_cancel(lambda: calls.append(1)):
        pass
    token.cancel()
    assert calls == []  # nosec B101


def test_failing_callback_does_not_block_others():
    token = CancellationToken()
    calls = []

    def boom():
        raise RuntimeError("x")

    token.add_callback(boom)
    token.add_callback(lambda: calls.append(1))
    token.cancel()
    assert calls == [1]  # nosec B101


def test_child_inherits_cancellation():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("bye")
    assert child.cancelled  # nosec B101
    assert child.reason == "bye"  # nosec B101
    late = parent.child()
    assert late.cancelled  # nosec B101


def test_run_cancellable_without_token_runs_inline():
    caller = threading.current_thread()
    assert run_cancellable(lambda: threading.current_thread() is caller) is True  # nosec B101


def test_run_cancellable_returns_result_and_propagates_errors():
    token = CancellationToken()
    assert run_cancellable(lambda: 42, token) == 42  # nosec B101

    def boom():
        raise ValueError("bad")

    with pytest.raises(ValueError, match="bad"):
        run_cancellable(boom, token)


def test_run_cancellable_abandons_blocked_call():
    token = CancellationToken()
    release = threading.Event()
    timer = threading.Timer(0.2, token.cancel, args=("stop",))
    start = time.monotonic()
    timer.start()
    try:
        with pytest.raises(CancelledError, match="stop"):
            run_cancellable(lambda: release.wait(10), token)
        elapsed = time.monotonic() - start
    finally:
        timer.cancel()
        release.set()
    assert elapsed < 1.5  # nosec B101


def test_run_cancellable_precancelled_never_starts():
    token = CancellationToken()
    token.cancel("early")
    calls = []
    with pytest.raises(CancelledError, match="early"):
        run_cancellable(lambda: calls.append(1), token)
    assert calls == []  # nosec B101
