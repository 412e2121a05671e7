"""Scoped HTTP clients for capabilities.

Purpose:
    Give each network call its own ``httpx.Client`` whose lifetime is bound to
    a ``with`` block: the client is closed on success, on failure and on
    cancellation. Timeouts derive from :func:`get_timeout_config` unless the
    caller passes an explicit deadline.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Cancellation:
    When a :class:`CancellationToken` is supplied, cancelling it closes the
    client from the cancelling thread. A request blocked on the connection
    then fails immediately and the capability reports the dispatch as
    cancelled.
"""

from __future__ import annotations

import contextlib
from typing import Iterator, Mapping, Optional

import httpx

from ..cancellation_parts.cancellation_token import CancellationToken
from ..timeouts import get_timeout_config


def build_timeout(seconds: Optional[float] = None) -> httpx.Timeout:
    """Return an ``httpx.Timeout`` for one request.

    ``seconds`` bounds read/write/pool; the connect phase uses the configured
    connect timeout unless ``seconds`` is shorter.
    """
    cfg = get_timeout_config()
    total = seconds if seconds is not None and seconds > 0 else cfg.http_timeout_seconds
    return httpx.Timeout(total, connect=min(total, cfg.connect_timeout_seconds))


@contextlib.contextmanager
def open_http_client(
    base_url: str,
    *,
    timeout: Optional[float] = None,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
    cancel: Optional[CancellationToken] = None,
) -> Iterator[httpx.Client]:
    """Yield an ``httpx.Client`` scoped to the ``with`` block.

    Parameters:
        base_url: API base URL; request paths are relative to it.
        timeout: Per-request deadline in seconds (``None`` uses the default).
        headers: Default headers sent with every request (auth, versioning).
        transport: Optional transport override (``httpx.MockTransport`` in
            tests).
        cancel: Optional token; cancelling it closes the client.

    Yields:
        httpx.Client: closed when the block exits, whatever the outcome.
    """
    kwargs = {
        "base_url": base_url,
        "timeout": build_timeout(timeout),
        "headers": dict(headers or {}),
    }
    if transport is not None:
        kwargs["transport"] = transport
    client = httpx.Client(**kwargs)
    try:
        if cancel is None:
            yield client
        else:
            with cancel.on_cancel(client.close):
                yield client
    finally:
        client.close()


__all__ = ["open_http_client", "build_timeout"]
