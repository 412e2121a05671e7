"""Unified timeout configuration for dispatch calls.

This module centralizes the timeout values used when capabilities open their
HTTP clients, so no adapter hard-codes a numeric literal.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use (and again only when the overriding variables change).
    Supported environment variables (all optional):
        DISPATCH_TIMEOUT_HTTP_SECONDS
        DISPATCH_TIMEOUT_CONNECT_SECONDS

resolve_timeout(call, provider)
    Applies precedence: per-call deadline > provider config > process default.
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Optional


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall read/write/pool timeout of one request.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:  # pragma: no cover - defensive
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached ``TimeoutConfig`` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    cur_guard = "/".join(
        [
            os.getenv("DISPATCH_TIMEOUT_HTTP_SECONDS", ""),
            os.getenv("DISPATCH_TIMEOUT_CONNECT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("DISPATCH_TIMEOUT_HTTP_SECONDS", 60.0),
        connect_timeout_seconds=_parse_env_float("DISPATCH_TIMEOUT_CONNECT_SECONDS", 10.0),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


def resolve_timeout(call: Optional[float], provider: Optional[float] = None) -> float:
    """Return the effective request timeout in seconds."""
    for candidate in (call, provider):
        if candidate is not None and candidate > 0:
            return float(candidate)
    return get_timeout_config().http_timeout_seconds


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "resolve_timeout",
]
