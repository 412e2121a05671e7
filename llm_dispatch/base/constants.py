"""Base shared constants for the dispatch layer.

Central location for provider identifiers and sentinel strings so they are
not scattered across adapters, the gate, and the resolver.

# pragma: allowlist secret
"""
from __future__ import annotations

# Canonical provider identifiers
OPENAI = "openai"
ANTHROPIC = "anthropic"
GOOGLE = "google"

# Sentinel returned by the resolver when no prefix rule matches
UNKNOWN_PROVIDER = "unknown"

# Separator used when merging several system messages into one instruction
SYSTEM_SEPARATOR = "\n"

# Maximum number of characters of the original message kept in str(DispatchError)
ERROR_MESSAGE_PREVIEW_CHARS = 100

# Replacement written over credentials found in error messages
REDACTED = "<redacted>"

__all__ = [
    "OPENAI",
    "ANTHROPIC",
    "GOOGLE",
    "UNKNOWN_PROVIDER",
    "SYSTEM_SEPARATOR",
    "ERROR_MESSAGE_PREVIEW_CHARS",
    "REDACTED",
]
