"""llm_dispatch: route provider-agnostic conversations to LLM backends.

Typical use::

    from llm_dispatch import build_dispatcher, Message

    dispatcher = build_dispatcher()          # configs from the environment
    text = dispatcher.generate(
        [Message("system", "Be terse."), Message("user", "Hi")],
        model="gpt-4o-mini",
    )

Every failure surfaces as :class:`DispatchError`.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from .base import (
    CancellationToken,
    Capability,
    CapabilityRegistry,
    ContentPart,
    DispatchError,
    ErrorKind,
    GenerationRequest,
    Message,
    ProviderConfig,
    ProviderConfigs,
    ProviderFactory,
    ProviderResolver,
    normalize_error,
    resolve_provider,
    translate_conversation,
)
from .config import load_provider_configs
from .di import build_dispatcher
from .dispatcher import Conversation, Dispatcher

__version__ = "0.1.0"

_DEFAULT: Optional[Dispatcher] = None
_DEFAULT_LOCK = threading.Lock()


def default_dispatcher() -> Dispatcher:
    """Return the process-wide dispatcher built from the environment."""
    global _DEFAULT
    with _DEFAULT_LOCK:
        if _DEFAULT is None:
            _DEFAULT = build_dispatcher()
        return _DEFAULT


def generate(conversation: Conversation, model: Optional[str] = None, **kwargs: Any) -> str:
    """Generate with :func:`default_dispatcher` (see :meth:`Dispatcher.generate`)."""
    return default_dispatcher().generate(conversation, model, **kwargs)


__all__ = [
    "__version__",
    "Dispatcher",
    "Conversation",
    "build_dispatcher",
    "default_dispatcher",
    "generate",
    "load_provider_configs",
    "CancellationToken",
    "Capability",
    "CapabilityRegistry",
    "ContentPart",
    "DispatchError",
    "ErrorKind",
    "GenerationRequest",
    "Message",
    "ProviderConfig",
    "ProviderConfigs",
    "ProviderFactory",
    "ProviderResolver",
    "normalize_error",
    "resolve_provider",
    "translate_conversation",
]
