"""
Dispatch Base Package

Exports the provider-agnostic pieces of the dispatch pipeline:
- Models (DTOs): messages, translated conversations, requests, content parts,
  provider configuration
- Errors: the ``DispatchError`` taxonomy and normalization helpers
- Resolution and gating: model -> provider, provider -> configuration
- Capabilities: the protocol, the lazy factory and the registry
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    DispatchError,
    ErrorKind,
    classify_exception,
    is_retryable,
    normalize_error,
    redact,
)
from .factory import ProviderFactory, UnknownProviderError
from .gate import ProviderConfigs, require_provider_config
from .interfaces import Capability
from .models import (
    Backend,
    ContentPart,
    ContentPartType,
    GenerationRequest,
    Message,
    ProviderConfig,
    Role,
    TranslatedConversation,
    Turn,
)
from .registry import CapabilityRegistry
from .resolver import PrefixRule, ProviderResolver, resolve_provider
from .timeouts import TimeoutConfig, get_timeout_config, resolve_timeout
from .utils import join_text_parts, translate_conversation

__all__ = [
    # Models
    "Role",
    "Message",
    "Turn",
    "TranslatedConversation",
    "GenerationRequest",
    "ContentPart",
    "ContentPartType",
    "Backend",
    "ProviderConfig",
    # Errors
    "DispatchError",
    "ErrorKind",
    "classify_exception",
    "is_retryable",
    "normalize_error",
    "redact",
    # Resolution / gating
    "PrefixRule",
    "ProviderResolver",
    "resolve_provider",
    "ProviderConfigs",
    "require_provider_config",
    # Capabilities
    "Capability",
    "ProviderFactory",
    "UnknownProviderError",
    "CapabilityRegistry",
    # Helpers
    "translate_conversation",
    "join_text_parts",
    "TimeoutConfig",
    "get_timeout_config",
    "resolve_timeout",
    "CancellationToken",
    "CancelledError",
]
