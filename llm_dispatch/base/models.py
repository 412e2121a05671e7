"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``llm_dispatch.base.models_parts``.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.conversation import TranslatedConversation, Turn, TurnRole
from .models_parts.generation_request import GenerationRequest
from .models_parts.message import Message, Role
from .models_parts.provider_config import Backend, ProviderConfig

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "Turn",
    "TurnRole",
    "TranslatedConversation",
    "GenerationRequest",
    "Backend",
    "ProviderConfig",
]
