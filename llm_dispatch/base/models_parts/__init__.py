"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
``llm_dispatch.base.models_parts`` if needed, while ``llm_dispatch.base.models``
remains the primary stable import path.
"""

from .content_part import ContentPart, ContentPartType
from .conversation import TranslatedConversation, Turn, TurnRole
from .generation_request import GenerationRequest
from .message import Message, Role
from .provider_config import Backend, ProviderConfig

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
