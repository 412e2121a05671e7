"""Pure helpers shared by the dispatcher and the provider adapters."""

from .conversation import translate_conversation
from .extraction import join_text_parts

__all__ = ["translate_conversation", "join_text_parts"]
