"""
GenerationRequest DTO handed to capabilities.

Capabilities map this normalized request to their wire body or SDK call. It
carries only what a single generation needs; credentials stay on the
capability itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .conversation import TranslatedConversation, Turn


@dataclass(frozen=True)
class GenerationRequest:
    """Normalized request sent to a capability.

    Attributes:
        model: Target model identifier.
        system: Merged system instruction, ``None`` when absent.
        turns: Ordered user/assistant turns.
        temperature: Sampling temperature when the caller sets one.
        max_tokens: Completion limit; adapters that require one fall back to
            their own default.
        timeout_seconds: Per-call deadline for the network operation.
    """

    model: str
    system: Optional[str]
    turns: Tuple[Turn, ...]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    timeout_seconds: Optional[float] = None

    @classmethod
    def from_translation(
        cls,
        model: str,
        translated: TranslatedConversation,
        *,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
    ) -> "GenerationRequest":
        return cls(
            model=model,
            system=translated.system,
            turns=translated.turns,
            temperature=temperature,
            max_tokens=max_tokens,
            timeout_seconds=timeout_seconds,
        )


__all__ = [
    "GenerationRequest",
]
