"""
Translated conversation DTOs.

``Turn`` is a non-system message after translation (user or assistant only)
and ``TranslatedConversation`` pairs the ordered turns with the merged system
instruction, which is ``None`` when the conversation had no system messages.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple


TurnRole = Literal["user", "assistant"]


@dataclass(frozen=True)
class Turn:
    """A non-system conversation turn."""

    role: TurnRole
    text: str


@dataclass(frozen=True)
class TranslatedConversation:
    """Result of translating a conversation for a provider call.

    Attributes:
        system: Merged system instruction, or ``None`` when absent.
        turns: Ordered user/assistant turns.
    """

    system: Optional[str] = None
    turns: Tuple[Turn, ...] = field(default_factory=tuple)

    def as_role_dicts(self) -> List[dict]:
        """Return turns as ``{"role", "content"}`` dictionaries."""
        return [{"role": t.role, "content": t.text} for t in self.turns]


__all__ = [
    "Turn",
    "TurnRole",
    "TranslatedConversation",
]
