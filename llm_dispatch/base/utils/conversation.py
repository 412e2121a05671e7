"""Conversation translation helpers shared across providers.

Splits a provider-agnostic conversation into the merged system instruction and
the ordered user/assistant turns every provider wire format is built from.
Helpers here are side-effect free and operate on provider-agnostic DTOs only.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from ..constants import SYSTEM_SEPARATOR
from ..models_parts.conversation import TranslatedConversation, Turn
from ..models_parts.message import Message


def translate_conversation(
    messages: Iterable[Union[Message, Mapping[str, Any]]],
) -> TranslatedConversation:
    """Partition ``messages`` into a merged system text and ordered turns.

    Summary
    - System message contents are joined with a single newline, in order.
      ``system`` is ``None`` when no system message is present (never ``""``).
    - Every other message becomes a turn, keeping its relative order.
      ``assistant`` stays ``assistant``; ``user`` and any unrecognized role
      become ``user``.

    Parameters
    - messages: ``Message`` DTOs or ``{"role", "content"}`` mappings.

    Returns
    - TranslatedConversation: empty input yields ``(None, ())``.

    Failure modes
    - None. Malformed roles are mapped, not rejected.
    """
    system_segments: List[str] = []
    turns: List[Turn] = []
    for raw in messages:
        m = Message.coerce(raw)
        if m.role == "system":
            system_segments.append(m.content)
        elif m.role == "assistant":
            turns.append(Turn(role="assistant", text=m.content))
        else:
            turns.append(Turn(role="user", text=m.content))
    system = SYSTEM_SEPARATOR.join(system_segments) if system_segments else None
    return TranslatedConversation(system=system, turns=tuple(turns))


__all__ = ["translate_conversation"]
