"""
Typed response part model.

Capabilities may return assistant output as several parts (text, tool-call
metadata, refusals). This module defines the provider-agnostic ``ContentPart``
shape the extractor consumes; only ``"text"`` parts contribute to the final
generation result.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional


# Known content part types seen across providers' responses.
ContentPartType = Literal[
    "text",          # Plain text content
    "tool_call",     # Tool call metadata
    "refusal",       # Refusal reason text
    "other",         # Catch-all (adapter may attach provider-specific type info)
]


@dataclass(frozen=True)
class ContentPart:
    """A single piece of assistant output.

    Attributes:
        type: The semantic kind of the part, e.g. ``"text"`` or ``"tool_call"``.
        text: Textual content for text parts.
        data: Provider-specific payload for non-text parts (tool call
            arguments, ids).
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def of_text(cls, text: str) -> "ContentPart":
        """Shortcut for a text part."""
        return cls(type="text", text=text)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the part."""
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
