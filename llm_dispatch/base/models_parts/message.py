"""
Message DTO used by the conversation translator.

Defines the ``Message`` dataclass and the ``Role`` literal. Roles outside the
literal are tolerated at runtime: the translator maps them to user turns
instead of rejecting them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Union


# Message roles understood by the translator.
Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A single role-tagged conversation message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``). Other values are accepted and treated as user
            input during translation.
        content: Plain text content.
    """

    role: Role
    content: str

    @classmethod
    def coerce(cls, value: Union["Message", Mapping[str, Any]]) -> "Message":
        """Return ``value`` as a ``Message``.

        Accepts an existing ``Message`` or a mapping carrying ``role`` and
        ``content`` keys (the shape produced by conversation builders and
        JSON fixtures). Missing keys default to an empty string so a malformed
        entry still translates instead of failing the dispatch.
        """
        if isinstance(value, Message):
            return value
        return cls(
            role=str(value.get("role", "") or ""),  # type: ignore[arg-type]
            content=str(value.get("content", "") or ""),
        )


__all__ = [
    "Message",
    "Role",
]
