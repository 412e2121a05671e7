"""Typed response part extraction."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from ..models_parts.content_part import ContentPart


def _part_fields(part: Union[ContentPart, Mapping[str, Any]]) -> tuple:
    if isinstance(part, ContentPart):
        return part.type, part.text
    return part.get("type"), part.get("text")


def join_text_parts(parts: Iterable[Union[ContentPart, Mapping[str, Any]]]) -> str:
    """Concatenate the text of ``"text"`` parts in order, with no separator.

    Non-text parts (tool calls, refusals) are skipped. An empty sequence, or
    one without text parts, yields ``""``.
    """
    chunks = []
    for part in parts:
        kind, text = _part_fields(part)
        if kind == "text" and text:
            chunks.append(text)
    return "".join(chunks)


__all__ = ["join_text_parts"]
