"""OpenAI chat-completions wire helpers.

Side-effect-free utilities used by both OpenAI backends: request body
construction and text extraction from the chat-completions response shape
``{"choices": [{"message": {"content": ...}}]}``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..base.constants import OPENAI
from ..base.models_parts.generation_request import GenerationRequest
from ..base.utils.response_parsing import empty_response, parse_response

DISPLAY_NAME = "OpenAI"


class _Message(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: Optional[str] = None


class _Choice(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: Optional[_Message] = None


class ChatCompletion(BaseModel):
    """Minimum chat-completions response shape (extra fields allowed)."""

    model_config = ConfigDict(extra="allow")

    choices: List[_Choice] = []


def build_messages(request: GenerationRequest) -> List[Dict[str, str]]:
    """Return chat messages: the system instruction first, then the turns."""
    messages: List[Dict[str, str]] = []
    if request.system is not None:
        messages.append({"role": "system", "content": request.system})
    messages.extend({"role": t.role, "content": t.text} for t in request.turns)
    return messages


def build_body(request: GenerationRequest) -> Dict[str, Any]:
    """Build the ``POST /chat/completions`` body."""
    body: Dict[str, Any] = {"model": request.model, "messages": build_messages(request)}
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.max_tokens is not None:
        body["max_tokens"] = request.max_tokens
    return body


def extract_text(body: Any) -> str:
    """Return ``choices[0].message.content``.

    Raises:
        DispatchError: ``RESPONSE_PARSE`` for a malformed body,
            ``EMPTY_RESPONSE`` when the content is missing or empty.
    """
    parsed = parse_response(ChatCompletion, body, provider=OPENAI, display_name=DISPLAY_NAME)
    if not parsed.choices or parsed.choices[0].message is None:
        raise empty_response(provider=OPENAI, display_name=DISPLAY_NAME)
    content = parsed.choices[0].message.content
    if not content:
        raise empty_response(provider=OPENAI, display_name=DISPLAY_NAME)
    return content


__all__ = ["DISPLAY_NAME", "ChatCompletion", "build_messages", "build_body", "extract_text"]
