"""Anthropic helpers module.

Purpose:
- Side-effect-free utilities shared by the Anthropic backends: ``messages``
  parameter building and text extraction from the Messages API response
  ``{"content": [{"type": "text", "text": ...}]}``.

Notes:
- ``max_tokens`` is mandatory for the Messages API; the caller's value wins,
  otherwise ``ANTHROPIC_DEFAULT_MAX_TOKENS`` is sent.
- ``system`` is sent only when the conversation has system text.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..base.constants import ANTHROPIC
from ..base.models_parts.generation_request import GenerationRequest
from ..base.utils.response_parsing import empty_response, parse_response
from ..config.defaults import ANTHROPIC_DEFAULT_MAX_TOKENS

DISPLAY_NAME = "Anthropic"


class _ContentBlock(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Optional[str] = None
    text: Optional[str] = None


class MessagesResponse(BaseModel):
    """Minimum Messages API response shape (extra fields allowed)."""

    model_config = ConfigDict(extra="allow")

    content: List[_ContentBlock] = []


def build_params(request: GenerationRequest) -> Dict[str, Any]:
    """Build Anthropic ``messages`` parameters.

    Parameters:
        request: Normalized generation request.

    Returns:
        Mapping usable both as the HTTP body and as SDK keyword arguments.
    """
    params: Dict[str, Any] = {
        "model": request.model,
        "max_tokens": request.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
        "messages": [{"role": t.role, "content": t.text} for t in request.turns],
    }
    if request.system is not None:
        params["system"] = request.system
    if request.temperature is not None:
        params["temperature"] = request.temperature
    return params


def extract_text(body: Any) -> str:
    """Return ``content[0].text``.

    Raises:
        DispatchError: ``RESPONSE_PARSE`` for a malformed body,
            ``EMPTY_RESPONSE`` when no text is present.
    """
    parsed = parse_response(MessagesResponse, body, provider=ANTHROPIC, display_name=DISPLAY_NAME)
    if not parsed.content or not parsed.content[0].text:
        raise empty_response(provider=ANTHROPIC, display_name=DISPLAY_NAME)
    return parsed.content[0].text


__all__ = ["DISPLAY_NAME", "MessagesResponse", "build_params", "extract_text"]
