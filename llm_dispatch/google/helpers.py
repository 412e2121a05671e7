"""Google Gemini ``generateContent`` wire helpers.

Turns map to ``contents`` entries with role ``user`` or ``model`` (the
Gemini name for assistant turns); the system text travels separately as
``systemInstruction``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..base.constants import GOOGLE
from ..base.models_parts.generation_request import GenerationRequest
from ..base.utils.response_parsing import empty_response, parse_response

DISPLAY_NAME = "Google"

_ROLE_MAP = {"user": "user", "assistant": "model"}


class _Part(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: Optional[str] = None


class _Content(BaseModel):
    model_config = ConfigDict(extra="allow")

    parts: List[_Part] = []


class _Candidate(BaseModel):
    model_config = ConfigDict(extra="allow")

    content: Optional[_Content] = None


class GenerateContentResponse(BaseModel):
    """Minimum ``generateContent`` response shape (extra fields allowed)."""

    model_config = ConfigDict(extra="allow")

    candidates: List[_Candidate] = []


def build_body(request: GenerationRequest) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "contents": [
            {"role": _ROLE_MAP[t.role], "parts": [{"text": t.text}]} for t in request.turns
        ]
    }
    if request.system is not None:
        body["systemInstruction"] = {"parts": [{"text": request.system}]}
    config: Dict[str, Any] = {}
    if request.temperature is not None:
        config["temperature"] = request.temperature
    if request.max_tokens is not None:
        config["maxOutputTokens"] = request.max_tokens
    if config:
        body["generationConfig"] = config
    return body


def extract_text(body: Any) -> str:
    """Return ``candidates[0].content.parts[0].text``."""
    parsed = parse_response(GenerateContentResponse, body, provider=GOOGLE, display_name=DISPLAY_NAME)
    if not parsed.candidates:
        raise empty_response(provider=GOOGLE, display_name=DISPLAY_NAME)
    content = parsed.candidates[0].content
    if content is None or not content.parts or not content.parts[0].text:
        raise empty_response(provider=GOOGLE, display_name=DISPLAY_NAME)
    return content.parts[0].text


__all__ = ["DISPLAY_NAME", "GenerateContentResponse", "build_body", "extract_text"]
