"""OpenAI HTTP capability.

Calls ``POST {base_url}/chat/completions`` with bearer authentication. The
request lifecycle (scoped client, cancellation, error mapping) is inherited
from :class:`HttpCapability`.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.constants import OPENAI
from ..base.http.capability import HttpCapability
from ..base.models_parts.generation_request import GenerationRequest
from . import helpers


class OpenAICapability(HttpCapability):
    """OpenAI chat-completions over plain HTTP."""

    provider = OPENAI
    display_name = helpers.DISPLAY_NAME

    def endpoint(self, request: GenerationRequest) -> str:
        return "/chat/completions"

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._config.secret()}"}

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        return helpers.build_body(request)

    def extract_text(self, body: Any) -> str:
        return helpers.extract_text(body)


__all__ = ["OpenAICapability"]
