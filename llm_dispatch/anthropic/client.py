"""Anthropic HTTP capability.

Calls ``POST {base_url}/messages`` authenticated with ``x-api-key`` and pinned
to the ``anthropic-version`` API revision.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.constants import ANTHROPIC
from ..base.http.capability import HttpCapability
from ..base.models_parts.generation_request import GenerationRequest
from ..config.defaults import ANTHROPIC_VERSION
from . import helpers


class AnthropicCapability(HttpCapability):
    """Anthropic Messages API over plain HTTP."""

    provider = ANTHROPIC
    display_name = helpers.DISPLAY_NAME

    def endpoint(self, request: GenerationRequest) -> str:
        return "/messages"

    def auth_headers(self) -> Dict[str, str]:
        return {
            "x-api-key": self._config.secret(),
            "anthropic-version": ANTHROPIC_VERSION,
        }

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        return helpers.build_params(request)

    def extract_text(self, body: Any) -> str:
        return helpers.extract_text(body)


__all__ = ["AnthropicCapability"]
