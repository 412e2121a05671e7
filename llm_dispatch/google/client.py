"""Google Gemini HTTP capability.

Calls ``POST {base_url}/models/{model}:generateContent``. The key is sent in
the ``x-goog-api-key`` header, never in the query string, so it cannot leak
through logged URLs.
"""

from __future__ import annotations

from typing import Any, Dict
from urllib.parse import quote

from ..base.constants import GOOGLE
from ..base.http.capability import HttpCapability
from ..base.models_parts.generation_request import GenerationRequest
from . import helpers


class GoogleCapability(HttpCapability):
    """Gemini ``generateContent`` over plain HTTP."""

    provider = GOOGLE
    display_name = helpers.DISPLAY_NAME

    def endpoint(self, request: GenerationRequest) -> str:
        return f"/models/{quote(request.model, safe='.-_')}:generateContent"

    def auth_headers(self) -> Dict[str, str]:
        return {"x-goog-api-key": self._config.secret()}

    def build_body(self, request: GenerationRequest) -> Dict[str, Any]:
        return helpers.build_body(request)

    def extract_text(self, body: Any) -> str:
        return helpers.extract_text(body)


__all__ = ["GoogleCapability"]
