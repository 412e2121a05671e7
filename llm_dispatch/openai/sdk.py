"""OpenAI capability backed by the official ``openai`` SDK.

Selected with ``backend="sdk"`` (``LLM_OPENAI_BACKEND=sdk``). Uses
``client.chat.completions.create`` and converts the first choice into typed
parts: message text, refusal and tool calls.
"""

from __future__ import annotations

from typing import Any, List

from ..base.constants import OPENAI
from ..base.models_parts.content_part import ContentPart
from ..base.models_parts.generation_request import GenerationRequest
from ..base.sdk_capability import SdkCapability
from ..base.utils.response_parsing import empty_response
from . import helpers

try:
    from openai import OpenAI as _OpenAIClient  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    _OpenAIClient = None  # type: ignore


def message_to_parts(message: Any) -> List[ContentPart]:
    """Convert an SDK chat message into content parts."""
    parts: List[ContentPart] = []
    content = getattr(message, "content", None)
    if content:
        parts.append(ContentPart.of_text(content))
    refusal = getattr(message, "refusal", None)
    if refusal:
        parts.append(ContentPart(type="refusal", text=refusal))
    for call in getattr(message, "tool_calls", None) or []:
        fn = getattr(call, "function", None)
        parts.append(
            ContentPart(
                type="tool_call",
                data={
                    "id": getattr(call, "id", None),
                    "name": getattr(fn, "name", None),
                    "arguments": getattr(fn, "arguments", None),
                },
            )
        )
    return parts


class OpenAISdkCapability(SdkCapability):
    """OpenAI chat-completions through the vendor SDK."""

    provider = OPENAI
    display_name = helpers.DISPLAY_NAME
    sdk_extra = "openai"

    def _client_class(self) -> Any:
        return _OpenAIClient

    def _invoke(self, client: Any, request: GenerationRequest) -> Any:
        return client.chat.completions.create(**helpers.build_body(request))

    def _to_parts(self, response: Any) -> List[ContentPart]:
        choices = getattr(response, "choices", None)
        if not choices:
            err = empty_response(provider=OPENAI, display_name=self.display_name)
            err.model = self._model
            raise err
        return message_to_parts(getattr(choices[0], "message", None))


__all__ = ["OpenAISdkCapability", "message_to_parts"]
