"""Anthropic capability backed by the official ``anthropic`` SDK.

Selected with ``backend="sdk"``. The SDK appends ``/v1`` itself, so the
configured base URL is passed without its version segment.
"""

from __future__ import annotations

from typing import Any, List

from ..base.constants import ANTHROPIC
from ..base.models_parts.content_part import ContentPart
from ..base.models_parts.generation_request import GenerationRequest
from ..base.sdk_capability import SdkCapability
from . import helpers

try:
    from anthropic import Anthropic as _AnthropicClient  # type: ignore
except Exception:  # pragma: no cover - optional dependency
    _AnthropicClient = None  # type: ignore


def blocks_to_parts(blocks: Any) -> List[ContentPart]:
    """Convert SDK content blocks (text, tool_use, others) into parts."""
    parts: List[ContentPart] = []
    for block in blocks or []:
        kind = getattr(block, "type", None)
        if kind == "text":
            parts.append(ContentPart.of_text(getattr(block, "text", "") or ""))
        elif kind == "tool_use":
            parts.append(
                ContentPart(
                    type="tool_call",
                    data={
                        "id": getattr(block, "id", None),
                        "name": getattr(block, "name", None),
                        "arguments": getattr(block, "input", None),
                    },
                )
            )
        else:
            parts.append(ContentPart(type="other", data={"type": kind}))
    return parts


class AnthropicSdkCapability(SdkCapability):
    """Anthropic Messages API through the vendor SDK."""

    provider = ANTHROPIC
    display_name = helpers.DISPLAY_NAME
    sdk_extra = "anthropic"

    def _client_class(self) -> Any:
        return _AnthropicClient

    def _client_base_url(self) -> str:
        base = self._config.base_url
        return base[: -len("/v1")] if base.endswith("/v1") else base

    def _invoke(self, client: Any, request: GenerationRequest) -> Any:
        return client.messages.create(**helpers.build_params(request))

    def _to_parts(self, response: Any) -> List[ContentPart]:
        return blocks_to_parts(getattr(response, "content", None))


__all__ = ["AnthropicSdkCapability", "blocks_to_parts"]
