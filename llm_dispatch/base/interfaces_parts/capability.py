"""Capability protocol.

A capability is a configured, ready-to-call handle for one provider. It turns
a :class:`GenerationRequest` into typed content parts, translating every
failure into a ``DispatchError`` before it leaves the adapter.
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from ..cancellation_parts.cancellation_token import CancellationToken
from ..models_parts.content_part import ContentPart
from ..models_parts.generation_request import GenerationRequest


@runtime_checkable
class Capability(Protocol):
    """Minimal text generation contract implemented by every adapter."""

    @property
    def provider_name(self) -> str:  # pragma: no cover - interface
        ...

    def generate_text(
        self,
        request: GenerationRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> Sequence[ContentPart]:  # pragma: no cover - interface
        """Execute one generation call and return the response parts."""
        ...


__all__ = ["Capability"]
