"""Deterministic mock capability for offline testing.

Purpose
-------
Provide a capability that honours the ``Capability`` contract without any
network traffic. Each call pops the next scripted outcome: a list of content
parts (returned), a plain string (returned as one text part) or an exception
(raised as is, so tests can exercise the dispatcher's normalization of
arbitrary failures). Every request is recorded for later inspection.

External dependencies
---------------------
Standard library only.
"""

from __future__ import annotations

from threading import Lock
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from ..base.cancellation_parts.cancellation_token import CancellationToken
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models_parts.content_part import ContentPart
from ..base.models_parts.generation_request import GenerationRequest
from ..base.models_parts.provider_config import ProviderConfig

Outcome = Union[str, Sequence[ContentPart], BaseException]


class MockCapability:
    """Capability that replays scripted outcomes instead of calling an API."""

    def __init__(
        self,
        outcomes: Union[Outcome, Iterable[Outcome], None] = None,
        *,
        provider: str = "mock",
        model: Optional[str] = None,
    ) -> None:
        """Initialize the mock with its script.

        Parameters
        ----------
        outcomes:
            A single outcome or an iterable of them, consumed in order. The
            last outcome repeats once the script is exhausted. ``None``
            returns ``"mock response"``.
        provider:
            Logical provider name reported by ``provider_name``.
        model:
            Model the capability was bound to (informational).
        """
        self._provider = provider
        self._model = model
        self._outcomes: List[Outcome] = self._normalize(outcomes)
        self._lock = Lock()
        self.requests: List[GenerationRequest] = []
        self._logger = get_logger(f"llm_dispatch.mock.{provider}")

    @staticmethod
    def _normalize(outcomes: Any) -> List[Outcome]:
        if outcomes is None:
            return ["mock response"]
        if isinstance(outcomes, (str, BaseException)):
            return [outcomes]
        items = list(outcomes)
        # a flat list of parts is one outcome, not a script
        if items and all(isinstance(i, ContentPart) for i in items):
            return [items]
        return items or [[]]

    @property
    def provider_name(self) -> str:
        return self._provider

    @property
    def calls(self) -> int:
        return len(self.requests)

    def generate_text(
        self,
        request: GenerationRequest,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> Sequence[ContentPart]:
        with self._lock:
            self.requests.append(request)
            outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if cancel is not None:
            cancel.raise_if_cancelled()
        normalized_log_event(
            self._logger,
            "capability.request",
            LogContext(provider=self._provider, model=request.model),
            phase="request",
            backend="mock",
        )
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, str):
            return [ContentPart.of_text(outcome)]
        return list(outcome)


def mock_builder(capability: MockCapability) -> Callable[[ProviderConfig, str], MockCapability]:
    """Return a registry override that always hands out ``capability``."""

    def _build(config: ProviderConfig, model: str) -> MockCapability:
        return capability

    return _build


__all__ = ["MockCapability", "mock_builder"]
