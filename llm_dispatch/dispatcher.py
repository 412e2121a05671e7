"""Dispatch pipeline.

``Dispatcher.generate`` runs one conversation through the fixed pipeline

    resolve provider -> gate on configuration -> translate conversation ->
    obtain capability -> execute -> join text parts

and returns the generated text. Every failure, from any stage, reaches the
caller as a single :class:`DispatchError`; there is no partial output and no
retry. Dispatchers hold only immutable state, so one instance can serve
concurrent calls from several threads.
"""
from __future__ import annotations

import time
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .base.cancellation_parts.cancellation_token import CancellationToken
from .base.errors_parts.classification import normalize_error
from .base.errors_parts.dispatch_error import DispatchError
from .base.gate import ProviderConfigs, not_configured_error, require_provider_config
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.models_parts.generation_request import GenerationRequest
from .base.models_parts.message import Message
from .base.models_parts.provider_config import ProviderConfig
from .base.registry import CapabilityRegistry
from .base.resolver import ProviderResolver
from .base.utils.conversation import translate_conversation
from .base.utils.extraction import join_text_parts

Conversation = Iterable[Union[Message, Mapping[str, Any]]]


class Dispatcher:
    """Route conversations to the configured LLM providers.

    Args:
        configs: Provider configuration set. Plain mappings are wrapped in
            :class:`ProviderConfigs`.
        registry: Capability registry; defaults to one built from ``configs``.
        resolver: Model -> provider resolver; defaults to the prefix rules
            ``gpt``/``claude``/``gemini``.
    """

    def __init__(
        self,
        configs: Union[ProviderConfigs, Mapping[str, ProviderConfig], Iterable[ProviderConfig]],
        registry: Optional[CapabilityRegistry] = None,
        resolver: Optional[ProviderResolver] = None,
    ) -> None:
        self._configs = configs if isinstance(configs, ProviderConfigs) else ProviderConfigs(configs)
        self._registry = registry or CapabilityRegistry(self._configs)
        self._resolver = resolver or ProviderResolver()
        self._logger = get_logger("llm_dispatch.dispatcher")

    @property
    def configs(self) -> ProviderConfigs:
        return self._configs

    def available_providers(self) -> Tuple[str, ...]:
        """Configured provider ids, in configuration order."""
        return tuple(self._configs)

    def default_model(self) -> Optional[str]:
        """Default model of the default provider (openai, anthropic, then first)."""
        cfg = self._configs.default()
        return cfg.default_model if cfg is not None else None

    def generate(
        self,
        conversation: Conversation,
        model: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        cancel: Optional[CancellationToken] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Generate a reply for ``conversation`` with ``model``.

        Parameters:
            conversation: Ordered messages (``Message`` or role/content
                mappings). May be empty; the provider call still happens.
            model: Model identifier; ``None`` uses :meth:`default_model`.
            timeout: Deadline in seconds for the network call.
            cancel: Token that abandons the call when cancelled.
            temperature: Optional sampling temperature.
            max_tokens: Optional completion limit.

        Returns:
            str: The concatenated text of the reply (possibly ``""``).

        Raises:
            DispatchError: on any failure.
        """
        if model is None:
            model = self.default_model()
        provider = self._resolver.resolve(model)
        ctx = LogContext(provider=provider, model=model)
        secrets = []
        start = time.perf_counter()
        normalized_log_event(self._logger, "dispatch.start", ctx, phase="start")
        try:
            if cancel is not None:
                cancel.raise_if_cancelled()
            cfg = require_provider_config(provider, model, self._configs)
            secrets.append(cfg.secret())
            translated = translate_conversation(conversation)
            capability = self._registry.capability_for(provider, model)
            if capability is None:
                raise not_configured_error(provider, model, self._configs)
            request = GenerationRequest.from_translation(
                model,
                translated,
                temperature=temperature,
                max_tokens=max_tokens,
                timeout_seconds=timeout,
            )
            text = join_text_parts(capability.generate_text(request, cancel=cancel))
        except DispatchError as err:
            self._log_failure(ctx, err, start)
            raise
        except Exception as exc:
            err = normalize_error(exc, provider=provider, model=model, secrets=secrets)
            self._log_failure(ctx, err, start)
            raise err from exc
        normalized_log_event(
            self._logger,
            "dispatch.end",
            ctx,
            phase="end",
            latency_ms=(time.perf_counter() - start) * 1000.0,
            chars=len(text),
        )
        return text

    def generate_prompt(
        self,
        system_prompt: Optional[str],
        prompt: str,
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> str:
        """Single-turn convenience: optional system prompt plus one user message."""
        messages = []
        if system_prompt is not None:
            messages.append(Message(role="system", content=system_prompt))
        messages.append(Message(role="user", content=prompt))
        return self.generate(messages, model, **kwargs)

    def _log_failure(self, ctx: LogContext, err: DispatchError, start: float) -> None:
        normalized_log_event(
            self._logger,
            "dispatch.error",
            ctx,
            phase="error",
            error_kind=err.kind.value,
            status_code=err.status_code,
            latency_ms=(time.perf_counter() - start) * 1000.0,
            retryable=err.retryable,
        )


__all__ = ["Dispatcher", "Conversation"]
