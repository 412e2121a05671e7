"""Capability registry.

Builds capabilities for the providers present in a configuration set. The
registry is the only place that turns configuration into a callable handle;
the dispatcher asks it for a capability per call and treats ``None`` as
"provider not available".

``None`` covers two situations that callers cannot tell apart: the provider
is not configured, or its capability failed to construct (missing SDK, bad
adapter arguments). The construction failure is logged.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .factory import ProviderFactory
from .interfaces_parts.capability import Capability
from .logging import LogContext, get_logger, normalized_log_event
from .models_parts.provider_config import ProviderConfig


CapabilityBuilder = Callable[[ProviderConfig, str], Capability]


class CapabilityRegistry:
    """Map configured providers to capabilities.

    Args:
        configs: Provider configuration set (provider id -> config).
        overrides: Optional per-provider builders ``(config, model) ->
            capability``, used instead of the factory (test doubles, custom
            adapters).
        adapter_kwargs: Extra constructor kwargs forwarded to factory-built
            adapters (e.g. ``{"transport": httpx.MockTransport(...)}``).
    """

    def __init__(
        self,
        configs: Mapping[str, ProviderConfig],
        *,
        overrides: Optional[Mapping[str, CapabilityBuilder]] = None,
        adapter_kwargs: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._configs = configs
        self._overrides: Dict[str, CapabilityBuilder] = dict(overrides or {})
        self._adapter_kwargs: Dict[str, Any] = dict(adapter_kwargs or {})
        self._logger = get_logger("llm_dispatch.registry")
        normalized_log_event(
            self._logger,
            "registry.init",
            None,
            phase="init",
            providers=list(configs),
            overrides=sorted(self._overrides) or None,
        )

    def available_providers(self) -> Tuple[str, ...]:
        """Return configured provider ids in configuration order."""
        return tuple(self._configs)

    def capability_for(self, provider: str, model: str) -> Optional[Capability]:
        """Return a capability for ``provider`` bound to ``model``, or ``None``."""
        cfg = self._configs.get(provider)
        if cfg is None:
            return None
        try:
            builder = self._overrides.get(provider)
            if builder is not None:
                return builder(cfg, model)
            return ProviderFactory.create(
                provider,
                config=cfg,
                model=model,
                backend=cfg.backend,
                **self._adapter_kwargs,
            )
        except Exception as exc:  # noqa: BLE001 - any builder failure means "unavailable"
            normalized_log_event(
                self._logger,
                "registry.init",
                LogContext(provider=provider, model=model),
                phase="capability",
                error_kind="construction_failed",
                level=logging.WARNING,
                error=type(exc).__name__,
            )
            return None


__all__ = ["CapabilityRegistry", "CapabilityBuilder"]
