"""Capability factory.

Purpose
-------
Centralize creation of provider capabilities. Each provider maps to one entry
per backend (``"http"`` for direct wire calls, ``"sdk"`` for the vendor SDK);
adapter modules are imported lazily with ``importlib`` so a missing optional
SDK only matters when that backend is actually selected.

Adding a provider means adding one table entry; no other code changes.

Timeout and fallback semantics
------------------------------
No timeouts are introduced here. The factory performs no retries or
fallbacks; it either returns an instance or raises a clear error.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple, Type

from .models_parts.provider_config import ProviderConfig


class UnknownProviderError(Exception):
    """Raised when a capability cannot be resolved or initialized.

    Failure modes include:
    - The provider or backend is not registered in the factory table.
    - The adapter module cannot be imported or the class is missing.
    - The adapter constructor raised during initialization.
    """


class ProviderFactory:
    """Create capabilities from a canonical provider name and backend."""

    _PROVIDERS: Dict[str, Dict[str, Dict[str, str]]] = {
        "openai": {
            "http": {"module": "llm_dispatch.openai.client", "class": "OpenAICapability"},
            "sdk": {"module": "llm_dispatch.openai.sdk", "class": "OpenAISdkCapability"},
        },
        "anthropic": {
            "http": {"module": "llm_dispatch.anthropic.client", "class": "AnthropicCapability"},
            "sdk": {"module": "llm_dispatch.anthropic.sdk", "class": "AnthropicSdkCapability"},
        },
        "google": {
            "http": {"module": "llm_dispatch.google.client", "class": "GoogleCapability"},
        },
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        config: ProviderConfig,
        model: str,
        backend: str = "http",
        **kwargs: Any,
    ) -> Any:
        """Create a capability instance.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"openai"``).
        config:
            The provider's configuration (credentials, base URL).
        model:
            Model the capability will call.
        backend:
            ``"http"`` or ``"sdk"``.
        **kwargs:
            Adapter-specific constructor kwargs (e.g. ``transport``).

        Returns
        -------
        Any
            Instance implementing ``Capability``.

        Raises
        ------
        UnknownProviderError
            If provider/backend is unknown, the adapter module fails to
            import, the adapter class is missing, or the constructor raises.
        """
        name = (provider or "").lower().strip()
        backends = cls._PROVIDERS.get(name)
        if not backends:
            raise UnknownProviderError(f"Unknown provider '{provider}'")
        spec = backends.get(backend)
        if not spec:
            raise UnknownProviderError(
                f"Provider '{provider}' has no '{backend}' backend (available: {', '.join(backends)})"
            )

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except Exception as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(config, model, **kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' capability constructor: {exc}"
            ) from exc
        except Exception as exc:
            raise UnknownProviderError(
                f"Failed to initialize provider '{provider}': {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in table order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def backends(cls, provider: str) -> Tuple[str, ...]:
        """Return the backends registered for ``provider`` (empty if unknown)."""
        return tuple(cls._PROVIDERS.get(provider, {}).keys())


__all__ = ["ProviderFactory", "UnknownProviderError"]
