"""Configuration gate.

Checks that the provider resolved for a model is present in the caller's
configuration set before any network activity happens, and hands back that
provider's :class:`ProviderConfig`.

``ProviderConfigs`` is the immutable configuration set itself: a read-only
mapping from provider id to config that iterates in insertion order. The
"available providers" listing in gate errors follows that order.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Union

from .constants import ANTHROPIC, OPENAI, UNKNOWN_PROVIDER
from .errors_parts.dispatch_error import DispatchError
from .errors_parts.error_kind import ErrorKind
from .models_parts.provider_config import ProviderConfig


PREFERRED_DEFAULT_ORDER = (OPENAI, ANTHROPIC)


class ProviderConfigs(Mapping[str, ProviderConfig]):
    """Read-only, insertion-ordered mapping of provider id to config."""

    def __init__(
        self,
        configs: Union[Mapping[str, ProviderConfig], Iterable[ProviderConfig], None] = None,
    ) -> None:
        data: Dict[str, ProviderConfig] = {}
        if configs is None:
            pass
        elif isinstance(configs, Mapping):
            for key, cfg in configs.items():
                data[str(key).strip().lower()] = cfg
        else:
            for cfg in configs:
                data[cfg.provider] = cfg
        self._data = MappingProxyType(data)

    def __getitem__(self, provider: str) -> ProviderConfig:
        return self._data[provider]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ProviderConfigs({list(self._data)})"

    def default(self) -> Optional[ProviderConfig]:
        """Return the default provider config.

        Prefers openai, then anthropic, then the first configured provider.
        """
        for provider in PREFERRED_DEFAULT_ORDER:
            if provider in self._data:
                return self._data[provider]
        for cfg in self._data.values():
            return cfg
        return None


def available_listing(configs: Mapping[str, ProviderConfig]) -> str:
    """Comma-joined provider ids in configuration order, or ``"none"``."""
    return ", ".join(configs) or "none"


def not_configured_error(provider: str, model: Optional[str], configs: Mapping[str, ProviderConfig]) -> DispatchError:
    return DispatchError(
        provider=provider,
        message=f"{provider} is not configured. Available providers: {available_listing(configs)}",
        kind=ErrorKind.PROVIDER_NOT_CONFIGURED,
        model=model,
    )


def require_provider_config(
    provider: str,
    model: Optional[str],
    configs: Mapping[str, ProviderConfig],
) -> ProviderConfig:
    """Return the config for ``provider`` or raise a gate ``DispatchError``.

    Raises:
        DispatchError: ``UNKNOWN_MODEL`` when the resolver found no provider
            for ``model``; ``PROVIDER_NOT_CONFIGURED`` when the provider is
            missing from ``configs``.
    """
    if provider == UNKNOWN_PROVIDER:
        raise DispatchError(
            provider=UNKNOWN_PROVIDER,
            message=f"Unknown model: {model}",
            kind=ErrorKind.UNKNOWN_MODEL,
            model=model,
        )
    cfg = configs.get(provider)
    if cfg is None:
        raise not_configured_error(provider, model, configs)
    return cfg


__all__ = [
    "ProviderConfigs",
    "PREFERRED_DEFAULT_ORDER",
    "available_listing",
    "not_configured_error",
    "require_provider_config",
]
