"""Minimal dependency injection container for the dispatcher.

Goals:
- Load the provider configuration set once and share it.
- Build the capability registry and dispatcher from that set, so callers do
  not wire the pieces by hand.
- Let tests swap any piece (configs, registry, resolver) without touching the
  dispatcher.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..base.gate import ProviderConfigs
from ..base.registry import CapabilityBuilder, CapabilityRegistry
from ..base.resolver import ProviderResolver
from ..config import load_provider_configs
from ..dispatcher import Dispatcher


class DispatchContainer:
    """Lazily constructs and caches the dispatcher's collaborators."""

    def __init__(
        self,
        configs: Optional[ProviderConfigs] = None,
        *,
        overrides: Optional[Mapping[str, CapabilityBuilder]] = None,
        adapter_kwargs: Optional[Mapping[str, Any]] = None,
        resolver: Optional[ProviderResolver] = None,
    ) -> None:
        self._configs = configs
        self._overrides = dict(overrides or {})
        self._adapter_kwargs = dict(adapter_kwargs or {})
        self._resolver = resolver
        self._singletons: Dict[str, Any] = {}

    def configs(self) -> ProviderConfigs:
        """Return the configuration set, loading it from the environment once."""
        if self._configs is None:
            self._configs = load_provider_configs()
        return self._configs

    def registry(self) -> CapabilityRegistry:
        if "registry" not in self._singletons:
            self._singletons["registry"] = CapabilityRegistry(
                self.configs(),
                overrides=self._overrides,
                adapter_kwargs=self._adapter_kwargs,
            )
        return self._singletons["registry"]

    def resolver(self) -> ProviderResolver:
        if self._resolver is None:
            self._resolver = ProviderResolver()
        return self._resolver

    def dispatcher(self) -> Dispatcher:
        if "dispatcher" not in self._singletons:
            self._singletons["dispatcher"] = Dispatcher(
                self.configs(), registry=self.registry(), resolver=self.resolver()
            )
        return self._singletons["dispatcher"]

    def clear(self) -> None:  # testing convenience
        """Drop cached singletons (configuration is reloaded if it was loaded)."""
        self._singletons.clear()


def build_container(configs: Optional[ProviderConfigs] = None, **kwargs: Any) -> DispatchContainer:
    """Construct a new :class:`DispatchContainer`."""
    return DispatchContainer(configs, **kwargs)


def build_dispatcher(configs: Optional[ProviderConfigs] = None, **kwargs: Any) -> Dispatcher:
    """Build a ready-to-use dispatcher.

    ``configs`` defaults to :func:`load_provider_configs`; keyword arguments
    (``overrides``, ``adapter_kwargs``, ``resolver``) are forwarded to the
    container.
    """
    return build_container(configs, **kwargs).dispatcher()


__all__ = ["DispatchContainer", "build_container", "build_dispatcher"]
