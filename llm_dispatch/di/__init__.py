"""Dependency wiring for the dispatcher."""

from .container import DispatchContainer, build_container, build_dispatcher

__all__ = ["DispatchContainer", "build_container", "build_dispatcher"]
