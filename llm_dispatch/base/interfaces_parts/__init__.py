"""Interface protocol parts for the dispatch layer."""

from .capability import Capability

__all__ = ["Capability"]
