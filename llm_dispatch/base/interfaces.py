"""
Dispatch interfaces (facade).

Re-exports the capability protocol from ``interfaces_parts``.
"""
from __future__ import annotations

from .interfaces_parts import Capability

__all__ = ["Capability"]
