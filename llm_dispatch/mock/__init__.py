"""Scripted capability double for offline tests and local development."""

from .client import MockCapability, mock_builder

__all__ = ["MockCapability", "mock_builder"]
