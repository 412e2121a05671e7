"""Google Gemini capability (HTTP backend)."""

from .client import GoogleCapability

__all__ = ["GoogleCapability"]
