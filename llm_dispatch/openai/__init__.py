"""OpenAI capabilities (HTTP and SDK backends)."""

from .client import OpenAICapability

__all__ = ["OpenAICapability"]
