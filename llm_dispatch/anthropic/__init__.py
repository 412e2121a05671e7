"""Anthropic capabilities (HTTP and SDK backends)."""

from .client import AnthropicCapability

__all__ = ["AnthropicCapability"]
