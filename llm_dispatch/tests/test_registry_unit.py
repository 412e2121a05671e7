from __future__ import annotations

import httpx

from llm_dispatch.base.registry import CapabilityRegistry
from llm_dispatch.mock import MockCapability, mock_builder
from llm_dispatch.openai.client import OpenAICapability
from llm_dispatch.openai import sdk as openai_sdk

from .conftest import make_config, make_configs


def test_capability_for_configured_provider():
    registry = CapabilityRegistry(make_configs("openai"))
    cap = registry.capability_for("openai", "gpt-4")
    assert isinstance(cap, OpenAICapability)  # nosec B101


def test_capability_for_unconfigured_provider_is_none():
    registry = CapabilityRegistry(make_configs("openai"))
    assert registry.capability_for("anthropic", "claude-3") is None  # nosec B101


def test_construction_failure_is_none_and_logged(monkeypatch, log_capture):
    monkeypatch.setattr(openai_sdk, "_OpenAIClient", None)
    registry = CapabilityRegistry({"openai": make_config("openai", backend="sdk")})
    assert registry.capability_for("openai", "gpt-4") is None  # nosec B101
    failures = [e for e in log_capture.events() if e.get("error_kind") == "construction_failed"]
    assert failures and failures[-1]["provider"] == "openai"  # nosec B101


def test_overrides_take_precedence():
    mock = MockCapability("hi", provider="openai")
    registry = CapabilityRegistry(make_configs("openai"), overrides={"openai": mock_builder(mock)})
    assert registry.capability_for("openai", "gpt-4") is mock  # nosec B101


def test_adapter_kwargs_forwarded():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    registry = CapabilityRegistry(make_configs("openai"), adapter_kwargs={"transport": transport})
    cap = registry.capability_for("openai", "gpt-4")
    assert cap._transport is transport  # nosec B101


def test_available_providers_in_order():
    registry = CapabilityRegistry(make_configs("google", "openai"))
    assert registry.available_providers() == ("google", "openai")  # nosec B101
