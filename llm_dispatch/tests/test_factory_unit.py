from __future__ import annotations

import httpx
import pytest

from llm_dispatch.anthropic.client import AnthropicCapability
from llm_dispatch.base.factory import ProviderFactory, UnknownProviderError
from llm_dispatch.base.interfaces import Capability
from llm_dispatch.google.client import GoogleCapability
from llm_dispatch.openai.client import OpenAICapability

from .conftest import make_config


@pytest.mark.parametrize(
    ("provider", "model", "cls"),
    [
        ("openai", "gpt-4", OpenAICapability),
        ("anthropic", "claude-3", AnthropicCapability),
        ("google", "gemini-pro", GoogleCapability),
    ],
)
def test_factory_creates_http_capabilities(provider, model, cls):
    cap = ProviderFactory.create(provider, config=make_config(provider), model=model)
    assert isinstance(cap, cls)  # nosec B101
    assert isinstance(cap, Capability)  # nosec B101
    assert cap.provider_name == provider  # nosec B101
    assert cap.model == model  # nosec B101


def test_factory_forwards_transport():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    cap = ProviderFactory.create("openai", config=make_config("openai"), model="gpt-4", transport=transport)
    assert cap._transport is transport  # nosec B101


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nope", config=make_config("openai"), model="x")


def test_factory_unknown_backend():
    with pytest.raises(UnknownProviderError, match="no 'sdk' backend"):
        ProviderFactory.create("google", config=make_config("google"), model="gemini-pro", backend="sdk")


def test_factory_import_failure(monkeypatch):
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"bogus": {"http": {"module": "does.not.exist", "class": "X"}}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("bogus", config=make_config("openai"), model="x")


def test_factory_bad_constructor_kwargs():
    with pytest.raises(UnknownProviderError, match="Invalid arguments"):
        ProviderFactory.create("openai", config=make_config("openai"), model="gpt-4", nonsense=1)


def test_supported_and_backends():
    assert ProviderFactory.supported() == ("openai", "anthropic", "google")  # nosec B101
    assert ProviderFactory.backends("openai") == ("http", "sdk")  # nosec B101
    assert ProviderFactory.backends("x") == ()  # nosec B101
