"""Pytest configuration for the dispatch test suite.

Provides config builders, a log capture handler attached to the shared
``llm_dispatch`` logger, and isolation from ambient provider env vars.
"""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

import pytest

from llm_dispatch.base.gate import ProviderConfigs
from llm_dispatch.base.logging import BASE_LOGGER_NAME, get_logger
from llm_dispatch.base.models import ProviderConfig

OPENAI_KEY = "sk-openai-test-secret-123"
ANTHROPIC_KEY = "sk-ant-test-secret-456"
GOOGLE_KEY = "AIza-google-test-secret-789"


class ListHandler(logging.Handler):
    """Capture formatted log messages into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.messages.append(record.getMessage())

    def events(self) -> List[dict]:
        out = []
        for msg in self.messages:
            try:
                out.append(json.loads(msg))
            except ValueError:
                continue
        return out

    def text(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture()
def log_capture() -> Iterator[ListHandler]:
    """Attach a ``ListHandler`` to the shared dispatch logger."""
    logger = get_logger(BASE_LOGGER_NAME)
    handler = ListHandler()
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep ambient credentials and config files out of the tests."""
    for var in (
        "LLM_PROVIDERS",
        "LLM_CONFIG_FILE",
        "LLM_PROVIDERS_FILE",
        "OPENAI_API_KEY",
        "ANTHROPIC_API_KEY",
        "GEMINI_API_KEY",
        "GOOGLE_API_KEY",
        "DISPATCH_TIMEOUT_HTTP_SECONDS",
        "DISPATCH_TIMEOUT_CONNECT_SECONDS",
    ):
        monkeypatch.delenv(var, raising=False)
    for provider in ("OPENAI", "ANTHROPIC", "GOOGLE"):
        for suffix in ("API_KEY", "BASE_URL", "MODEL", "BACKEND", "TIMEOUT_SECONDS"):
            monkeypatch.delenv(f"LLM_{provider}_{suffix}", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))


def make_config(provider: str = "openai", **overrides) -> ProviderConfig:
    keys = {"openai": OPENAI_KEY, "anthropic": ANTHROPIC_KEY, "google": GOOGLE_KEY}
    urls = {
        "openai": "https://api.openai.test/v1",
        "anthropic": "https://api.anthropic.test/v1",
        "google": "https://generativelanguage.test/v1beta",
    }
    models = {"openai": "gpt-4o-mini", "anthropic": "claude-3-opus", "google": "gemini-pro"}
    fields = {
        "provider": provider,
        "api_key": keys.get(provider, "sk-other"),
        "base_url": urls.get(provider, "https://example.test"),
        "default_model": models.get(provider),
    }
    fields.update(overrides)
    return ProviderConfig(**fields)


def make_configs(*providers: str) -> ProviderConfigs:
    return ProviderConfigs([make_config(p) for p in providers])


@pytest.fixture()
def openai_only() -> ProviderConfigs:
    return make_configs("openai")


@pytest.fixture()
def all_providers() -> ProviderConfigs:
    return make_configs("openai", "anthropic", "google")
