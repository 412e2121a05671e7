from __future__ import annotations

import pytest

from llm_dispatch.base.errors import DispatchError, ErrorKind
from llm_dispatch.base.gate import ProviderConfigs, require_provider_config

from .conftest import make_config, make_configs


def test_returns_config_for_configured_provider(openai_only):
    cfg = require_provider_config("openai", "gpt-4", openai_only)
    assert cfg.provider == "openai"  # nosec B101


def test_unknown_provider_is_unknown_model_error(openai_only):
    with pytest.raises(DispatchError) as ei:
        require_provider_config("unknown", "llama-2", openai_only)
    err = ei.value
    assert err.provider == "unknown"  # nosec B101
    assert err.kind is ErrorKind.UNKNOWN_MODEL  # nosec B101
    assert "Unknown model" in err.message  # nosec B101
    assert "llama-2" in err.message  # nosec B101
    assert err.status_code is None  # nosec B101


def test_missing_provider_lists_available(openai_only):
    with pytest.raises(DispatchError) as ei:
        require_provider_config("anthropic", "claude-3-opus", openai_only)
    err = ei.value
    assert err.provider == "anthropic"  # nosec B101
    assert err.kind is ErrorKind.PROVIDER_NOT_CONFIGURED  # nosec B101
    assert err.message == "anthropic is not configured. Available providers: openai"  # nosec B101


def test_available_listing_follows_insertion_order():
    configs = make_configs("google", "openai")
    with pytest.raises(DispatchError) as ei:
        require_provider_config("anthropic", "claude-3", configs)
    assert ei.value.message.endswith("Available providers: google, openai")  # nosec B101


def test_empty_configs_list_none():
    with pytest.raises(DispatchError) as ei:
        require_provider_config("openai", "gpt-4", ProviderConfigs())
    assert ei.value.message.endswith("Available providers: none")  # nosec B101


def test_provider_configs_is_read_only():
    configs = make_configs("openai")
    with pytest.raises(TypeError):
        configs["anthropic"] = make_config("anthropic")  # type: ignore[index]


def test_default_prefers_openai_then_anthropic_then_first():
    assert make_configs("google", "anthropic", "openai").default().provider == "openai"  # nosec B101
    assert make_configs("google", "anthropic").default().provider == "anthropic"  # nosec B101
    assert make_configs("google").default().provider == "google"  # nosec B101
    assert ProviderConfigs().default() is None  # nosec B101


def test_mapping_input_normalizes_keys():
    configs = ProviderConfigs({" OpenAI ": make_config("openai")})
    assert list(configs) == ["openai"]  # nosec B101


def test_api_key_not_rendered_in_config_repr():
    cfg = make_config("openai")
    assert cfg.secret() not in repr(cfg)  # nosec B101
    assert cfg.secret() not in str(cfg)  # nosec B101


def test_base_url_trailing_slash_stripped():
    cfg = make_config("openai", base_url="https://api.openai.test/v1/")
    assert cfg.base_url == "https://api.openai.test/v1"  # nosec B101
