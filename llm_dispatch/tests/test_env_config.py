"""Configuration loader tests (env vars, provider list sources, config file)."""

from __future__ import annotations

import json

import pydantic
import pytest

from llm_dispatch.config import configured_provider_names, load_provider_configs
from llm_dispatch.config.env import env_var_name, is_placeholder, lookup_api_key


def test_llm_providers_env_selects_and_orders():
    env = {
        "LLM_PROVIDERS": "anthropic, OpenAI",
        "LLM_OPENAI_API_KEY": "sk-o",
        "LLM_ANTHROPIC_API_KEY": "sk-a",
        "LLM_GOOGLE_API_KEY": "g",
    }
    configs = load_provider_configs(env)
    assert list(configs) == ["anthropic", "openai"]  # nosec B101


def test_provider_without_key_is_skipped():
    env = {"LLM_PROVIDERS": "openai,google", "LLM_OPENAI_API_KEY": "sk-o"}
    assert list(load_provider_configs(env)) == ["openai"]  # nosec B101


def test_defaults_applied_for_base_url_and_model():
    cfg = load_provider_configs({"LLM_PROVIDERS": "google", "LLM_GOOGLE_API_KEY": "g"})["google"]
    assert cfg.base_url == "https://generativelanguage.googleapis.com/v1beta"  # nosec B101
    assert cfg.default_model == "gemini-1.5-flash"  # nosec B101
    assert cfg.backend == "http"  # nosec B101


def test_env_fields_override_defaults():
    env = {
        "LLM_PROVIDERS": "openai",
        "LLM_OPENAI_API_KEY": "sk-o",
        "LLM_OPENAI_BASE_URL": "https://proxy.local/v1/",
        "LLM_OPENAI_MODEL": "gpt-4",
        "LLM_OPENAI_BACKEND": "sdk",
        "LLM_OPENAI_TIMEOUT_SECONDS": "12",
    }
    cfg = load_provider_configs(env)["openai"]
    assert cfg.base_url == "https://proxy.local/v1"  # nosec B101
    assert cfg.default_model == "gpt-4"  # nosec B101
    assert cfg.backend == "sdk"  # nosec B101
    assert cfg.timeout_seconds == 12.0  # nosec B101
    assert cfg.secret() == "sk-o"  # nosec B101


def test_vendor_key_alias_accepted():
    env = {"LLM_PROVIDERS": "google", "GOOGLE_API_KEY": "g-alias"}
    assert load_provider_configs(env)["google"].secret() == "g-alias"  # nosec B101


def test_placeholder_key_treated_as_missing():
    env = {"LLM_PROVIDERS": "openai", "LLM_OPENAI_API_KEY": "<your-key>"}
    assert list(load_provider_configs(env)) == []  # nosec B101


def test_providers_file_used_when_env_unset(tmp_path):
    listing = tmp_path / "llm-providers.txt"
    listing.write_text("# providers\nopenai\n\n  Anthropic  \n# google\n", encoding="utf-8")
    env = {"LLM_PROVIDERS_FILE": str(listing)}
    assert configured_provider_names(env) == ["openai", "anthropic"]  # nosec B101


def test_env_list_wins_over_file(tmp_path):
    listing = tmp_path / "llm-providers.txt"
    listing.write_text("openai\n", encoding="utf-8")
    env = {"LLM_PROVIDERS": "google", "LLM_PROVIDERS_FILE": str(listing)}
    assert configured_provider_names(env) == ["google"]  # nosec B101


def test_no_list_no_file_is_empty(tmp_path):
    env = {"LLM_PROVIDERS_FILE": str(tmp_path / "missing.txt")}
    assert len(load_provider_configs(env)) == 0  # nosec B101


def test_yaml_config_file(tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text(
        "providers:\n"
        "  anthropic:\n"
        "    api_key: sk-file\n"
        "    model: claude-3-haiku\n"
        "    backend: sdk\n",
        encoding="utf-8",
    )
    env = {"LLM_CONFIG_FILE": str(path), "LLM_PROVIDERS_FILE": str(tmp_path / "none.txt")}
    configs = load_provider_configs(env)
    cfg = configs["anthropic"]
    assert cfg.default_model == "claude-3-haiku"  # nosec B101
    assert cfg.backend == "sdk"  # nosec B101
    assert cfg.base_url == "https://api.anthropic.com/v1"  # nosec B101


def test_json_config_file_with_env_override(tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai": {"api_key": "sk-file", "model": "gpt-4"}}), encoding="utf-8")
    env = {"LLM_PROVIDERS": "openai", "LLM_OPENAI_API_KEY": "sk-env"}
    cfg = load_provider_configs(env, config_file=str(path))["openai"]
    assert cfg.secret() == "sk-env"  # nosec B101
    assert cfg.default_model == "gpt-4"  # nosec B101


def test_invalid_backend_rejected_without_leaking_key():
    env = {"LLM_PROVIDERS": "openai", "LLM_OPENAI_API_KEY": "sk-secret-value", "LLM_OPENAI_BACKEND": "grpc"}
    with pytest.raises(pydantic.ValidationError) as ei:
        load_provider_configs(env)
    assert "sk-secret-value" not in str(ei.value)  # nosec B101


def test_dotenv_loaded_once(monkeypatch, tmp_path):
    import llm_dispatch.config as config_mod

    dotenv = tmp_path / ".env"
    dotenv.write_text("LLM_PROVIDERS=openai\nexport LLM_OPENAI_API_KEY='sk-dotenv'\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    monkeypatch.setattr(config_mod, "_DOTENV_LOADED", False)
    monkeypatch.setenv("LLM_PROVIDERS_FILE", str(tmp_path / "none.txt"))
    try:
        configs = load_provider_configs()
        assert configs["openai"].secret() == "sk-dotenv"  # nosec B101
    finally:
        monkeypatch.delenv("LLM_PROVIDERS", raising=False)
        monkeypatch.delenv("LLM_OPENAI_API_KEY", raising=False)


def test_env_helpers():
    assert env_var_name("openai", "default_model") == "LLM_OPENAI_MODEL"  # nosec B101
    assert is_placeholder("CHANGEME")  # nosec B101
    assert not is_placeholder(None)  # nosec B101
    assert lookup_api_key("anthropic", {"ANTHROPIC_API_KEY": " k "}) == "k"  # nosec B101
    assert lookup_api_key("openai", {}) is None  # nosec B101
