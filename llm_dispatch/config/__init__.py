"""Configuration layer for the dispatcher.

Builds the immutable provider configuration set (``ProviderConfigs``) once,
at startup, from the process environment and an optional config file.

Provider list
-------------
Which providers to load comes from, in order of precedence:

1. ``LLM_PROVIDERS`` (comma separated, e.g. ``openai,anthropic``)
2. ``config/llm-providers.txt`` (one per line, ``#`` comments; the path can be
   changed with ``LLM_PROVIDERS_FILE``)
3. the provider sections of the config file

Per-provider fields
-------------------
Merged in order (later wins): built-in defaults -> config file section ->
``LLM_<PROVIDER>_API_KEY|BASE_URL|MODEL|BACKEND|TIMEOUT_SECONDS``.

A provider without an API key is skipped (not configured is not an error). A
provider with a key but no base URL uses its default base URL. A section that
fails validation raises ``pydantic.ValidationError`` naming the field; the key
value is never part of that message.

External Config File (Optional)
-------------------------------
``LLM_CONFIG_FILE`` points at a JSON or YAML file::

    providers:
      openai:
        api_key: sk-...
        model: gpt-4o-mini
      anthropic:
        base_url: https://api.anthropic.com/v1
        backend: sdk

Public API
----------
* load_provider_configs(environ=None, *, config_file=None, providers_file=None)
* configured_provider_names(environ=None, *, providers_file=None)
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..base.gate import ProviderConfigs
from ..base.logging import get_logger, normalized_log_event
from ..base.models_parts.provider_config import ProviderConfig
from .defaults import DEFAULT_BASE_URLS, DEFAULT_MODELS, PROVIDERS_LIST_FILE
from .env import (
    CONFIG_FILE_VAR,
    DOTENV_VAR,
    PROVIDERS_FILE_VAR,
    PROVIDERS_VAR,
    env_fields,
    is_placeholder,
    lookup_api_key,
)


_DOTENV_LOADED = False
_logger = get_logger("llm_dispatch.config")


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables win unless their value looks like a placeholder.
    Safe to call multiple times; only the first call reads the file.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_VAR, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                if k.startswith("export "):
                    k = k[len("export "):].strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_config_file(path: Optional[str]) -> Dict[str, Dict[str, Any]]:
    """Return provider sections from a JSON or YAML config file.

    Accepts either a top-level ``providers`` mapping or provider sections at
    the top level. Missing files yield ``{}``; unparsable files raise
    ``ValueError`` naming the file.
    """
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid provider config file {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Invalid provider config file {p}: expected a mapping")
    sections = data.get("providers", data)
    if not isinstance(sections, dict):
        raise ValueError(f"Invalid provider config file {p}: 'providers' must be a mapping")
    return {
        str(name).strip().lower(): dict(section)
        for name, section in sections.items()
        if isinstance(section, dict)
    }


def _split_names(raw: str) -> List[str]:
    return [p.strip().lower() for p in raw.split(",") if p.strip()]


def _read_providers_file(path: str) -> List[str]:
    p = Path(path)
    if not p.is_file():
        return []
    names: List[str] = []
    for line in p.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            names.append(line.lower())
    return names


def configured_provider_names(
    environ: Optional[Mapping[str, str]] = None,
    *,
    providers_file: Optional[str] = None,
) -> List[str]:
    """Return the provider ids to load, de-duplicated, in declaration order."""
    env = os.environ if environ is None else environ
    raw = (env.get(PROVIDERS_VAR) or "").strip()
    if raw:
        names = _split_names(raw)
    else:
        names = _read_providers_file(providers_file or env.get(PROVIDERS_FILE_VAR) or PROVIDERS_LIST_FILE)
    return list(dict.fromkeys(names))


def _build_config(
    name: str,
    section: Mapping[str, Any],
    environ: Mapping[str, str],
) -> Optional[ProviderConfig]:
    fields: Dict[str, Any] = {}
    if name in DEFAULT_MODELS:
        fields["default_model"] = DEFAULT_MODELS[name]
    # file sections may use "model" for the default model
    for key, value in section.items():
        if value is None:
            continue
        fields["default_model" if key == "model" else key] = value
    fields.update(env_fields(name, environ))
    env_key = lookup_api_key(name, environ)
    if env_key:
        fields["api_key"] = env_key
    api_key = fields.get("api_key")
    if not api_key or is_placeholder(str(api_key)):
        return None
    if not fields.get("base_url"):
        default_url = DEFAULT_BASE_URLS.get(name)
        if default_url is None:
            return None
        fields["base_url"] = default_url
    fields["provider"] = name
    allowed = set(ProviderConfig.model_fields)
    return ProviderConfig(**{k: v for k, v in fields.items() if k in allowed})


def load_provider_configs(
    environ: Optional[Mapping[str, str]] = None,
    *,
    config_file: Optional[str] = None,
    providers_file: Optional[str] = None,
) -> ProviderConfigs:
    """Build the immutable provider configuration set.

    Parameters
    ----------
    environ:
        Variables to read. ``None`` loads ``.env`` once and uses
        ``os.environ``.
    config_file:
        Path of a JSON/YAML config file; defaults to ``LLM_CONFIG_FILE``.
    providers_file:
        Path of the provider list file; defaults to ``LLM_PROVIDERS_FILE``
        or ``config/llm-providers.txt``.

    Returns
    -------
    ProviderConfigs
        Configs for every listed provider that has an API key, in list order.
    """
    if environ is None:
        _load_dotenv_once()
        environ = os.environ
    sections = _load_config_file(config_file or environ.get(CONFIG_FILE_VAR))
    names = configured_provider_names(environ, providers_file=providers_file) or list(sections)

    configs: List[ProviderConfig] = []
    skipped: List[str] = []
    for name in names:
        cfg = _build_config(name, sections.get(name, {}), environ)
        if cfg is None:
            skipped.append(name)
            continue
        configs.append(cfg)
    result = ProviderConfigs(configs)
    normalized_log_event(
        _logger,
        "config.load",
        None,
        phase="config",
        providers=list(result),
        skipped=skipped or None,
    )
    return result


__all__ = [
    "load_provider_configs",
    "configured_provider_names",
]
