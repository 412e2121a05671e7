"""llm_dispatch.config.env
=======================

Environment variable naming for provider configuration.

Every provider field is read from ``LLM_<PROVIDER>_<FIELD>``, e.g.
``LLM_OPENAI_API_KEY`` or ``LLM_GOOGLE_BASE_URL``. For API keys only, the
vendors' conventional variable names are accepted as fallbacks (listed in
``KEY_ALIASES``, canonical name first).

Failure Modes
-------------
- Helpers never raise on unknown providers or unset variables; they return
  ``None`` and the loader decides how to proceed.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple

ENV_PREFIX = "LLM"

# Config field -> env suffix
ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "default_model": "MODEL",
    "backend": "BACKEND",
    "timeout_seconds": "TIMEOUT_SECONDS",
}

# Vendor-conventional key variables accepted after LLM_<PROVIDER>_API_KEY.
KEY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "openai": ("OPENAI_API_KEY",),
    "anthropic": ("ANTHROPIC_API_KEY",),
    "google": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}

PROVIDERS_VAR = "LLM_PROVIDERS"
CONFIG_FILE_VAR = "LLM_CONFIG_FILE"
PROVIDERS_FILE_VAR = "LLM_PROVIDERS_FILE"
DOTENV_VAR = "DOTENV_FILE"


def env_var_name(provider: str, field: str) -> str:
    """Return the env var for ``field`` of ``provider`` (``LLM_OPENAI_MODEL``)."""
    return f"{ENV_PREFIX}_{provider.upper()}_{ENV_FIELD_MAP[field]}"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder' or 'changeme', or is wrapped in angle
    brackets (``<your-key>``). Case-insensitive; surrounding spaces ignored.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or (v.startswith("<") and v.endswith(">"))


def lookup_api_key(provider: str, environ: Mapping[str, str]) -> Optional[str]:
    """Return the first non-empty, non-placeholder key for ``provider``."""
    names = (env_var_name(provider, "api_key"),) + KEY_ALIASES.get(provider, ())
    for name in names:
        val = (environ.get(name) or "").strip()
        if val and not is_placeholder(val):
            return val
    return None


def env_fields(provider: str, environ: Mapping[str, str]) -> Dict[str, str]:
    """Return the non-key fields set in ``environ`` for ``provider``."""
    out: Dict[str, str] = {}
    for field in ENV_FIELD_MAP:
        if field == "api_key":
            continue
        val = (environ.get(env_var_name(provider, field)) or "").strip()
        if val:
            out[field] = val
    return out


__all__ = [
    "ENV_PREFIX",
    "ENV_FIELD_MAP",
    "KEY_ALIASES",
    "PROVIDERS_VAR",
    "CONFIG_FILE_VAR",
    "PROVIDERS_FILE_VAR",
    "DOTENV_VAR",
    "env_var_name",
    "is_placeholder",
    "lookup_api_key",
    "env_fields",
]
