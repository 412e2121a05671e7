"""llm_dispatch.config.defaults
============================

Central place for small, stable default values used by the configuration
loader and the provider adapters. Values can be overridden via environment
variables or the optional config file.

This module avoids importing from other dispatch packages to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Provider base URLs (used when a provider has a key but no base URL) ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
GOOGLE_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

DEFAULT_BASE_URLS = {
    "openai": OPENAI_DEFAULT_BASE_URL,
    "anthropic": ANTHROPIC_DEFAULT_BASE_URL,
    "google": GOOGLE_DEFAULT_BASE_URL,
}

# ---- Default models (used when neither env nor file names one) ----
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-latest"
GOOGLE_DEFAULT_MODEL = "gemini-1.5-flash"

DEFAULT_MODELS = {
    "openai": OPENAI_DEFAULT_MODEL,
    "anthropic": ANTHROPIC_DEFAULT_MODEL,
    "google": GOOGLE_DEFAULT_MODEL,
}

# ---- Anthropic wire constants ----
ANTHROPIC_VERSION = "2023-06-01"
# Anthropic requires max_tokens on every request.
ANTHROPIC_DEFAULT_MAX_TOKENS = 4096

# ---- Provider list file ----
# Relative to the working directory; one provider per line, '#' comments.
PROVIDERS_LIST_FILE = "config/llm-providers.txt"
