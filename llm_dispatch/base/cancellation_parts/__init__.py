"""Cancellation implementation parts; import from ``llm_dispatch.base.cancellation``."""
