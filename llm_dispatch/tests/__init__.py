"""Test suite for llm_dispatch."""
