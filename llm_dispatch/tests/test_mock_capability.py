"""Unit tests for the scripted mock capability."""

from __future__ import annotations

import pytest

from llm_dispatch.base.cancellation import CancellationToken, CancelledError
from llm_dispatch.base.models import ContentPart, GenerationRequest
from llm_dispatch.mock import MockCapability


def _request() -> GenerationRequest:
    return GenerationRequest(model="m", system=None, turns=())


def test_default_outcome():
    assert MockCapability().generate_text(_request())[0].text == "mock response"  # nosec B101


def test_script_consumed_in_order_then_last_repeats():
    mock = MockCapability(["a", "b"])
    texts = [mock.generate_text(_request())[0].text for _ in range(3)]
    assert texts == ["a", "b", "b"]  # nosec B101
    assert mock.calls == 3  # nosec B101


def test_flat_part_list_is_one_outcome():
    parts = [ContentPart.of_text("x"), ContentPart(type="tool_call", data={})]
    assert MockCapability(parts).generate_text(_request()) == parts  # nosec B101


def test_exception_outcome_raised():
    with pytest.raises(KeyError):
        MockCapability(KeyError("k")).generate_text(_request())


def test_cancelled_token_raises():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(CancelledError):
        MockCapability("x").generate_text(_request(), cancel=token)
