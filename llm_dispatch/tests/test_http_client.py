from __future__ import annotations

import httpx
import pytest

from llm_dispatch.base.cancellation import CancellationToken
from llm_dispatch.base.http import build_timeout, open_http_client


def _transport():
    return httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))


def test_client_closed_after_block():
    with open_http_client("https://example.test/v1", transport=_transport()) as client:
        assert client.post("/x").json() == {"ok": True}  # nosec B101
    assert client.is_closed  # nosec B101


def test_client_closed_when_block_raises():
    with pytest.raises(ValueError):
        with open_http_client("https://example.test", transport=_transport()) as client:
            raise ValueError("boom")
    assert client.is_closed  # nosec B101


def test_relative_paths_join_base_url_path():
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200)

    with open_http_client("https://example.test/v1beta", transport=httpx.MockTransport(handler)) as client:
        client.post("/models/gemini-pro:generateContent")
    assert seen == ["https://example.test/v1beta/models/gemini-pro:generateContent"]  # nosec B101


def test_cancel_closes_client_and_unregisters_after_exit():
    token = CancellationToken()
    with open_http_client("https://example.test", transport=_transport(), cancel=token) as client:
        token.cancel()
        assert client.is_closed  # nosec B101
    other = CancellationToken()
    with open_http_client("https://example.test", transport=_transport(), cancel=other):
        pass
    other.cancel()  # no callbacks left; must not raise


def test_default_headers_applied():
    seen = {}

    def handler(request):
        seen.update(request.headers)
        return httpx.Response(200)

    with open_http_client("https://example.test", headers={"x-api-key": "k"}, transport=httpx.MockTransport(handler)) as client:
        client.post("/m")
    assert seen["x-api-key"] == "k"  # nosec B101


def test_build_timeout():
    t = build_timeout(5)
    assert t.read == 5  # nosec B101
    assert t.connect == 5  # nosec B101
    assert build_timeout(None).read == 60.0  # nosec B101
    assert build_timeout(None).connect == 10.0  # nosec B101
