from __future__ import annotations

import asyncio

import httpx
import pytest

from workshop_gateway.config import UpstreamSettings
from workshop_gateway.errors import UpstreamError
from workshop_gateway.upstream import UpstreamClient


def test_from_settings_uses_configured_values():
    client = UpstreamClient.from_settings(UpstreamSettings(api_key="k", model="m", timeout_seconds=5.0))
    assert client.api_url == "https://openrouter.ai/api/v1/chat/completions"
    assert client.api_key == "k"
    assert client.model == "m"
    assert client.timeout_seconds == 5.0


def test_sends_bearer_token_and_json(make_upstream):
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        return httpx.Response(200, json={"ok": True})

    data = asyncio.run(make_upstream(handler).chat_completion([{"role": "user", "content": "hi"}]))

    assert data == {"ok": True}
    assert seen["method"] == "POST"
    assert seen["url"] == "https://upstream.test/v1/chat/completions"
    assert seen["headers"]["Authorization"] == "Bearer test-key"
    assert seen["headers"]["Content-Type"] == "application/json"


def test_non_2xx_raises_with_status(make_upstream):
    upstream = make_upstream(lambda r: httpx.Response(429, text="rate limited"))

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(upstream.chat_completion([]))
    assert excinfo.value.status_code == 429
    assert "rate limited" in str(excinfo.value)


def test_non_json_body_raises(make_upstream):
    upstream = make_upstream(lambda r: httpx.Response(200, text="<html>gateway</html>"))

    with pytest.raises(UpstreamError):
        asyncio.run(upstream.chat_completion([]))


def test_transport_error_is_wrapped(make_upstream):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamError) as excinfo:
        asyncio.run(make_upstream(handler).chat_completion([]))
    assert isinstance(excinfo.value.__cause__, httpx.ReadTimeout)
    assert excinfo.value.status_code is None
