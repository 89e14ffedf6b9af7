"""Tests for agent transports — HTTP via httpx.MockTransport, no network."""

from __future__ import annotations

import json

import httpx
import pytest

from bidwin.agents import http_transport
from bidwin.agents.base import AgentTransport, send_safely
from bidwin.agents.factory import available_transports, clear_cache, get_agent_transport
from bidwin.agents.http_transport import HttpAgentTransport
from bidwin.agents.schemas import AgentCallResult
from bidwin.agents.static_transport import StaticAgentTransport

BASE_URL = "http://agents.test"


def _http(handler, api_key: str = "") -> HttpAgentTransport:
    client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return HttpAgentTransport(base_url=BASE_URL, api_key=api_key, client=client)


class ExplodingTransport(AgentTransport):
    async def send(self, input_text: str, agent_id: str) -> AgentCallResult:
        raise RuntimeError("socket closed")


# ---------------------------------------------------------------------------
# HTTP transport
# ---------------------------------------------------------------------------


class TestHttpAgentTransport:
    @pytest.mark.asyncio
    async def test_posts_message_to_agent_endpoint(self, generation_envelope):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=generation_envelope)

        transport = _http(handler)
        result = await transport.send("What encryption do you use?", "gen-1")

        assert result.success
        assert result.response == generation_envelope
        assert result.error is None
        assert len(seen) == 1
        assert seen[0].method == "POST"
        assert seen[0].url.path == "/agents/gen-1/invoke"
        assert json.loads(seen[0].content) == {
            "message": "What encryption do you use?",
            "agent_id": "gen-1",
        }

    @pytest.mark.asyncio
    async def test_sends_bearer_token_when_configured(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        await _http(handler, api_key="s3cret").send("q", "gen-1")
        assert seen[0].headers["Authorization"] == "Bearer s3cret"

    @pytest.mark.asyncio
    async def test_no_auth_header_without_key(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        await _http(handler).send("q", "gen-1")
        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_http_error_status_is_a_value(self):
        transport = _http(lambda request: httpx.Response(503, text="unavailable"))
        result = await transport.send("q", "gen-1")
        assert not result.success
        assert "503" in result.error

    @pytest.mark.asyncio
    async def test_connect_error_is_a_value(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _http(handler).send("q", "gen-1")
        assert not result.success
        assert "Could not reach" in result.error

    @pytest.mark.asyncio
    async def test_timeout_is_a_value(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        result = await _http(handler).send("q", "gen-1")
        assert not result.success
        assert "in time" in result.error

    @pytest.mark.asyncio
    async def test_non_json_body_is_a_value(self):
        transport = _http(lambda request: httpx.Response(200, text="<html>oops</html>"))
        result = await transport.send("q", "gen-1")
        assert not result.success
        assert "unreadable" in result.error

    @pytest.mark.asyncio
    async def test_oversized_body_is_a_value(self, monkeypatch):
        monkeypatch.setattr(http_transport, "MAX_RESPONSE_BYTES", 10)
        transport = _http(lambda request: httpx.Response(200, json={"result": "x" * 50}))
        result = await transport.send("q", "gen-1")
        assert not result.success
        assert "too large" in result.error

    @pytest.mark.asyncio
    async def test_input_is_sent_untrimmed(self):
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={})

        await _http(handler).send("  padded  ", "gen-1")
        assert bodies[0]["message"] == "  padded  "


# ---------------------------------------------------------------------------
# Static transport and safety wrapper
# ---------------------------------------------------------------------------


class TestStaticAgentTransport:
    @pytest.mark.asyncio
    async def test_returns_canned_response_and_records_call(self):
        transport = StaticAgentTransport({"gen-1": {"status": "success"}})
        result = await transport.send("hello", "gen-1")
        assert result == AgentCallResult.ok({"status": "success"})
        assert transport.calls == [("hello", "gen-1")]

    @pytest.mark.asyncio
    async def test_unknown_agent_fails(self):
        result = await StaticAgentTransport().send("hello", "nobody")
        assert not result.success
        assert "nobody" in result.error

    @pytest.mark.asyncio
    async def test_canned_failure_passes_through(self):
        failure = AgentCallResult.failed("agent offline")
        transport = StaticAgentTransport({"gen-1": failure})
        assert await transport.send("q", "gen-1") is failure


class TestSendSafely:
    @pytest.mark.asyncio
    async def test_escaped_exception_becomes_failure(self):
        result = await send_safely(ExplodingTransport(), "q", "gen-1")
        assert not result.success
        assert result.error == "socket closed"


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


class TestTransportFactory:
    def setup_method(self):
        clear_cache()

    def test_available_transports(self):
        assert available_transports() == ["http", "static"]

    def test_static_is_cached_without_kwargs(self):
        assert get_agent_transport("static") is get_agent_transport("STATIC")

    def test_kwargs_bypass_cache(self):
        first = get_agent_transport("static", responses={})
        second = get_agent_transport("static", responses={})
        assert first is not second

    def test_http_with_kwargs(self):
        transport = get_agent_transport("http", base_url="http://example.test/")
        assert isinstance(transport, HttpAgentTransport)
        assert transport.base_url == "http://example.test"

    def test_unknown_transport_raises(self):
        with pytest.raises(ValueError, match="Unknown agent transport"):
            get_agent_transport("carrier-pigeon")
