"""HTTP agent transport — one POST per call, failures returned as values."""

from __future__ import annotations

import json
import logging

import httpx

from bidwin.agents.base import AgentTransport
from bidwin.agents.schemas import AgentCallResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECONDS = 120.0
MAX_RESPONSE_BYTES = 5_000_000


class HttpAgentTransport(AgentTransport):
    """Invoke agents via ``POST {base_url}/agents/{agent_id}/invoke``.

    The response body is expected to be the agent envelope
    (``{"status": ..., "result": ..., "metadata": ...}``) and is returned
    undecoded beyond JSON parsing; shape checks belong to the validator.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str = "",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._client = client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def send(self, input_text: str, agent_id: str) -> AgentCallResult:
        payload = {"message": input_text, "agent_id": agent_id}
        path = f"/agents/{agent_id}/invoke"

        try:
            resp = await self._client.post(path, json=payload, headers=self._headers())
            resp.raise_for_status()
        except httpx.TimeoutException:
            logger.warning("Agent %s timed out", agent_id)
            return AgentCallResult.failed("The agent did not respond in time")
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.error(
                "Agent %s returned HTTP %d: %s", agent_id, status, exc.response.text[:200]
            )
            return AgentCallResult.failed(f"Agent request failed with HTTP {status}")
        except httpx.HTTPError as exc:
            logger.error("Agent %s unreachable: %s", agent_id, exc)
            return AgentCallResult.failed(f"Could not reach the agent service: {exc}")

        if len(resp.content) > MAX_RESPONSE_BYTES:
            logger.error("Agent %s response exceeds %d bytes", agent_id, MAX_RESPONSE_BYTES)
            return AgentCallResult.failed("Agent response was too large")

        try:
            body = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.error("Agent %s returned a non-JSON body", agent_id)
            return AgentCallResult.failed("Agent returned an unreadable response")

        logger.debug("Agent %s responded (%d bytes)", agent_id, len(resp.content))
        return AgentCallResult.ok(body)

    async def aclose(self) -> None:
        await self._client.aclose()
