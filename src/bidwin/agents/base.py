"""Abstract base class for agent transports."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from bidwin.agents.schemas import AgentCallResult

logger = logging.getLogger(__name__)


class AgentTransport(ABC):
    """Interface for sending one request to the external agent service."""

    @abstractmethod
    async def send(self, input_text: str, agent_id: str) -> AgentCallResult:
        """Send ``input_text`` to the agent identified by ``agent_id``.

        Implementations issue exactly one request per call and never raise:
        every failure is reported through ``AgentCallResult.error``.
        Callers are responsible for rejecting empty input.

        Args:
            input_text: Free-text question or draft.
            agent_id: Identifier selecting the target agent capability.

        Returns:
            An ``AgentCallResult``.
        """

    async def aclose(self) -> None:
        """Release any held connections."""

    @classmethod
    def transport_name(cls) -> str:
        """Return human-readable transport name."""
        return cls.__name__


async def send_safely(
    transport: AgentTransport,
    input_text: str,
    agent_id: str,
) -> AgentCallResult:
    """Call ``transport.send``, turning an escaped exception into a failure value."""
    try:
        return await transport.send(input_text, agent_id)
    except Exception as exc:
        logger.exception(
            "Transport %s raised instead of returning a failure", transport.transport_name()
        )
        return AgentCallResult.failed(str(exc) or "Network error")
