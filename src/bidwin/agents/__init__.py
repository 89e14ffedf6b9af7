"""Agent transports — HTTP and static."""

from bidwin.agents.base import AgentTransport
from bidwin.agents.factory import available_transports, get_agent_transport
from bidwin.agents.schemas import AgentCallResult

__all__ = ["AgentCallResult", "AgentTransport", "available_transports", "get_agent_transport"]
