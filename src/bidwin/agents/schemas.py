"""Data models for agent calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AgentCallResult:
    """Uniform result of a single agent call.

    Attributes:
        success: Whether the call reached the agent and returned a body.
        response: Decoded response body (the agent envelope) on success.
        error: Human-readable failure reason when ``success`` is False.
    """

    success: bool
    response: Any | None = None
    error: str | None = None

    @classmethod
    def ok(cls, response: Any) -> AgentCallResult:
        return cls(success=True, response=response)

    @classmethod
    def failed(cls, error: str) -> AgentCallResult:
        return cls(success=False, error=error)


@dataclass(frozen=True)
class AgentMetadata:
    """Optional metadata attached to an agent envelope."""

    agent_name: str | None = None
    timestamp: str | None = None
