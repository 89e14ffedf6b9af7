"""Static agent transport — canned envelopes for demos and offline runs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from bidwin.agents.base import AgentTransport
from bidwin.agents.schemas import AgentCallResult

logger = logging.getLogger(__name__)

DEMO_GENERATION_RESULT: dict[str, Any] = {
    "answer": (
        "All customer data is encrypted with AES-256 at rest and TLS 1.3 in "
        "transit. Encryption keys are rotated every 90 days."
    ),
    "status": "success",
    "citations": [
        {
            "source_text": (
                "All customer data must be encrypted using AES-256 encryption "
                "at rest and TLS 1.3 in transit."
            ),
            "relevance": "States the encryption standard",
        },
        {
            "source_text": "Encryption keys are rotated every 90 days.",
            "relevance": "Covers key management",
        },
    ],
}

DEMO_AUDIT_RESULT: dict[str, Any] = {
    "compliance_score": 50,
    "total_sentences": 2,
    "analysis": [
        {
            "sentence": "We encrypt all customer data with AES-256.",
            "status": "VERIFIED",
            "risk_level": "safe",
            "explanation": "Matches the data encryption policy.",
            "vault_reference": "Data Protection",
        },
        {
            "sentence": "Our system is 100% unhackable.",
            "status": "CONTRADICTION",
            "risk_level": "danger",
            "explanation": "The vault states no system is 100% immune to threats.",
            "vault_reference": "Incident Response",
        },
    ],
    "summary": "One claim is verified; one absolute security claim contradicts policy.",
}


def demo_responses(generator_id: str, auditor_id: str) -> dict[str, Any]:
    """Built-in envelopes answering as the configured generator and auditor."""
    return {
        generator_id: {"status": "success", "result": DEMO_GENERATION_RESULT},
        auditor_id: {"status": "success", "result": DEMO_AUDIT_RESULT},
    }


def load_responses(path: str | Path) -> dict[str, Any]:
    """Read canned envelopes from a YAML mapping of agent id → envelope.

    Raises:
        ValueError: If the file does not hold a mapping.
    """
    with open(path, encoding="utf-8") as fh:
        raw = yaml.safe_load(fh) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Agent responses file {path} must map agent ids to envelopes")
    return {str(agent_id): envelope for agent_id, envelope in raw.items()}


class StaticAgentTransport(AgentTransport):
    """Return a fixed response per agent id and record every call."""

    def __init__(self, responses: dict[str, Any] | None = None):
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple[str, str]] = []

    def set_response(self, agent_id: str, response: Any) -> None:
        self.responses[agent_id] = response

    async def send(self, input_text: str, agent_id: str) -> AgentCallResult:
        self.calls.append((input_text, agent_id))

        if agent_id not in self.responses:
            logger.warning("No canned response for agent %s", agent_id)
            return AgentCallResult.failed(f"Unknown agent '{agent_id}'")

        response = self.responses[agent_id]
        if isinstance(response, AgentCallResult):
            return response
        return AgentCallResult.ok(response)
