"""Shared fixtures for tests — canned agent envelopes, no network calls."""

from __future__ import annotations

import copy

import pytest

from bidwin.agents.static_transport import StaticAgentTransport
from bidwin.config import AgentSettings, GenerationSettings, Settings, VaultSettings

GENERATOR_ID = "gen-agent"
AUDITOR_ID = "audit-agent"

# ---------------------------------------------------------------------------
# Agent envelopes
# ---------------------------------------------------------------------------

_GENERATION_ENVELOPE = {
    "status": "success",
    "result": {
        "answer": "AES-256 at rest, TLS 1.3 in transit.",
        "status": "success",
        "citations": [
            {
                "source_text": "All customer data must be encrypted using AES-256...",
                "relevance": "Directly answers encryption question",
            }
        ],
    },
    "metadata": {"agent_name": "Bid Generator", "timestamp": "2026-01-05T10:00:00Z"},
}

_AUDIT_ENVELOPE = {
    "status": "success",
    "result": {
        "compliance_score": 20,
        "total_sentences": 1,
        "analysis": [
            {
                "sentence": "Our system is 100% unhackable.",
                "status": "CONTRADICTION",
                "risk_level": "danger",
                "explanation": "Vault states no system is 100% immune to threats.",
                "vault_reference": "Incident Response",
            }
        ],
        "summary": "The draft overstates the security posture.",
    },
}


@pytest.fixture
def generation_envelope() -> dict:
    return copy.deepcopy(_GENERATION_ENVELOPE)


@pytest.fixture
def audit_envelope() -> dict:
    return copy.deepcopy(_AUDIT_ENVELOPE)


@pytest.fixture
def missing_info_envelope() -> dict:
    return {
        "status": "success",
        "result": {
            "answer": "",
            "status": "missing_info",
            "citations": [],
            "warning": "The vault does not mention data residency.",
        },
    }


# ---------------------------------------------------------------------------
# Transports and settings
# ---------------------------------------------------------------------------


@pytest.fixture
def static_transport(generation_envelope: dict, audit_envelope: dict) -> StaticAgentTransport:
    return StaticAgentTransport({
        GENERATOR_ID: generation_envelope,
        AUDITOR_ID: audit_envelope,
    })


@pytest.fixture
def fast_settings() -> Settings:
    """Settings with short timers and the static transport."""
    return Settings(
        agent=AgentSettings(
            transport="static",
            generator_id=GENERATOR_ID,
            auditor_id=AUDITOR_ID,
        ),
        generation=GenerationSettings(copy_ack_seconds=0.01),
        vault=VaultSettings(save_delay_seconds=0.0, message_ttl_seconds=0.01),
    )
