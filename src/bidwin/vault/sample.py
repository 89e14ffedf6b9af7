"""Canonical sample document for demos."""

from __future__ import annotations

from pathlib import Path

SAMPLE_VAULT_DOCUMENT = """ENTERPRISE SECURITY POLICY

Data Encryption Standards:
All customer data must be encrypted using AES-256 encryption at rest and TLS 1.3 in transit. \
We employ industry-standard encryption protocols for all sensitive information.

Server Infrastructure:
Our servers are protected by multi-layered firewall systems with 24/7 monitoring. \
We maintain 99.9% uptime SLA and conduct regular security audits.

Data Storage:
Customer information is stored on SOC 2 Type II certified cloud platforms with automated \
daily backups and point-in-time recovery capabilities.

Incident Response:
While we maintain robust security measures, we acknowledge that no system is 100% immune \
to threats. Our incident response team follows documented procedures for any security events."""


def load_sample_document(path: str | Path | None = None) -> str:
    """Return the sample document, read from ``path`` when one is given."""
    if path is None:
        return SAMPLE_VAULT_DOCUMENT
    return Path(path).read_text(encoding="utf-8")
