"""Domain data models shared by the generation and audit workflows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class GenerationStatus(StrEnum):
    """Outcome of an answer generation request."""

    SUCCESS = "success"
    MISSING_INFO = "missing_info"


class VerificationStatus(StrEnum):
    """Known per-sentence verification verdicts."""

    VERIFIED = "VERIFIED"
    UNKNOWN = "UNKNOWN"
    CONTRADICTION = "CONTRADICTION"


class RiskLevel(StrEnum):
    """Known per-sentence compliance risk levels."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class Citation:
    """A verbatim knowledge-vault excerpt offered as evidence."""

    source_text: str
    relevance: str = ""


@dataclass
class GenerationResult:
    """Grounded answer returned by the generator agent.

    ``warning`` is expected when ``status`` is ``missing_info`` but its
    absence is tolerated.
    """

    answer: str
    status: GenerationStatus
    citations: list[Citation] = field(default_factory=list)
    warning: str | None = None


@dataclass(frozen=True)
class SentenceAnalysis:
    """Audit verdict for one sentence of a draft.

    ``status`` and ``risk_level`` keep the agent's raw strings; values
    outside ``VerificationStatus``/``RiskLevel`` are legal.
    """

    sentence: str
    status: str
    risk_level: str
    explanation: str = ""
    vault_reference: str = ""


@dataclass
class AuditResult:
    """Compliance audit of a whole draft."""

    compliance_score: float
    total_sentences: int
    analysis: list[SentenceAnalysis] = field(default_factory=list)
    summary: str = ""
