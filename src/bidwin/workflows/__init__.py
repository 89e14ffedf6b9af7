"""Workflow controllers — generation and audit."""

from bidwin.schemas import (
    AuditResult,
    Citation,
    GenerationResult,
    GenerationStatus,
    RiskLevel,
    SentenceAnalysis,
    VerificationStatus,
)
from bidwin.workflows.audit import AuditController, SentenceRow
from bidwin.workflows.generation import GenerationController
from bidwin.workflows.lifecycle import LifecycleState, RequestLifecycle

__all__ = [
    "AuditController",
    "AuditResult",
    "Citation",
    "GenerationController",
    "GenerationResult",
    "GenerationStatus",
    "LifecycleState",
    "RequestLifecycle",
    "RiskLevel",
    "SentenceAnalysis",
    "SentenceRow",
    "VerificationStatus",
]
