"""Response validation — raw agent payload → normalized workflow result.

The agent is an external service; nothing it returns is trusted until it
has passed through :func:`validate`. The function never raises:

- Generation failures degrade to a synthetic ``missing_info`` result whose
  ``warning`` carries the reason, so the caller always has something to
  render.
- Audit failures produce no result at all; ``ValidationOutcome.error``
  holds the diagnostic.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from bidwin.agents.schemas import AgentCallResult, AgentMetadata
from bidwin.schemas import (
    AuditResult,
    Citation,
    GenerationResult,
    GenerationStatus,
    SentenceAnalysis,
)
from bidwin.validation.payloads import AuditPayload, EnvelopePayload, GenerationPayload

logger = logging.getLogger(__name__)

DEFAULT_GENERATION_WARNING = "Failed to generate answer"
DEFAULT_AGENT_ERROR = "Agent reported an error"
DEFAULT_AUDIT_ERROR = "Audit request failed"
SCORE_MIN = 0.0
SCORE_MAX = 100.0


class ResponseShape(StrEnum):
    GENERATION = "generation"
    AUDIT = "audit"


@dataclass
class ValidationOutcome:
    """Normalized result of validating one agent call.

    Attributes:
        result: The normalized result, or None when the shape has no
            fallback (audit).
        error: Why the call was not accepted as-is; None on success.
        metadata: Envelope metadata, when the agent sent any.
    """

    result: GenerationResult | AuditResult | None
    error: str | None = None
    metadata: AgentMetadata | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class _Rejected(Exception):
    """Internal signal carrying a user-readable rejection reason."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate(call: AgentCallResult, shape: ResponseShape) -> ValidationOutcome:
    """Validate a transport result against the expected workflow shape."""
    if shape is ResponseShape.GENERATION:
        return validate_generation(call)
    return validate_audit(call)


def validate_generation(call: AgentCallResult) -> ValidationOutcome:
    metadata = None
    try:
        raw, metadata = _unwrap(call)
        payload = GenerationPayload.model_validate(raw)
    except _Rejected as exc:
        return _generation_fallback(str(exc) or DEFAULT_GENERATION_WARNING, metadata)
    except ValidationError as exc:
        return _generation_fallback(_describe(exc), metadata)

    result = GenerationResult(
        answer=payload.answer,
        status=GenerationStatus(payload.status),
        citations=[coerce_citation(c) for c in payload.citations],
        warning=payload.warning,
    )
    return ValidationOutcome(result=result, metadata=metadata)


def validate_audit(call: AgentCallResult) -> ValidationOutcome:
    metadata = None
    try:
        raw, metadata = _unwrap(call)
        payload = AuditPayload.model_validate(raw)
    except _Rejected as exc:
        reason = str(exc) or DEFAULT_AUDIT_ERROR
        return ValidationOutcome(result=None, error=reason, metadata=metadata)
    except ValidationError as exc:
        return ValidationOutcome(result=None, error=_describe(exc), metadata=metadata)

    analysis: list[SentenceAnalysis] = []
    for i, item in enumerate(payload.analysis):
        if not isinstance(item, Mapping):
            logger.warning(
                "Skipping analysis entry %d: expected an object, got %s", i, type(item).__name__
            )
            continue
        analysis.append(coerce_sentence(item))

    result = AuditResult(
        compliance_score=clamp_score(payload.compliance_score),
        total_sentences=int(payload.total_sentences),
        analysis=analysis,
        summary=payload.summary,
    )
    if result.total_sentences != len(analysis):
        logger.info(
            "Audit reported %d sentences but analysed %d",
            result.total_sentences,
            len(analysis),
        )
    return ValidationOutcome(result=result, metadata=metadata)


# ---------------------------------------------------------------------------
# Element coercion
# ---------------------------------------------------------------------------


def coerce_citation(item: Any) -> Citation:
    """Build a citation from a loosely-shaped element without dropping it."""
    if isinstance(item, Mapping):
        return Citation(
            source_text=_text(item.get("source_text")),
            relevance=_text(item.get("relevance")),
        )
    if isinstance(item, str):
        return Citation(source_text=item)
    return Citation(source_text="")


def coerce_sentence(item: Mapping[str, Any]) -> SentenceAnalysis:
    return SentenceAnalysis(
        sentence=_text(item.get("sentence")),
        status=_text(item.get("status")),
        risk_level=_text(item.get("risk_level")),
        explanation=_text(item.get("explanation")),
        vault_reference=_text(item.get("vault_reference")),
    )


def clamp_score(score: float) -> float:
    """Clamp a compliance score into [0, 100]."""
    if score < SCORE_MIN or score > SCORE_MAX:
        logger.warning("Compliance score %s outside [0, 100]; clamping", score)
    return min(max(score, SCORE_MIN), SCORE_MAX)


# ---------------------------------------------------------------------------
# Private
# ---------------------------------------------------------------------------


def _unwrap(call: AgentCallResult) -> tuple[Any, AgentMetadata | None]:
    """Extract the ``result`` payload from a transport result.

    Raises:
        _Rejected: On transport failure, undecodable JSON, a missing
            ``result`` member, or an envelope with ``status == "error"``.
    """
    if not call.success or call.response is None:
        raise _Rejected(call.error or "")

    envelope_raw = _maybe_json(call.response, "Agent response is not valid JSON")
    try:
        envelope = EnvelopePayload.model_validate(envelope_raw)
    except ValidationError as exc:
        raise _Rejected(f"Malformed agent response: {_describe(exc)}") from exc

    metadata = None
    if isinstance(envelope.metadata, Mapping):
        metadata = AgentMetadata(
            agent_name=_optional_text(envelope.metadata.get("agent_name")),
            timestamp=_optional_text(envelope.metadata.get("timestamp")),
        )

    if envelope.status == "error":
        raise _Rejected(_text(envelope.error or envelope.message) or DEFAULT_AGENT_ERROR)

    return _maybe_json(envelope.result, "Agent result is not valid JSON"), metadata


def _maybe_json(value: Any, message: str) -> Any:
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise _Rejected(message) from exc


def _generation_fallback(reason: str, metadata: AgentMetadata | None) -> ValidationOutcome:
    logger.warning("Generation degraded to missing_info: %s", reason)
    fallback = GenerationResult(
        answer="",
        status=GenerationStatus.MISSING_INFO,
        citations=[],
        warning=reason,
    )
    return ValidationOutcome(result=fallback, error=reason, metadata=metadata)


def _describe(exc: ValidationError) -> str:
    fields: list[str] = []
    problems: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        if not loc:
            problems.append(err["msg"])
        elif loc not in fields:
            fields.append(loc)

    parts = [f"Missing or malformed fields: {', '.join(fields)}"] if fields else []
    return "; ".join(parts + problems)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> str | None:
    return None if value is None else _text(value)
