"""Audit workflow — draft text → per-sentence risk and a compliance score."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from bidwin.agents.base import AgentTransport, send_safely
from bidwin.schemas import AuditResult, SentenceAnalysis
from bidwin.taxonomy import RiskBadge, ScoreBand, StatusIcon, risk_badge, score_band, status_icon
from bidwin.validation.validator import ResponseShape, validate
from bidwin.workflows.lifecycle import LifecycleState, RequestLifecycle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentenceRow:
    """One analysed sentence with its derived presentation categories."""

    analysis: SentenceAnalysis
    badge: RiskBadge
    icon: StatusIcon | None


class AuditController:
    """Drives one audit request at a time and holds its outcome.

    Unlike generation, a failed audit has no displayable fallback: the
    lifecycle ends ``FAILED`` with ``result`` left empty and the reason
    logged and kept in ``error``.
    """

    def __init__(self, transport: AgentTransport, agent_id: str):
        self.transport = transport
        self.agent_id = agent_id
        self.lifecycle: RequestLifecycle[AuditResult] = RequestLifecycle()

    @property
    def state(self) -> LifecycleState:
        return self.lifecycle.state

    @property
    def result(self) -> AuditResult | None:
        return self.lifecycle.result

    @property
    def error(self) -> str | None:
        return self.lifecycle.error

    @property
    def in_flight(self) -> bool:
        return self.lifecycle.in_flight

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def submit(self, draft: str) -> bool:
        """Audit ``draft`` against the knowledge vault.

        Returns:
            False when ignored (blank draft or a request already in
            flight), True once the request has resolved.
        """
        if not draft.strip() or self.in_flight:
            return False

        self.lifecycle.start()
        call = await send_safely(self.transport, draft, self.agent_id)
        outcome = validate(call, ResponseShape.AUDIT)

        if outcome.ok:
            self.lifecycle.complete(outcome.result)
            logger.info(
                "Audit scored %s over %d sentences",
                outcome.result.compliance_score,
                outcome.result.total_sentences,
            )
        else:
            logger.error("Audit failed: %s", outcome.error)
            self.lifecycle.fail(outcome.error)
        return True

    def clear(self) -> bool:
        """Drop the stored result. Refused while a request is in flight."""
        if self.in_flight:
            return False
        self.lifecycle.reset()
        return True

    # ------------------------------------------------------------------
    # Derived presentation (recomputed on every call)
    # ------------------------------------------------------------------

    @property
    def score_band(self) -> ScoreBand | None:
        if self.result is None:
            return None
        return score_band(self.result.compliance_score)

    def sentence_rows(self) -> Iterator[SentenceRow]:
        if self.result is None:
            return
        for item in self.result.analysis:
            yield SentenceRow(
                analysis=item,
                badge=risk_badge(item.risk_level),
                icon=status_icon(item.status),
            )
