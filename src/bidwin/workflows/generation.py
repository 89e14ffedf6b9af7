"""Generation workflow — question → grounded answer with citations."""

from __future__ import annotations

import asyncio
import logging

from bidwin.agents.base import AgentTransport, send_safely
from bidwin.schemas import GenerationResult, GenerationStatus
from bidwin.validation.validator import ResponseShape, validate
from bidwin.workflows.clipboard import Clipboard, MemoryClipboard
from bidwin.workflows.lifecycle import LifecycleState, RequestLifecycle

logger = logging.getLogger(__name__)

DEFAULT_COPY_ACK_SECONDS = 2.0


class GenerationController:
    """Drives one generation request at a time and holds its outcome.

    A submit while a request is in flight is ignored; the lifecycle, not
    the caller, is the guard. Failures never raise: they end in ``FAILED``
    with a ``missing_info`` result carrying the reason as its warning.
    """

    def __init__(
        self,
        transport: AgentTransport,
        agent_id: str,
        clipboard: Clipboard | None = None,
        copy_ack_seconds: float = DEFAULT_COPY_ACK_SECONDS,
    ):
        self.transport = transport
        self.agent_id = agent_id
        self.clipboard = clipboard or MemoryClipboard()
        self.copy_ack_seconds = copy_ack_seconds
        self.lifecycle: RequestLifecycle[GenerationResult] = RequestLifecycle()
        self.copied = False
        self._copy_reset: asyncio.TimerHandle | None = None

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> LifecycleState:
        return self.lifecycle.state

    @property
    def result(self) -> GenerationResult | None:
        return self.lifecycle.result

    @property
    def error(self) -> str | None:
        return self.lifecycle.error

    @property
    def in_flight(self) -> bool:
        return self.lifecycle.in_flight

    @property
    def has_answer(self) -> bool:
        return self.result is not None and bool(self.result.answer)

    @property
    def show_warning_banner(self) -> bool:
        result = self.result
        return (
            result is not None
            and result.status is GenerationStatus.MISSING_INFO
            and bool(result.warning)
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def submit(self, question: str) -> bool:
        """Ask the generator agent ``question``.

        Returns:
            False when ignored (blank question or a request already in
            flight), True once the request has resolved.
        """
        if not question.strip() or self.in_flight:
            return False

        self.lifecycle.start()
        call = await send_safely(self.transport, question, self.agent_id)
        outcome = validate(call, ResponseShape.GENERATION)

        if outcome.ok:
            self.lifecycle.complete(outcome.result)
            logger.info(
                "Generated answer (%s) with %d citations",
                outcome.result.status,
                len(outcome.result.citations),
            )
        else:
            self.lifecycle.fail(outcome.error, fallback=outcome.result)
        return True

    def clear(self) -> bool:
        """Drop the stored result. Refused while a request is in flight."""
        if self.in_flight:
            return False
        self.lifecycle.reset()
        return True

    async def copy_answer(self) -> bool:
        """Copy the current answer and acknowledge it for a short window."""
        if not self.has_answer:
            return False

        try:
            copied = await self.clipboard.copy(self.result.answer)
        except Exception:
            logger.exception("Clipboard copy failed")
            return False
        if not copied:
            return False

        self.copied = True
        if self._copy_reset is not None:
            self._copy_reset.cancel()
        loop = asyncio.get_running_loop()
        self._copy_reset = loop.call_later(self.copy_ack_seconds, self._reset_copied)
        return True

    def _reset_copied(self) -> None:
        self.copied = False
        self._copy_reset = None
