"""Request lifecycle owned by a single workflow controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class LifecycleState(StrEnum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class RequestLifecycle(Generic[T]):
    """Current state of a controller's request plus its last outcome.

    A ``FAILED`` lifecycle may still carry a ``result`` when the workflow
    degrades to a displayable fallback.
    """

    state: LifecycleState = LifecycleState.IDLE
    result: T | None = None
    error: str | None = None

    @property
    def in_flight(self) -> bool:
        return self.state is LifecycleState.IN_FLIGHT

    def start(self) -> None:
        self.state = LifecycleState.IN_FLIGHT
        self.result = None
        self.error = None

    def complete(self, result: T) -> None:
        self.state = LifecycleState.COMPLETED
        self.result = result
        self.error = None

    def fail(self, reason: str, fallback: T | None = None) -> None:
        self.state = LifecycleState.FAILED
        self.result = fallback
        self.error = reason

    def reset(self) -> None:
        self.state = LifecycleState.IDLE
        self.result = None
        self.error = None
