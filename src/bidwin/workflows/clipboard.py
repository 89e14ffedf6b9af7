"""Clipboard side channel used by the generation workflow."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Clipboard(ABC):
    """Best-effort text clipboard."""

    @abstractmethod
    async def copy(self, text: str) -> bool:
        """Copy ``text``; return False instead of raising when unavailable."""


class MemoryClipboard(Clipboard):
    """Process-local clipboard; keeps the last copied text."""

    def __init__(self) -> None:
        self.text: str | None = None

    async def copy(self, text: str) -> bool:
        self.text = text
        return True
