"""Indexing backends for knowledge vault content."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

DEFAULT_SAVE_DELAY_SECONDS = 1.0


class IndexingError(Exception):
    """Raised by an indexer that could not persist the vault content."""


class VaultIndexer(ABC):
    """Persists vault content into the retrieval backend used by the agents."""

    @abstractmethod
    async def save(self, content: str) -> bool:
        """Persist and index ``content``.

        Returns:
            True when accepted, False when the backend declined it.

        Raises:
            IndexingError: If the backend failed.
        """


class SimulatedIndexer(VaultIndexer):
    """Stand-in backend that only waits a fixed delay."""

    def __init__(self, delay: float = DEFAULT_SAVE_DELAY_SECONDS):
        self.delay = delay
        self.saved: list[str] = []

    async def save(self, content: str) -> bool:
        await asyncio.sleep(self.delay)
        self.saved.append(content)
        logger.debug("Simulated indexing of %d characters", len(content))
        return True
