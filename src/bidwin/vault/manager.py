"""Knowledge vault content manager — edit buffer, load sample, save."""

from __future__ import annotations

import asyncio
import logging

from bidwin.vault.base import IndexingError, SimulatedIndexer, VaultIndexer
from bidwin.vault.sample import SAMPLE_VAULT_DOCUMENT
from bidwin.vault.schemas import SaveState, SaveStatus, VaultBuffer

logger = logging.getLogger(__name__)

EMPTY_CONTENT_MESSAGE = "Please enter content to save"
SAVED_MESSAGE = "Knowledge Vault content saved and indexed successfully!"
DECLINED_MESSAGE = "Knowledge Vault content could not be indexed"
DEFAULT_MESSAGE_TTL_SECONDS = 5.0


class VaultContentManager:
    """Owns the vault buffer and its save status.

    Saved/rejected messages from a save attempt revert to idle after
    ``message_ttl`` seconds. The empty-content message stays until the
    next action.
    """

    def __init__(
        self,
        indexer: VaultIndexer | None = None,
        sample_document: str = SAMPLE_VAULT_DOCUMENT,
        message_ttl: float = DEFAULT_MESSAGE_TTL_SECONDS,
    ):
        self.indexer = indexer or SimulatedIndexer()
        self.sample_document = sample_document
        self.message_ttl = message_ttl
        self.buffer = VaultBuffer()
        self._revert: asyncio.TimerHandle | None = None

    @property
    def content(self) -> str:
        return self.buffer.content

    @property
    def status(self) -> SaveStatus:
        return self.buffer.save_status

    @property
    def saving(self) -> bool:
        return self.status.state is SaveState.SAVING

    def set_content(self, content: str) -> None:
        """Replace the buffer text. Allowed while a save is running."""
        self.buffer.content = content

    def load_sample(self) -> bool:
        if self.saving:
            return False
        self.buffer.content = self.sample_document
        self._set_status(SaveStatus())
        return True

    async def save(self) -> SaveStatus:
        """Index the current buffer content.

        Blank content is rejected without entering ``SAVING``; a call while
        another save runs is ignored.
        """
        if self.saving:
            return self.status

        if not self.content.strip():
            self._set_status(SaveStatus(SaveState.REJECTED, EMPTY_CONTENT_MESSAGE))
            return self.status

        self._set_status(SaveStatus(SaveState.SAVING))
        content = self.content

        try:
            accepted = await self.indexer.save(content)
            reason = None if accepted else DECLINED_MESSAGE
        except IndexingError as exc:
            reason = str(exc) or DECLINED_MESSAGE
        except Exception as exc:
            logger.exception("Vault indexer raised")
            reason = str(exc) or DECLINED_MESSAGE

        if reason is None:
            logger.info("Vault content saved (%d characters)", len(content))
            self._set_status(SaveStatus(SaveState.SAVED, SAVED_MESSAGE))
        else:
            logger.error("Vault save rejected: %s", reason)
            self._set_status(SaveStatus(SaveState.REJECTED, reason))

        self._revert = asyncio.get_running_loop().call_later(self.message_ttl, self._clear_message)
        return self.status

    def _set_status(self, status: SaveStatus) -> None:
        if self._revert is not None:
            self._revert.cancel()
            self._revert = None
        self.buffer.save_status = status

    def _clear_message(self) -> None:
        self._revert = None
        self.buffer.save_status = SaveStatus()
