"""Knowledge vault — editable buffer and indexing backends."""

from bidwin.vault.base import IndexingError, SimulatedIndexer, VaultIndexer
from bidwin.vault.manager import VaultContentManager
from bidwin.vault.sample import SAMPLE_VAULT_DOCUMENT, load_sample_document
from bidwin.vault.schemas import SaveState, SaveStatus, VaultBuffer

__all__ = [
    "IndexingError",
    "SAMPLE_VAULT_DOCUMENT",
    "SaveState",
    "SaveStatus",
    "SimulatedIndexer",
    "VaultBuffer",
    "VaultContentManager",
    "VaultIndexer",
    "load_sample_document",
]
