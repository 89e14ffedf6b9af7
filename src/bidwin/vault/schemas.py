"""Data models for the knowledge vault buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class SaveState(StrEnum):
    IDLE = "idle"
    SAVING = "saving"
    SAVED = "saved"
    REJECTED = "rejected"


@dataclass(frozen=True)
class SaveStatus:
    state: SaveState = SaveState.IDLE
    message: str = ""


@dataclass
class VaultBuffer:
    """Editable vault text plus the transient status of the last save."""

    content: str = ""
    save_status: SaveStatus = field(default_factory=SaveStatus)
