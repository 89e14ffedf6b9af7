"""Application settings loaded from YAML with environment variable overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Settings sections
# ---------------------------------------------------------------------------


class AgentSettings(BaseModel):
    transport: str = "http"
    base_url: str = "http://localhost:8000"
    api_key: str = ""
    timeout: float = 120.0
    # YAML of envelopes keyed by agent id, read by the static transport.
    responses_path: str | None = None
    generator_id: str = "6985a6533b50e9c8d7d7e939"
    auditor_id: str = "6985a66c3b50e9c8d7d7e93e"
    # Retrieval index backing both agents; not called directly yet.
    vault_rag_id: str = "6985a64460cd1fd2d988d920"


class GenerationSettings(BaseModel):
    copy_ack_seconds: float = 2.0


class VaultSettings(BaseModel):
    save_delay_seconds: float = 1.0
    message_ttl_seconds: float = 5.0
    sample_path: str | None = None


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------


class Settings(BaseModel):
    agent: AgentSettings = Field(default_factory=AgentSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    vault: VaultSettings = Field(default_factory=VaultSettings)


_ENV_OVERRIDES: list[tuple[str, str, str]] = [
    ("BIDWIN_AGENT_BASE_URL", "agent", "base_url"),
    ("BIDWIN_AGENT_API_KEY", "agent", "api_key"),
]


def _find_settings_file() -> Path | None:
    """Walk up from cwd looking for settings.yaml."""
    profile = os.getenv("BIDWIN_PROFILE", "")
    names = [f"settings-{profile}.yaml", "settings.yaml"] if profile else ["settings.yaml"]

    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in names:
            candidate = parent / name
            if candidate.exists():
                return candidate
    return None


def _apply_env_overrides(raw: dict) -> dict:
    for env_name, section, key in _ENV_OVERRIDES:
        value = os.getenv(env_name)
        if value:
            raw.setdefault(section, {})[key] = value
    return raw


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML file, falling back to defaults.

    Args:
        path: Explicit settings file. When omitted, ``settings.yaml`` is
            searched for from the current directory upwards.
    """
    settings_path = Path(path) if path is not None else _find_settings_file()

    raw: dict = {}
    if settings_path is not None:
        with open(settings_path, encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}

    return Settings(**_apply_env_overrides(raw))
