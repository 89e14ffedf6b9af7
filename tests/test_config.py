"""Tests for settings loading and platform wiring."""

from __future__ import annotations

import pytest

from bidwin.agents.http_transport import HttpAgentTransport
from bidwin.agents.static_transport import StaticAgentTransport
from bidwin.app import build_platform
from bidwin.config import AgentSettings, Settings, load_settings
from bidwin.vault.base import SimulatedIndexer
from bidwin.workflows.clipboard import MemoryClipboard
from bidwin.workflows.lifecycle import LifecycleState


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("BIDWIN_PROFILE", "BIDWIN_AGENT_BASE_URL", "BIDWIN_AGENT_API_KEY"):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_settings()
        assert settings == Settings()
        assert settings.agent.generator_id == "6985a6533b50e9c8d7d7e939"
        assert settings.agent.auditor_id == "6985a66c3b50e9c8d7d7e93e"
        assert settings.agent.vault_rag_id == "6985a64460cd1fd2d988d920"
        assert settings.generation.copy_ack_seconds == 2.0
        assert settings.vault.message_ttl_seconds == 5.0

    def test_yaml_found_in_parent_directory(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text(
            "agent:\n  base_url: http://agents.internal\n  generator_id: g-42\n",
            encoding="utf-8",
        )
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        settings = load_settings()
        assert settings.agent.base_url == "http://agents.internal"
        assert settings.agent.generator_id == "g-42"
        assert settings.agent.auditor_id == "6985a66c3b50e9c8d7d7e93e"

    def test_profile_file_takes_precedence(self, tmp_path, monkeypatch):
        (tmp_path / "settings.yaml").write_text("agent:\n  timeout: 10\n", encoding="utf-8")
        (tmp_path / "settings-staging.yaml").write_text("agent:\n  timeout: 3\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BIDWIN_PROFILE", "staging")

        assert load_settings().agent.timeout == 3

    def test_explicit_path_and_empty_file(self, tmp_path):
        p = tmp_path / "empty.yaml"
        p.write_text("", encoding="utf-8")
        assert load_settings(p) == Settings()

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BIDWIN_AGENT_BASE_URL", "https://agents.example.com")
        monkeypatch.setenv("BIDWIN_AGENT_API_KEY", "k-123")

        settings = load_settings()
        assert settings.agent.base_url == "https://agents.example.com"
        assert settings.agent.api_key == "k-123"


class TestBuildPlatform:
    def test_injected_collaborators(self, fast_settings, static_transport):
        clipboard = MemoryClipboard()
        platform = build_platform(fast_settings, transport=static_transport, clipboard=clipboard)

        assert platform.transport is static_transport
        assert platform.generator.agent_id == "gen-agent"
        assert platform.generator.clipboard is clipboard
        assert platform.generator.copy_ack_seconds == 0.01
        assert platform.auditor.agent_id == "audit-agent"
        assert platform.vault.message_ttl == 0.01
        assert isinstance(platform.vault.indexer, SimulatedIndexer)

    def test_http_transport_from_settings(self):
        settings = Settings()
        platform = build_platform(settings)
        assert isinstance(platform.transport, HttpAgentTransport)
        assert platform.transport.base_url == settings.agent.base_url

    def test_static_transport_from_settings(self, fast_settings):
        platform = build_platform(fast_settings)
        assert isinstance(platform.transport, StaticAgentTransport)

    @pytest.mark.asyncio
    async def test_static_transport_answers_with_demo_envelopes(self):
        platform = build_platform(Settings(agent=AgentSettings(transport="static")))

        await platform.generator.submit("What encryption do you use?")
        await platform.auditor.submit("Our system is 100% unhackable.")

        assert platform.generator.state is LifecycleState.COMPLETED
        assert platform.generator.has_answer
        assert len(platform.generator.result.citations) == 2
        assert platform.auditor.state is LifecycleState.COMPLETED
        assert platform.auditor.result.compliance_score == 50

    @pytest.mark.asyncio
    async def test_static_responses_from_yaml(self, fast_settings, tmp_path):
        p = tmp_path / "responses.yaml"
        p.write_text(
            "gen-agent:\n"
            "  status: success\n"
            "  result:\n"
            "    answer: Data stays in the EU.\n"
            "    status: success\n"
            "    citations: []\n",
            encoding="utf-8",
        )
        fast_settings.agent.responses_path = str(p)
        platform = build_platform(fast_settings)

        await platform.generator.submit("Where is data stored?")
        await platform.auditor.submit("Data stays in the EU.")

        assert platform.generator.result.answer == "Data stays in the EU."
        assert platform.auditor.state is LifecycleState.FAILED
        assert platform.auditor.error == "Unknown agent 'audit-agent'"

    def test_static_responses_file_must_be_a_mapping(self, fast_settings, tmp_path):
        p = tmp_path / "responses.yaml"
        p.write_text("- not\n- a mapping\n", encoding="utf-8")
        fast_settings.agent.responses_path = str(p)
        with pytest.raises(ValueError):
            build_platform(fast_settings)


    def test_unknown_transport(self, fast_settings):
        fast_settings.agent.transport = "smoke-signals"
        with pytest.raises(ValueError):
            build_platform(fast_settings)

    def test_sample_path_from_settings(self, fast_settings, tmp_path):
        p = tmp_path / "vault.txt"
        p.write_text("Custom policy", encoding="utf-8")
        fast_settings.vault.sample_path = str(p)

        platform = build_platform(fast_settings)
        platform.vault.load_sample()
        assert platform.vault.content == "Custom policy"

    @pytest.mark.asyncio
    async def test_workflows_are_independent(self, fast_settings, static_transport):
        platform = build_platform(fast_settings, transport=static_transport)

        await platform.generator.submit("What encryption do you use?")
        assert platform.auditor.state is LifecycleState.IDLE

        await platform.auditor.submit("Our system is 100% unhackable.")
        platform.generator.clear()
        assert platform.auditor.state is LifecycleState.COMPLETED
