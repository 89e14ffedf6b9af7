"""Application wiring — settings → transport → controllers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bidwin.agents.base import AgentTransport
from bidwin.agents.factory import get_agent_transport
from bidwin.agents.static_transport import demo_responses, load_responses
from bidwin.config import Settings, load_settings
from bidwin.vault.base import SimulatedIndexer, VaultIndexer
from bidwin.vault.manager import VaultContentManager
from bidwin.vault.sample import load_sample_document
from bidwin.workflows.audit import AuditController
from bidwin.workflows.clipboard import Clipboard
from bidwin.workflows.generation import GenerationController

logger = logging.getLogger(__name__)


@dataclass
class Platform:
    """The three workflows sharing one agent transport."""

    generator: GenerationController
    auditor: AuditController
    vault: VaultContentManager
    transport: AgentTransport

    async def aclose(self) -> None:
        await self.transport.aclose()


def _transport_from_settings(settings: Settings) -> AgentTransport:
    agent = settings.agent
    if agent.transport == "http":
        return get_agent_transport(
            "http",
            base_url=agent.base_url,
            api_key=agent.api_key,
            timeout=agent.timeout,
        )
    if agent.transport == "static":
        if agent.responses_path:
            responses = load_responses(agent.responses_path)
        else:
            responses = demo_responses(agent.generator_id, agent.auditor_id)
        return get_agent_transport("static", responses=responses)
    return get_agent_transport(agent.transport)


def build_platform(
    settings: Settings | None = None,
    transport: AgentTransport | None = None,
    clipboard: Clipboard | None = None,
    indexer: VaultIndexer | None = None,
) -> Platform:
    """Build every controller from settings, with optional overrides.

    Raises:
        ValueError: If ``settings.agent.transport`` names an unknown transport.
    """
    settings = settings or load_settings()
    transport = transport or _transport_from_settings(settings)

    generator = GenerationController(
        transport=transport,
        agent_id=settings.agent.generator_id,
        clipboard=clipboard,
        copy_ack_seconds=settings.generation.copy_ack_seconds,
    )
    auditor = AuditController(transport=transport, agent_id=settings.agent.auditor_id)
    vault = VaultContentManager(
        indexer=indexer or SimulatedIndexer(delay=settings.vault.save_delay_seconds),
        sample_document=load_sample_document(settings.vault.sample_path),
        message_ttl=settings.vault.message_ttl_seconds,
    )

    logger.debug("Platform ready using %s", transport.transport_name())
    return Platform(generator=generator, auditor=auditor, vault=vault, transport=transport)
