"""Agent transport factory.

Transports are looked up by name and imported on first use. An instance
built without constructor arguments is cached per name; one built from
settings (base URL, API key, canned responses) is always a new instance.
"""

from __future__ import annotations

import importlib
import logging

from bidwin.agents.base import AgentTransport

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Transport registry: (transport_key, module_path, class_name)
# ---------------------------------------------------------------------------

_TRANSPORT_REGISTRY: list[tuple[str, str, str]] = [
    ("http", "bidwin.agents.http_transport", "HttpAgentTransport"),
    ("static", "bidwin.agents.static_transport", "StaticAgentTransport"),
]

# Argument-less instances only
_transport_cache: dict[str, AgentTransport] = {}


def get_agent_transport(
    transport: str = "http",
    **kwargs,
) -> AgentTransport:
    """Get an agent transport by name.

    Args:
        transport: One of ``http``, ``static`` (case-insensitive).
        **kwargs: Passed to the transport constructor; when given, the
            result bypasses the cache.

    Raises:
        ValueError: If no transport is registered under ``transport``.

    Returns:
        An ``AgentTransport`` instance.
    """
    key = transport.lower()

    if not kwargs and key in _transport_cache:
        return _transport_cache[key]

    for reg_key, module_path, cls_name in _TRANSPORT_REGISTRY:
        if reg_key == key:
            mod = importlib.import_module(module_path)
            cls = getattr(mod, cls_name)
            instance = cls(**kwargs)
            if not kwargs:
                _transport_cache[key] = instance
            logger.debug("Created %s agent transport", cls_name)
            return instance

    available = [k for k, _, _ in _TRANSPORT_REGISTRY]
    raise ValueError(f"Unknown agent transport '{transport}'. Available: {available}")


def available_transports() -> list[str]:
    """Return names of registered agent transports."""
    return [k for k, _, _ in _TRANSPORT_REGISTRY]


def clear_cache() -> None:
    """Clear singleton cache (for testing)."""
    _transport_cache.clear()
