"""Built-in database connectors for DB-MCP."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Tuple

from db_mcp.connectors.postgres import PostgresConnector, PostgresDSNParser
from db_mcp.core.errors import ConnectorNotFoundError
from db_mcp.core.interface import Connector
from db_mcp.core.registry import ConnectorRegistry


# --------------------------------------------------------------------------------------
# Connector factories

CONNECTORS: Dict[str, Callable[[], Connector]] = {
    PostgresConnector.id: PostgresConnector,
}


def list_available_connectors() -> List[Tuple[str, str]]:
    return sorted((connector_id, factory.name) for connector_id, factory in CONNECTORS.items())


def register_all_connectors(registry: ConnectorRegistry, only: Iterable[str] | None = None) -> List[str]:
    target_ids = list(only) if only else [connector_id for connector_id, _ in list_available_connectors()]
    registered: List[str] = []
    for connector_id in target_ids:
        factory = CONNECTORS.get(connector_id)
        if factory is None:
            raise ConnectorNotFoundError(
                f"Unknown connector: {connector_id}. "
                f"Available connectors: {', '.join(sorted(CONNECTORS))}"
            )
        registry.register(factory())
        registered.append(connector_id)
    return registered


def build_registry(only: Iterable[str] | None = None) -> ConnectorRegistry:
    """Create a registry populated with the built-in connectors."""
    registry = ConnectorRegistry()
    register_all_connectors(registry, only=only)
    return registry


__all__ = [
    "CONNECTORS",
    "PostgresConnector",
    "PostgresDSNParser",
    "build_registry",
    "list_available_connectors",
    "register_all_connectors",
]
