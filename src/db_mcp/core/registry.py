"""
Connector registry for DB-MCP.

Maps connector ids to connector instances so the server can select a
database backend at runtime.
"""

import logging
from typing import Dict, List, Optional

from db_mcp.core.errors import ConnectorNotFoundError
from db_mcp.core.interface import Connector

log = logging.getLogger(__name__)


class ConnectorRegistry:
    """
    Registry for managing database connectors.

    Built once at process start and handed to the server; registration
    happens before any lookup.
    """

    def __init__(self):
        self._connectors: Dict[str, Connector] = {}
        log.info("Initialized ConnectorRegistry")

    def register(self, connector: Connector) -> None:
        """
        Register a connector under its ``id``.

        Args:
            connector: Connector instance; replaces any connector with the same id
        """
        if connector.id in self._connectors:
            log.warning(f"Connector {connector.id} already registered, overwriting")

        self._connectors[connector.id] = connector
        log.info(f"Registered connector: {connector.id} ({connector.name})")

    def get(self, connector_id: str) -> Optional[Connector]:
        """
        Get a connector by id.

        Returns:
            Connector if found, None otherwise
        """
        return self._connectors.get(connector_id)

    def lookup(self, connector_id: str) -> Connector:
        """
        Get a connector by id, failing if it is not registered.

        Raises:
            ConnectorNotFoundError: If no connector has this id
        """
        connector = self._connectors.get(connector_id)
        if connector is None:
            available = ", ".join(sorted(self._connectors)) or "none"
            raise ConnectorNotFoundError(
                f"Unknown connector: {connector_id}. Available connectors: {available}"
            )
        return connector

    def get_all_connectors(self) -> List[Connector]:
        return list(self._connectors.values())

    def list_connectors(self) -> List[str]:
        """
        Get ids of all registered connectors.

        Returns:
            List of connector ids
        """
        return list(self._connectors.keys())

    def clear(self) -> None:
        """Clear all registered connectors."""
        self._connectors.clear()
        log.info("Cleared ConnectorRegistry")

    def __len__(self) -> int:
        return len(self._connectors)

    def __contains__(self, connector_id: str) -> bool:
        return connector_id in self._connectors
