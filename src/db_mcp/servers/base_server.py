"""
Base MCP server implementation.

Builds a FastMCP server around one registered connector. The connector is
connected when the server starts and disconnected when it shuts down.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mcp.server.fastmcp import FastMCP

from db_mcp.config import ServerConfig
from db_mcp.connectors import build_registry
from db_mcp.core.interface import Connector
from db_mcp.core.registry import ConnectorRegistry
from db_mcp.handlers import register_resources, register_tools

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"

log = logging.getLogger(__name__)


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send logs to stderr; stdout carries the MCP stdio protocol."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def create_mcp_server(
    registry: ConnectorRegistry,
    connector_id: str,
    dsn: str,
    server_name: str | None = None,
) -> FastMCP:
    """
    Create a FastMCP server serving one connector.

    Args:
        registry: Registry holding the available connectors.
        connector_id: Id of the connector to serve.
        dsn: Connection string passed to ``connector.connect`` at start-up.
        server_name: Name presented to MCP clients. Defaults to the connector name.
    """
    connector = registry.lookup(connector_id)
    label = server_name or f"{connector.name} MCP Server"
    log.info("Creating MCP server: %s (connector=%s)", label, connector.id)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[Connector]:
        await connector.connect(dsn)
        try:
            yield connector
        finally:
            await connector.disconnect()

    mcp = FastMCP(label, lifespan=lifespan)
    register_resources(mcp, connector)
    register_tools(mcp, connector)
    return mcp


def run_server(config: ServerConfig, registry: ConnectorRegistry | None = None) -> None:
    """Create and run the MCP server over stdio."""
    if registry is None:
        registry = build_registry()
    mcp = create_mcp_server(registry, config.connector_id, config.dsn, server_name=config.server_name)
    log.info("Starting %s", mcp.name)
    mcp.run()


def run_connector_server(connector_id: str, dsn: str, server_name: str | None = None) -> None:
    """
    Convenience helper for servers dedicated to a single backend.

    Args:
        connector_id: Connector id (see :func:`db_mcp.connectors.list_available_connectors`).
        dsn: Connection string for the backend.
        server_name: Optional server name override.
    """
    registry = build_registry(only=[connector_id])
    run_server(ServerConfig(connector_id=connector_id, dsn=dsn, server_name=server_name), registry)
