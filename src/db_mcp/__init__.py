"""
DB-MCP: Database Model Context Protocol Server

Exposes relational-database introspection and read-only SELECT queries to MCP
clients through pluggable per-backend connectors.
"""

from db_mcp.connectors import PostgresConnector, build_registry
from db_mcp.core.registry import ConnectorRegistry

__version__ = "0.1.0"

__all__ = ["ConnectorRegistry", "PostgresConnector", "build_registry", "__version__"]
