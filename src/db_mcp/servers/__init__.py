"""
MCP server implementations.

Provides the base server factory and per-backend entry points.
"""

from db_mcp.servers.base_server import create_mcp_server, run_connector_server, run_server

__all__ = ["create_mcp_server", "run_connector_server", "run_server"]
