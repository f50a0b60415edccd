"""
Core functionality for DB-MCP.

Provides the connector interface, the connector registry and the error types.
"""

from db_mcp.core.errors import (
    ConnectionFailureError,
    ConnectorNotFoundError,
    DbMcpError,
    InvalidDSNError,
    NotConnectedError,
    QueryRejectedError,
)
from db_mcp.core.interface import (
    Connector,
    DSNParser,
    PoolConfig,
    QueryResult,
    QueryValidation,
    TableColumn,
    TableIndex,
    validate_select_query,
)
from db_mcp.core.registry import ConnectorRegistry

__all__ = [
    "ConnectionFailureError",
    "Connector",
    "ConnectorNotFoundError",
    "ConnectorRegistry",
    "DSNParser",
    "DbMcpError",
    "InvalidDSNError",
    "NotConnectedError",
    "PoolConfig",
    "QueryRejectedError",
    "QueryResult",
    "QueryValidation",
    "TableColumn",
    "TableIndex",
    "validate_select_query",
]
