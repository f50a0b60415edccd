"""
Exception hierarchy for DB-MCP.

Driver errors (``psycopg.Error``) are not wrapped here; they reach the caller
unmodified.
"""

from __future__ import annotations


class DbMcpError(Exception):
    """Base class for all DB-MCP errors."""


class InvalidDSNError(DbMcpError, ValueError):
    """Connection string is malformed or uses a scheme the backend does not accept."""


class ConnectionFailureError(DbMcpError, ConnectionError):
    """Pool creation or the liveness check failed."""


class NotConnectedError(DbMcpError, RuntimeError):
    """Operation attempted before ``connect`` or after ``disconnect``."""

    def __init__(self, message: str = "Not connected to database"):
        super().__init__(message)


class QueryRejectedError(DbMcpError, ValueError):
    """Query did not pass the SELECT-only gate."""


class ConnectorNotFoundError(DbMcpError, KeyError):
    """No connector registered under the requested id."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "ConnectionFailureError",
    "ConnectorNotFoundError",
    "DbMcpError",
    "InvalidDSNError",
    "NotConnectedError",
    "QueryRejectedError",
]
