"""
Connector interface for DB-MCP.

Defines the protocols every database backend implements, the row DTOs the
introspection calls return, and the SELECT-only query gate shared by all
backends.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple, runtime_checkable

_PASSWORD_PATTERN = re.compile(r"(://[^:/@\s]*:)([^@\s]*)(@)")

REJECTED_QUERY_MESSAGE = "Only SELECT queries are allowed for security reasons."
EMPTY_QUERY_MESSAGE = "Query cannot be empty."


@dataclass(slots=True)
class PoolConfig:
    """
    Structured connection settings decomposed from a DSN.

    Attributes:
        host: Database host name
        port: TCP port
        database: Database name
        user: Login role
        password: Login password
        ssl: Whether TLS is requested
        sslmode: Raw TLS-mode value from the DSN, if any
        options: Backend-specific extras (e.g. application_name)
    """
    host: str
    port: int
    database: str
    user: Optional[str] = None
    password: Optional[str] = None
    ssl: bool = False
    sslmode: Optional[str] = None
    options: Dict[str, str] = field(default_factory=dict)

    def redacted(self) -> str:
        """Password-free description for logs and error messages."""
        user = f"{self.user}@" if self.user else ""
        return f"{user}{self.host}:{self.port}/{self.database}"


@dataclass(slots=True)
class TableColumn:
    column_name: str
    data_type: str
    is_nullable: str
    column_default: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class TableIndex:
    index_name: str
    column_names: List[str]
    is_unique: bool
    is_primary: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class QueryResult:
    """
    Result set of an executed query, as the driver reported it.

    Attributes:
        command: Status message of the statement (e.g. ``SELECT 3``)
        row_count: Number of rows the driver reported
        columns: Column names in result order
        rows: One tuple per row, values in column order
    """
    command: Optional[str]
    row_count: int
    columns: List[str]
    rows: List[Tuple[Any, ...]]


@dataclass(slots=True)
class QueryValidation:
    is_valid: bool
    message: Optional[str] = None


@runtime_checkable
class DSNParser(Protocol):
    """Validates and decomposes connection strings for one backend."""

    def parse(self, dsn: str) -> PoolConfig:
        """
        Decompose *dsn* into a PoolConfig.

        Raises:
            InvalidDSNError: If :meth:`is_valid_dsn` is False for *dsn*
        """
        ...

    def is_valid_dsn(self, dsn: str) -> bool:
        """Return True if *dsn* parses and uses a scheme this backend accepts."""
        ...

    def get_sample_dsn(self) -> str:
        """Return an illustrative DSN for documentation and tests."""
        ...


@runtime_checkable
class Connector(Protocol):
    """
    Protocol for database connectors.

    A connector owns one connection pool. It is Disconnected until
    :meth:`connect` succeeds, and every introspection or query method raises
    NotConnectedError while Disconnected.
    """

    id: str
    name: str
    dsn_parser: DSNParser

    @property
    def is_connected(self) -> bool:
        ...

    async def connect(self, dsn: str) -> None:
        ...

    async def disconnect(self) -> None:
        ...

    async def get_schemas(self) -> List[str]:
        ...

    async def get_tables(self, schema: Optional[str] = None) -> List[str]:
        ...

    async def table_exists(self, table_name: str, schema: Optional[str] = None) -> bool:
        ...

    async def get_table_schema(self, table_name: str, schema: Optional[str] = None) -> List[TableColumn]:
        ...

    async def get_table_indexes(self, table_name: str, schema: Optional[str] = None) -> List[TableIndex]:
        ...

    async def execute_query(self, query: str) -> QueryResult:
        ...

    def validate_query(self, query: str) -> QueryValidation:
        ...


def validate_select_query(query: str) -> QueryValidation:
    """
    Accept only statements whose trimmed, lower-cased text starts with ``select``.

    This is a prefix check, not a parser: ``WITH`` queries are rejected and
    statement chaining after a leading SELECT is not detected.
    """
    normalized = (query or "").strip().lower()
    if not normalized:
        return QueryValidation(is_valid=False, message=EMPTY_QUERY_MESSAGE)
    if not normalized.startswith("select"):
        return QueryValidation(is_valid=False, message=REJECTED_QUERY_MESSAGE)
    return QueryValidation(is_valid=True)


def mask_dsn(dsn: Any) -> str:
    """Replace the password of a URI-style DSN with ``****``."""
    return _PASSWORD_PATTERN.sub(r"\1****\3", str(dsn))


__all__ = [
    "Connector",
    "DSNParser",
    "PoolConfig",
    "QueryResult",
    "QueryValidation",
    "TableColumn",
    "TableIndex",
    "mask_dsn",
    "validate_select_query",
]
