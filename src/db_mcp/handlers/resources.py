"""
MCP resources exposing database catalog metadata.

URIs:
- ``db://schemas`` - all non-system schemas
- ``db://schemas/{schema_name}/tables`` - tables in a schema
- ``db://schemas/{schema_name}/schema/{table_name}`` - column structure of a table
"""

from __future__ import annotations

import json
import logging
from typing import Awaitable, Callable

from mcp.server.fastmcp import FastMCP

from db_mcp.core.interface import Connector

log = logging.getLogger(__name__)

SCHEMAS_URI = "db://schemas"
TABLES_URI = "db://schemas/{schema_name}/tables"
TABLE_STRUCTURE_URI = "db://schemas/{schema_name}/schema/{table_name}"


def make_schemas_resource(connector: Connector) -> Callable[[], Awaitable[str]]:
    async def schemas() -> str:
        names = await connector.get_schemas()
        return json.dumps({"schemas": names}, indent=2)

    schemas.__name__ = "schemas"
    schemas.__doc__ = f"List all schemas in the connected {connector.name} database."
    return schemas


def make_tables_resource(connector: Connector) -> Callable[[str], Awaitable[str]]:
    async def tables_in_schema(schema_name: str) -> str:
        names = await connector.get_tables(schema_name)
        return json.dumps({"schema": schema_name, "tables": names}, indent=2)

    tables_in_schema.__name__ = "tables_in_schema"
    tables_in_schema.__doc__ = "List the tables of a schema."
    return tables_in_schema


def make_table_structure_resource(connector: Connector) -> Callable[[str, str], Awaitable[str]]:
    async def table_structure_in_schema(schema_name: str, table_name: str) -> str:
        if not await connector.table_exists(table_name, schema_name):
            raise ValueError(f"Table '{table_name}' does not exist in schema '{schema_name}'")
        columns = await connector.get_table_schema(table_name, schema_name)
        payload = {
            "schema": schema_name,
            "table": table_name,
            "columns": [column.to_dict() for column in columns],
        }
        return json.dumps(payload, indent=2, default=str)

    table_structure_in_schema.__name__ = "table_structure_in_schema"
    table_structure_in_schema.__doc__ = "Column structure (type, nullability, default) of a table."
    return table_structure_in_schema


def register_resources(mcp: FastMCP, connector: Connector) -> None:
    """Register all catalog resources for *connector* with the MCP server."""
    mcp.resource(SCHEMAS_URI, name="schemas")(make_schemas_resource(connector))
    mcp.resource(TABLES_URI, name="tables_in_schema")(make_tables_resource(connector))
    mcp.resource(TABLE_STRUCTURE_URI, name="table_structure_in_schema")(
        make_table_structure_resource(connector)
    )
    log.info("Registered resources: %s, %s, %s", SCHEMAS_URI, TABLES_URI, TABLE_STRUCTURE_URI)
