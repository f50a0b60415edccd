"""MCP tools for querying and inspecting the connected database."""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import pandas as pd
from mcp.server.fastmcp import FastMCP

from db_mcp.core.errors import DbMcpError
from db_mcp.core.interface import Connector, QueryResult

log = logging.getLogger(__name__)


def result_to_payload(result: QueryResult) -> Dict[str, Any]:
    """
    Convert a QueryResult into a JSON-ready dict, serializing values through pandas.

    Rows are emitted as value lists in column order, so duplicated column names
    (e.g. two ``?column?`` expressions) keep all their values. The object dtype
    stops pandas from widening nullable integer columns to float.
    """
    df = pd.DataFrame(result.rows, columns=result.columns, dtype=object)
    return {
        "command": result.command,
        "columns": result.columns,
        "rows": json.loads(df.to_json(orient="values", date_format="iso", default_handler=str)),
        "row_count": len(df),
    }


def _error(message: str) -> str:
    return json.dumps({"error": message})


def make_execute_sql_tool(connector: Connector) -> Callable[[str], Awaitable[str]]:
    async def execute_sql(sql: str) -> str:
        try:
            result = await connector.execute_query(sql)
            payload = result_to_payload(result)
        except DbMcpError as e:
            log.warning(f"execute_sql rejected: {e}")
            return _error(str(e))
        except Exception as e:
            log.error(f"execute_sql failed: {e}", exc_info=True)
            return _error(f"Query failed: {e}")
        return json.dumps(payload, indent=2)

    execute_sql.__name__ = "execute_sql"
    execute_sql.__doc__ = (
        f"Execute a read-only SELECT statement against the {connector.name} database.\n\n"
        "Args:\n"
        "    sql: SQL text starting with SELECT\n\n"
        "Returns:\n"
        "    JSON string with command, columns, rows (value lists in column order) and row_count"
    )
    return execute_sql


def make_list_indexes_tool(connector: Connector) -> Callable[..., Awaitable[str]]:
    async def list_table_indexes(table_name: str, schema_name: Optional[str] = None) -> str:
        try:
            indexes = await connector.get_table_indexes(table_name, schema_name)
        except Exception as e:
            log.error(f"list_table_indexes failed: {e}", exc_info=True)
            return _error(f"Failed to list indexes: {e}")
        return json.dumps([index.to_dict() for index in indexes], indent=2)

    list_table_indexes.__name__ = "list_table_indexes"
    list_table_indexes.__doc__ = "List indexes of a table with their columns and unique/primary flags."
    return list_table_indexes


def make_describe_table_tool(connector: Connector) -> Callable[..., Awaitable[str]]:
    async def describe_table(table_name: str, schema_name: Optional[str] = None) -> str:
        try:
            if not await connector.table_exists(table_name, schema_name):
                return _error(f"Table {table_name} not found")
            columns = await connector.get_table_schema(table_name, schema_name)
            indexes = await connector.get_table_indexes(table_name, schema_name)
        except Exception as e:
            log.error(f"describe_table failed: {e}", exc_info=True)
            return _error(f"Failed to describe table: {e}")
        payload = {
            "table": table_name,
            "schema": schema_name,
            "columns": [column.to_dict() for column in columns],
            "indexes": [index.to_dict() for index in indexes],
        }
        return json.dumps(payload, indent=2, default=str)

    describe_table.__name__ = "describe_table"
    describe_table.__doc__ = (
        "Get columns and indexes of a table.\n\n"
        "Args:\n"
        "    table_name: Table name without schema\n"
        "    schema_name: Schema name (defaults to the backend's default schema)"
    )
    return describe_table


def register_tools(mcp: FastMCP, connector: Connector) -> None:
    """Register query and inspection tools for *connector* with the MCP server."""
    tools = [
        make_execute_sql_tool(connector),
        make_list_indexes_tool(connector),
        make_describe_table_tool(connector),
    ]
    for tool_func in tools:
        mcp.tool()(tool_func)
        log.debug("  - Registered tool: %s", tool_func.__name__)
    log.info("Registered tools: %s", ", ".join(tool.__name__ for tool in tools))
