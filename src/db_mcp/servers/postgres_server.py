#!/usr/bin/env python3
"""PostgreSQL MCP server entry point. Reads the DSN from ``DB_MCP_DSN``."""

from __future__ import annotations

import os
import sys

from db_mcp.config import ENV_DSN
from db_mcp.servers.base_server import configure_logging, run_connector_server


def main() -> None:
    configure_logging()
    dsn = os.environ.get(ENV_DSN)
    if not dsn:
        sys.stderr.write(f"{ENV_DSN} must be set to a postgres:// connection string\n")
        raise SystemExit(2)
    run_connector_server("postgres", dsn)


if __name__ == "__main__":
    main()
