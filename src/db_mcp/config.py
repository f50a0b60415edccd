"""
Server configuration for DB-MCP.

Values come from command-line flags first, then ``DB_MCP_*`` environment
variables, then defaults.
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CONNECTOR = "postgres"
DEFAULT_LOG_LEVEL = "INFO"

ENV_DSN = "DB_MCP_DSN"
ENV_CONNECTOR = "DB_MCP_CONNECTOR"
ENV_LOG_LEVEL = "DB_MCP_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """
    Resolved settings for one server process.

    Attributes:
        connector_id: Id of the registered connector to serve
        dsn: Connection string handed to the connector
        server_name: Name presented to MCP clients; None derives it from the connector
        log_level: Logging level name
    """
    connector_id: str = DEFAULT_CONNECTOR
    dsn: Optional[str] = None
    server_name: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

    @classmethod
    def from_args(cls, args: argparse.Namespace, environ: Mapping[str, str] | None = None) -> "ServerConfig":
        env = os.environ if environ is None else environ
        return cls(
            connector_id=args.connector or env.get(ENV_CONNECTOR) or DEFAULT_CONNECTOR,
            dsn=args.dsn or env.get(ENV_DSN),
            server_name=args.name or None,
            log_level=args.log_level or env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
        )

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)
