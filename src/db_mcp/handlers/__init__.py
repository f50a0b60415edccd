"""
MCP request handlers.

Resources and tools that translate MCP requests into connector calls.
"""

from db_mcp.handlers.resources import register_resources
from db_mcp.handlers.tools import register_tools

__all__ = ["register_resources", "register_tools"]
