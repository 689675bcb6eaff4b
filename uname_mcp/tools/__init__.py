"""MCP tools for uname MCP."""

from uname_mcp.tools.lifecycle import destroy, exit_service
from uname_mcp.tools.uname import get_uname

__all__ = ["destroy", "exit_service", "get_uname"]
