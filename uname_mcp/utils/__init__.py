"""Utilities for uname MCP."""

from uname_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter

__all__ = ["ColorfulFormatter", "MCPRequestFormatter"]
