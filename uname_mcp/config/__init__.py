"""Configuration module for uname MCP."""

from uname_mcp.config.settings import Settings

__all__ = ["Settings"]
