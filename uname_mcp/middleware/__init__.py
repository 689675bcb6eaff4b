"""uname MCP middleware components."""

from uname_mcp.middleware.base import UnameMiddleware
from uname_mcp.middleware.errors import ErrorHandlingMiddleware
from uname_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "UnameMiddleware",
]
