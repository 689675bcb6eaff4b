"""Data models for uname MCP."""

from uname_mcp.models.command import (
    CommandFailure,
    CommandResult,
    ProcessOutput,
    QueryOutcome,
    render_outcome,
)

__all__ = [
    "CommandFailure",
    "CommandResult",
    "ProcessOutput",
    "QueryOutcome",
    "render_outcome",
]
