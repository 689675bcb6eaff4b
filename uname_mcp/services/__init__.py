"""Services for uname MCP."""

from uname_mcp.services.executors import (
    CommandTimeoutError,
    format_command,
    run_first_line,
)
from uname_mcp.services.kernel import (
    KERNEL_RELEASE_NOT_FOUND,
    UNAME_COMMAND,
    KernelVersionQuery,
    describe_error,
)
from uname_mcp.services.lifecycle import ShutdownSignal
from uname_mcp.services.state import (
    get_settings,
    get_shutdown_signal,
    reset_state,
    set_settings,
    set_shutdown_signal,
)

__all__ = [
    "CommandTimeoutError",
    "KERNEL_RELEASE_NOT_FOUND",
    "KernelVersionQuery",
    "ShutdownSignal",
    "UNAME_COMMAND",
    "describe_error",
    "format_command",
    "get_settings",
    "get_shutdown_signal",
    "reset_state",
    "run_first_line",
    "set_settings",
    "set_shutdown_signal",
]
