"""Lifecycle tools for stopping the service."""

from uname_mcp.services import get_shutdown_signal

SHUTDOWN_REQUESTED = "Shutdown requested"


async def destroy() -> str:
    """Stop the service.

    The server finishes the current response and then shuts down with a
    successful exit status.
    """
    get_shutdown_signal().destroy()
    return SHUTDOWN_REQUESTED


async def exit_service() -> str:
    """Stop the service (alias for destroy)."""
    get_shutdown_signal().exit()
    return SHUTDOWN_REQUESTED
