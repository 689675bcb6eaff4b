"""uname MCP FastMCP server.

This is a thin wrapper that wires the MCP server to the tools.
All business logic is delegated to the tools/ and services/ modules.
"""

import asyncio
import contextlib
import logging
import signal
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from uname_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from uname_mcp.services import ShutdownSignal, get_settings, get_shutdown_signal
from uname_mcp.tools import destroy, exit_service, get_uname
from uname_mcp.utils.console import MCPRequestFormatter

# Time allowed for the destroy/exit response to reach the client
SHUTDOWN_GRACE_SECONDS = 0.5


def _configure_logging() -> None:
    """Configure colorful logging for the uname_mcp package.

    This is called at module load time to ensure logging is configured
    before any loggers are used, regardless of how the server is started.
    """
    settings = get_settings()
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("uname_mcp")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(MCPRequestFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for noisy_logger in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "httpx",
        "httpcore",
        "fastmcp",
        "starlette",
        "anyio",
    ]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


# Configure logging at module load time
_configure_logging()

logger = logging.getLogger(__name__)


def _request_process_stop(exit_code: int) -> None:
    """Ask the running transport to stop.

    SIGINT makes uvicorn shut down gracefully and interrupts the stdio
    loop; run_server() turns that into a normal exit.
    """
    logger.info("Stopping server process (exit status %d)", exit_code)
    signal.raise_signal(signal.SIGINT)


async def _watch_shutdown(shutdown: ShutdownSignal) -> None:
    """Wait for a destroy/exit request and stop the process."""
    exit_code = await shutdown.wait()
    logger.info("Shutdown requested via lifecycle tool")
    await asyncio.sleep(SHUTDOWN_GRACE_SECONDS)
    _request_process_stop(exit_code)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Start the shutdown watcher for the lifetime of the server.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with the shutdown signal
    """
    logger.info("uname MCP server starting up")

    shutdown = get_shutdown_signal()
    watcher = asyncio.create_task(_watch_shutdown(shutdown))

    try:
        yield {"shutdown": shutdown}
    finally:
        logger.info("uname MCP server shutting down")
        pending_stop = shutdown.is_set() and not watcher.done()
        watcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watcher
        # A destroy/exit request still inside its grace period must not be lost
        if pending_stop:
            _request_process_stop(shutdown.exit_code or 0)
        logger.info("uname MCP server shutdown complete")


def configure_middleware(server: FastMCP) -> None:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging

    Args:
        server: The FastMCP server to configure.
    """
    settings = get_settings()

    # First added = innermost
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=settings.slow_threshold_ms,
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware and tools.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP(
        "uname_mcp",
        lifespan=app_lifespan,
    )

    configure_middleware(server)

    # Tools return plain strings in content, no structured output
    server.tool(name="get_uname", output_schema=None)(get_uname)
    server.tool(name="destroy", output_schema=None)(destroy)
    server.tool(name="exit", output_schema=None)(exit_service)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
