"""Entry point for uname_mcp server."""

import logging

from uname_mcp.server import mcp  # This import also configures logging
from uname_mcp.services import get_settings, get_shutdown_signal

logger = logging.getLogger(__name__)


def run_server() -> None:
    """Run the MCP server with configured transport."""
    settings = get_settings()
    shutdown = get_shutdown_signal()

    try:
        if settings.transport == "stdio":
            logger.info("Starting uname MCP server (transport=stdio)")
            mcp.run(transport="stdio")
        else:
            logger.info(
                "Starting uname MCP server (transport=http, host=%s, port=%d)",
                settings.http_host,
                settings.http_port,
            )
            mcp.run(
                transport="http",
                host=settings.http_host,
                port=settings.http_port,
            )
    except KeyboardInterrupt:
        # Interrupts we raised ourselves for destroy/exit are a clean stop
        if not shutdown.is_set():
            raise

    if shutdown.is_set():
        logger.info("Exited on request with status %d", shutdown.exit_code or 0)


if __name__ == "__main__":
    run_server()
