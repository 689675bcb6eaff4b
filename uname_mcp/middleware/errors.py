"""Error logging middleware."""

import logging
import traceback
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from uname_mcp.middleware.base import UnameMiddleware
from uname_mcp.services.kernel import TRANSPORT_ERRORS


class ErrorHandlingMiddleware(UnameMiddleware):
    """Log every exception that escapes a request handler, then re-raise.

    Domain failures of get_uname never reach this layer; they are returned
    as "Error: ..." strings. What lands here is a server bug or a client
    that dropped its session. The latter is logged at DEBUG only.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Append the formatted traceback to error logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        try:
            return await call_next(context)
        except TRANSPORT_ERRORS as e:
            self.logger.debug(
                "Client session closed during %s: %s",
                context.method,
                type(e).__name__,
            )
            raise
        except Exception as e:
            detail = f"\n{traceback.format_exc()}" if self.include_traceback else ""
            self.logger.error(
                "Error in %s: %s: %s%s",
                context.method,
                type(e).__name__,
                e,
                detail,
            )
            raise
