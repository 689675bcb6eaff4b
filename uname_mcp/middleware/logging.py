"""Request logging middleware with integrated timing."""

import json
import logging
import time
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from uname_mcp.middleware.base import UnameMiddleware
from uname_mcp.models.command import ERROR_PREFIX

# Methods with a dedicated hook below
_DEDICATED_METHODS = ("tools/call", "tools/list")


class LoggingMiddleware(UnameMiddleware):
    """Log tool calls, tool listings and other MCP messages.

    Each request gets a ">>>" line on entry and a "<<<" line with its
    duration on completion, or a "!!!" line if it raised. Completions
    slower than slow_threshold_ms are logged at WARNING with "SLOW!".

    Example:
        >>> mcp.add_middleware(LoggingMiddleware(include_payloads=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_payloads: bool = False,
        max_payload_length: int = 1000,
        slow_threshold_ms: float = 1000.0,
    ) -> None:
        """Initialize logging middleware.

        Args:
            logger: Optional custom logger.
            include_payloads: Log tool results at DEBUG.
            max_payload_length: Maximum payload length before truncation.
            slow_threshold_ms: Threshold in ms for slow request warnings.
        """
        super().__init__(logger=logger)
        self.include_payloads = include_payloads
        self.max_payload_length = max_payload_length
        self.slow_threshold_ms = slow_threshold_ms

    def _truncate(self, data: Any) -> str:
        try:
            text = json.dumps(data, default=str)
        except (TypeError, ValueError):
            text = str(data)
        if len(text) > self.max_payload_length:
            return text[: self.max_payload_length] + "... [truncated]"
        return text

    def _format_args(self, args: dict[str, Any] | None) -> str:
        """Render tool arguments as a call signature, shortening long strings."""
        if not args:
            return "()"
        parts = []
        for key, value in args.items():
            if isinstance(value, str) and len(value) > 50:
                value = value[:50] + "..."
            parts.append(f"{key}={value!r}")
        return f"({', '.join(parts)})"

    def _format_duration(self, duration_ms: float) -> str:
        if duration_ms >= self.slow_threshold_ms:
            return f"{duration_ms:.1f}ms SLOW!"
        return f"{duration_ms:.1f}ms"

    async def _timed(
        self,
        label: str,
        context: MiddlewareContext,
        call_next: Any,
        quiet: bool = False,
    ) -> tuple[Any, float]:
        """Run the next handler, logging entry and failures.

        Args:
            quiet: Log the entry line at DEBUG instead of INFO.

        Returns:
            The handler result and its duration in milliseconds.
        """
        log_entry = self.logger.debug if quiet else self.logger.info
        log_entry(">>> %s", label)
        start = time.perf_counter()
        try:
            result = await call_next(context)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            self.logger.error(
                "!!! %s -> %s: %s [%s]",
                label,
                type(e).__name__,
                e,
                self._format_duration(duration_ms),
            )
            raise
        return result, (time.perf_counter() - start) * 1000

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log a tool call with its arguments, result summary and timing."""
        tool_name = getattr(context.message, "name", "unknown")
        args = getattr(context.message, "arguments", None)
        label = f"TOOL: {tool_name}{self._format_args(args)}"

        result, duration_ms = await self._timed(label, context, call_next)

        slow = duration_ms >= self.slow_threshold_ms
        self.logger.log(
            logging.WARNING if slow else logging.INFO,
            "<<< TOOL: %s -> %s [%s]",
            tool_name,
            self._summarize_result(result),
            self._format_duration(duration_ms),
        )
        if self.include_payloads and result is not None:
            self.logger.debug("    Result: %s", self._truncate(result))
        return result

    async def on_list_tools(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        result, duration_ms = await self._timed("LIST TOOLS", context, call_next)

        tool_count: int | str = "?"
        if hasattr(result, "tools"):
            tool_count = len(result.tools)
        elif isinstance(result, (list, tuple, dict)):
            tool_count = len(result)

        self.logger.info(
            "<<< LIST TOOLS -> %s tool(s) [%s]",
            tool_count,
            self._format_duration(duration_ms),
        )
        return result

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log messages without a dedicated hook at DEBUG."""
        method = context.method
        if method in _DEDICATED_METHODS:
            return await call_next(context)

        label = f"MCP: {method}"
        result, duration_ms = await self._timed(label, context, call_next, quiet=True)
        self.logger.debug("<<< %s [%s]", label, self._format_duration(duration_ms))
        return result

    def _summarize_result(self, result: Any) -> str:
        if result is None:
            return "null"
        if isinstance(result, str):
            if result.startswith(ERROR_PREFIX):
                return "error string"
            return f"{len(result)} chars"
        if isinstance(result, (list, tuple)):
            return f"{len(result)} items"
        # MCP tool results
        content = getattr(result, "content", None)
        if isinstance(content, (list, tuple)):
            return f"{len(content)} content item(s)"
        return type(result).__name__
