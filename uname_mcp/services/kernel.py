"""Kernel release query via the local `uname` utility."""

import logging
from collections.abc import Awaitable, Callable, Sequence

import anyio

from uname_mcp.models import (
    CommandFailure,
    CommandResult,
    ProcessOutput,
    QueryOutcome,
    render_outcome,
)
from uname_mcp.services.executors import format_command, run_first_line

UNAME_COMMAND: tuple[str, ...] = ("uname", "-r")
KERNEL_RELEASE_NOT_FOUND = "Kernel release version not found"

# Errors raised when the caller's session goes away mid-call
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    anyio.ClosedResourceError,
    anyio.BrokenResourceError,
)

Runner = Callable[[Sequence[str], float | None], Awaitable[ProcessOutput]]


def describe_error(error: BaseException) -> str:
    """Return the human readable message of an exception.

    OSError carries the system message separately from the errno and
    filename, so prefer that when present.
    """
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    message = str(error)
    return message or type(error).__name__


class KernelVersionQuery:
    """Reports the kernel release by running `uname -r`.

    Every call spawns a fresh child process; nothing is cached or shared
    between calls.

    Example:
        >>> query = KernelVersionQuery(timeout=5)
        >>> await query.get_uname()
        '6.1.21-android13'
    """

    def __init__(
        self,
        timeout: float | None = None,
        runner: Runner | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the query.

        Args:
            timeout: Seconds to allow the command (None waits forever).
            runner: Process runner, defaults to run_first_line.
            logger: Optional custom logger.
        """
        self.timeout = timeout
        self._runner = runner or run_first_line
        self.logger = logger or logging.getLogger(__name__)

    @property
    def command(self) -> str:
        """Command line as it appears in logs."""
        return format_command(UNAME_COMMAND)

    async def query(self) -> QueryOutcome:
        """Run the command and return a typed outcome.

        Returns:
            CommandResult on success (including the fallback value when the
            command printed nothing), CommandFailure if anything raised.
        """
        try:
            output = await self._runner(UNAME_COMMAND, self.timeout)
            self.logger.info(
                "%s has exited with %d", self.command, output.exit_code
            )
        except TRANSPORT_ERRORS:
            raise
        except Exception as e:
            self.logger.error("Failed to execute command '%s'", self.command)
            return CommandFailure(reason=describe_error(e), command=self.command)

        if output.first_line:
            return CommandResult(value=output.first_line, exit_code=output.exit_code)
        return CommandResult(
            value=KERNEL_RELEASE_NOT_FOUND,
            exit_code=output.exit_code,
        )

    async def get_uname(self) -> str:
        """Return the kernel release, a fallback message, or an error string."""
        return render_outcome(await self.query())
