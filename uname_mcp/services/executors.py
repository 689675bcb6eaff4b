"""Local process execution primitives."""

import asyncio
import locale
import logging
import re
import shlex
from collections.abc import Sequence

from uname_mcp.models import ProcessOutput

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536

_LINE_ENDING = re.compile(rb"[\r\n]")


class CommandTimeoutError(Exception):
    """Child process did not finish within the allowed time."""

    def __init__(self, command: str, timeout: float):
        """Initialize timeout error.

        Args:
            command: Command line that timed out
            timeout: Limit in seconds that was exceeded
        """
        self.command = command
        self.timeout = timeout
        super().__init__(f"Command '{command}' timed out after {timeout:g}s")


def format_command(argv: Sequence[str]) -> str:
    """Render an argument vector as a readable command line."""
    return shlex.join(argv)


async def _read_first_line(stream: asyncio.StreamReader) -> bytes | None:
    """Read up to the first line terminator, whatever the line length.

    A line ends at "\\n", "\\r" or "\\r\\n". Returns None at end of stream.
    """
    buffer = b""
    while True:
        chunk = await stream.read(CHUNK_SIZE)
        if not chunk:
            return buffer or None
        buffer += chunk
        match = _LINE_ENDING.search(buffer)
        if match:
            return buffer[: match.start()]


def _decode_line(raw: bytes | None, encoding: str) -> str | None:
    """Decode a raw line, substituting U+FFFD for undecodable bytes."""
    if raw is None:
        return None
    return raw.decode(encoding, errors="replace")


async def _collect(
    process: asyncio.subprocess.Process,
    encoding: str,
) -> ProcessOutput:
    """Read the first stdout line, drain the rest, and wait for exit."""
    if process.stdout is None:
        raise OSError(f"No stdout pipe for process pid={process.pid}")

    first_line = _decode_line(await _read_first_line(process.stdout), encoding)

    # Drain so a chatty child cannot block on a full pipe
    while await process.stdout.read(CHUNK_SIZE):
        pass

    exit_code = await process.wait()
    return ProcessOutput(first_line=first_line, exit_code=exit_code)


async def _reap(process: asyncio.subprocess.Process) -> None:
    """Kill the child if it is still running and wait for it."""
    if process.returncode is None:
        logger.debug("Killing unfinished process pid=%d", process.pid)
        try:
            process.kill()
        except ProcessLookupError:
            pass
        await process.wait()


async def run_first_line(
    argv: Sequence[str],
    timeout: float | None = None,
) -> ProcessOutput:
    """Run a command and capture the first line of its standard output.

    The command is started directly from its argument vector, never through
    a shell. Output is decoded with the platform default encoding.

    Args:
        argv: Program and arguments
        timeout: Seconds to allow for reading and waiting (None for no limit)

    Returns:
        ProcessOutput with the first line (None if there was no output)
        and the exit code.

    Raises:
        OSError: If the process cannot be started or read from.
        CommandTimeoutError: If the timeout expires.
    """
    encoding = locale.getpreferredencoding(False)
    process = await asyncio.create_subprocess_exec(
        *argv,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.DEVNULL,
    )
    logger.debug("Started %s (pid=%d)", format_command(argv), process.pid)

    try:
        if timeout is None:
            return await _collect(process, encoding)
        try:
            return await asyncio.wait_for(_collect(process, encoding), timeout)
        except asyncio.TimeoutError as e:
            raise CommandTimeoutError(format_command(argv), timeout) from e
    finally:
        await _reap(process)
