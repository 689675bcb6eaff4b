"""Kernel release tool."""

from uname_mcp.services import KernelVersionQuery, get_settings


async def get_uname() -> str:
    """Report the kernel release of the machine running this server.

    Runs `uname -r` and returns its first output line. If the command
    prints nothing the result is "Kernel release version not found"; if it
    cannot be run the result is "Error: <reason>".

    Returns:
        Kernel release string, fallback message, or error string.
    """
    settings = get_settings()
    query = KernelVersionQuery(timeout=settings.timeout_seconds)
    return await query.get_uname()
