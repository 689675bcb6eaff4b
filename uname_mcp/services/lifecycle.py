"""Service lifecycle hooks.

The service never terminates the interpreter itself. Shutdown requests are
recorded on a ShutdownSignal which the server lifespan observes.
"""

import asyncio
import logging

logger = logging.getLogger(__name__)


class ShutdownSignal:
    """Explicit shutdown request channel between tools and the host."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.exit_code: int | None = None

    def destroy(self) -> None:
        """Request shutdown with a successful exit status."""
        logger.info("destroy")
        self.exit_code = 0
        self._event.set()

    def exit(self) -> None:
        """Alias for destroy()."""
        self.destroy()

    def is_set(self) -> bool:
        """Return True once shutdown has been requested."""
        return self._event.is_set()

    async def wait(self) -> int:
        """Block until shutdown is requested.

        Returns:
            The requested exit status.
        """
        await self._event.wait()
        return self.exit_code if self.exit_code is not None else 0
