"""Tests for server lifespan and tool registration."""

import asyncio
from unittest.mock import MagicMock, patch

import pytest

from uname_mcp.services import ShutdownSignal, set_shutdown_signal


async def _wait_until(condition: MagicMock, timeout: float = 2.0) -> None:
    """Poll until a mock has been called."""
    deadline = asyncio.get_running_loop().time() + timeout
    while not condition.called:
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError("condition not met in time")
        await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_lifespan_yields_shutdown_signal() -> None:
    """Lifespan exposes the shared shutdown signal."""
    from uname_mcp.server import app_lifespan, create_server

    shutdown = ShutdownSignal()
    set_shutdown_signal(shutdown)
    server = create_server()

    async with app_lifespan(server) as context:
        assert context["shutdown"] is shutdown


@pytest.mark.asyncio
async def test_destroy_stops_process_via_host() -> None:
    """A destroy request is handed to the host stop hook."""
    from uname_mcp.server import app_lifespan, create_server

    server = create_server()
    stop = MagicMock()

    with patch("uname_mcp.server._request_process_stop", stop), \
         patch("uname_mcp.server.SHUTDOWN_GRACE_SECONDS", 0):
        async with app_lifespan(server) as context:
            context["shutdown"].destroy()
            await _wait_until(stop)

    stop.assert_called_once_with(0)


@pytest.mark.asyncio
async def test_lifespan_exit_without_shutdown() -> None:
    """Leaving the lifespan cancels the watcher without stopping."""
    from uname_mcp.server import app_lifespan, create_server

    server = create_server()
    stop = MagicMock()

    with patch("uname_mcp.server._request_process_stop", stop):
        async with app_lifespan(server):
            await asyncio.sleep(0)

    stop.assert_not_called()


def test_request_process_stop_raises_sigint() -> None:
    """The default stop hook interrupts the running transport."""
    import signal

    from uname_mcp.server import _request_process_stop

    with patch("uname_mcp.server.signal.raise_signal") as raise_signal:
        _request_process_stop(0)

    raise_signal.assert_called_once_with(signal.SIGINT)


@pytest.mark.asyncio
async def test_lifespan_exit_during_grace_period_still_stops() -> None:
    """A pending destroy request is honored when the lifespan ends early."""
    from uname_mcp.server import app_lifespan, create_server

    server = create_server()
    stop = MagicMock()

    with patch("uname_mcp.server._request_process_stop", stop), \
         patch("uname_mcp.server.SHUTDOWN_GRACE_SECONDS", 60):
        async with app_lifespan(server) as context:
            context["shutdown"].destroy()
            await asyncio.sleep(0)

    stop.assert_called_once_with(0)
