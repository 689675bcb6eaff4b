"""Tests for the MCP tool functions."""

from unittest.mock import AsyncMock, patch

import pytest

from uname_mcp.config import Settings
from uname_mcp.models import ProcessOutput
from uname_mcp.services import ShutdownSignal, set_settings, set_shutdown_signal
from uname_mcp.tools import destroy, exit_service, get_uname


@pytest.mark.asyncio
async def test_get_uname_uses_configured_timeout() -> None:
    """get_uname runs uname -r with the timeout from settings."""
    set_settings(Settings(command_timeout=7))
    runner = AsyncMock(return_value=ProcessOutput(first_line="5.10.0", exit_code=0))

    with patch("uname_mcp.services.kernel.run_first_line", runner):
        result = await get_uname()

    assert result == "5.10.0"
    runner.assert_awaited_once_with(("uname", "-r"), 7.0)


@pytest.mark.asyncio
async def test_get_uname_without_timeout() -> None:
    """A zero timeout setting waits without a limit."""
    set_settings(Settings(command_timeout=0))
    runner = AsyncMock(return_value=ProcessOutput(first_line=None, exit_code=0))

    with patch("uname_mcp.services.kernel.run_first_line", runner):
        result = await get_uname()

    assert result == "Kernel release version not found"
    runner.assert_awaited_once_with(("uname", "-r"), None)


@pytest.mark.asyncio
async def test_get_uname_returns_error_string() -> None:
    """Failures are returned, not raised."""
    set_settings(Settings())
    runner = AsyncMock(side_effect=FileNotFoundError(2, "No such file or directory"))

    with patch("uname_mcp.services.kernel.run_first_line", runner):
        result = await get_uname()

    assert result == "Error: No such file or directory"


@pytest.mark.asyncio
async def test_destroy_sets_shutdown_signal() -> None:
    """destroy requests shutdown without exiting the process."""
    shutdown = ShutdownSignal()
    set_shutdown_signal(shutdown)

    result = await destroy()

    assert result == "Shutdown requested"
    assert shutdown.is_set()
    assert shutdown.exit_code == 0


@pytest.mark.asyncio
async def test_exit_service_calls_exit() -> None:
    """The exit tool goes through ShutdownSignal.exit()."""
    shutdown = ShutdownSignal()
    set_shutdown_signal(shutdown)

    with patch.object(shutdown, "exit", wraps=shutdown.exit) as exit_hook:
        result = await exit_service()

    assert result == "Shutdown requested"
    exit_hook.assert_called_once_with()
    assert shutdown.is_set()
