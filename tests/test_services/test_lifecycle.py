"""Tests for ShutdownSignal."""

import asyncio
from unittest.mock import patch

import pytest

from uname_mcp.services import ShutdownSignal


def test_signal_starts_clear() -> None:
    """A new signal has no pending shutdown."""
    shutdown = ShutdownSignal()

    assert not shutdown.is_set()
    assert shutdown.exit_code is None


def test_destroy_requests_successful_exit() -> None:
    """destroy() sets the signal with exit status 0."""
    shutdown = ShutdownSignal()

    with patch("uname_mcp.services.lifecycle.logger") as mock_logger:
        shutdown.destroy()

    assert shutdown.is_set()
    assert shutdown.exit_code == 0
    mock_logger.info.assert_called_once_with("destroy")


def test_exit_is_alias_for_destroy() -> None:
    """exit() behaves like destroy()."""
    shutdown = ShutdownSignal()

    with patch.object(shutdown, "destroy", wraps=shutdown.destroy) as destroy:
        shutdown.exit()

    destroy.assert_called_once_with()
    assert shutdown.is_set()


@pytest.mark.asyncio
async def test_wait_returns_exit_code() -> None:
    """wait() resolves once shutdown is requested."""
    shutdown = ShutdownSignal()

    waiter = asyncio.create_task(shutdown.wait())
    await asyncio.sleep(0)
    assert not waiter.done()

    shutdown.destroy()

    assert await asyncio.wait_for(waiter, timeout=1) == 0
