"""Shared fixtures for uname MCP tests."""

from collections.abc import Iterator

import pytest

from uname_mcp.services import reset_state


@pytest.fixture(autouse=True)
def fresh_state() -> Iterator[None]:
    """Give every test its own settings and shutdown signal."""
    reset_state()
    yield
    reset_state()
