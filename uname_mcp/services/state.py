"""Global state management for uname MCP."""

from uname_mcp.config import Settings
from uname_mcp.services.lifecycle import ShutdownSignal

# Global state (initialized on first access)
_settings: Settings | None = None
_shutdown: ShutdownSignal | None = None


def get_settings() -> Settings:
    """Get or create settings."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def get_shutdown_signal() -> ShutdownSignal:
    """Get or create the shutdown signal."""
    global _shutdown
    if _shutdown is None:
        _shutdown = ShutdownSignal()
    return _shutdown


def reset_state() -> None:
    """Reset global state for testing.

    This function clears the singleton instances, allowing tests
    to start with fresh state. Should only be used in test fixtures.
    """
    global _settings, _shutdown
    _settings = None
    _shutdown = None


def set_settings(settings: Settings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def set_shutdown_signal(signal: ShutdownSignal) -> None:
    """Set the global shutdown signal.

    Args:
        signal: ShutdownSignal instance to use globally.
    """
    global _shutdown
    _shutdown = signal
