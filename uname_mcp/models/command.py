"""Command execution data models."""

from dataclasses import dataclass

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class ProcessOutput:
    """Raw output of a local child process."""

    first_line: str | None
    exit_code: int


@dataclass(frozen=True)
class CommandResult:
    """Successful kernel release query."""

    value: str
    exit_code: int


@dataclass(frozen=True)
class CommandFailure:
    """Kernel release query that raised before producing a result."""

    reason: str
    command: str


QueryOutcome = CommandResult | CommandFailure


def render_outcome(outcome: QueryOutcome) -> str:
    """Serialize an outcome to the plain string returned to callers.

    Args:
        outcome: Result or failure from a query

    Returns:
        The result value, or the failure reason prefixed with "Error: "
    """
    if isinstance(outcome, CommandFailure):
        return f"{ERROR_PREFIX}{outcome.reason}"
    return outcome.value
