"""Command runner abstraction for compose invocations.

This package provides a Protocol for command runners and a subprocess implementation.
"""

from .protocol import CommandRunner
from .subprocess_runner import COMMAND_NOT_FOUND_EXIT_CODE, SubprocessRunner


def get_default_runner(timeout: float | None = None) -> CommandRunner:
    """Get the default command runner (subprocess)."""
    return SubprocessRunner(timeout=timeout)


__all__ = [
    "COMMAND_NOT_FOUND_EXIT_CODE",
    "CommandRunner",
    "SubprocessRunner",
    "get_default_runner",
]
