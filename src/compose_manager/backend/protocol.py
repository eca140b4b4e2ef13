"""Command runner protocol definition.

Defines the process-execution boundary used by the compose manager, so that
tests and alternative runtimes can replace subprocess execution.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from compose_manager.types.command import CommandResult, ComposeInvocation


class CommandRunner(Protocol):
    """Protocol for command runner implementations."""

    def execute(self, invocation: ComposeInvocation) -> CommandResult:
        """Execute an invocation and wait for it to finish.

        Args:
            invocation: Program, arguments, working directory and environment overrides.

        Returns:
            CommandResult with the captured output and exit code. A program
            that cannot be launched is reported as exit code 127.
        """
        ...


__all__ = ["CommandRunner"]
