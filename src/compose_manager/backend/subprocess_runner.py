"""Subprocess runner implementation.

Runs invocations as child processes without a shell.
"""

from __future__ import annotations

import os
import subprocess

from compose_manager.core.utils import logger
from compose_manager.errors import ComposeCommandError
from compose_manager.types.command import CommandResult, ComposeInvocation

# Exit code reported by shells when a program cannot be found
COMMAND_NOT_FOUND_EXIT_CODE = 127


class SubprocessRunner:
    """Subprocess implementation of CommandRunner.

    Args:
        timeout: Optional timeout in seconds. None waits for the process to finish.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def execute(self, invocation: ComposeInvocation) -> CommandResult:
        """Run the invocation and capture its output.

        Stdout is returned for successful commands; failed commands return
        stderr, falling back to stdout when stderr is empty. Bytes that are
        not valid UTF-8 are replaced rather than failing the call.

        Raises:
            ComposeCommandError: If the working directory does not exist.
            subprocess.TimeoutExpired: If a timeout is configured and exceeded.
        """
        env = None
        if invocation.env:
            env = {**os.environ, **invocation.env}

        try:
            result = subprocess.run(
                invocation.argv,
                cwd=invocation.cwd,
                env=env,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            # subprocess reports a missing cwd with the same exception as a missing program
            if invocation.cwd is not None and not os.path.isdir(invocation.cwd):
                raise ComposeCommandError(f"Working directory not found: {invocation.cwd}", output=str(e)) from e
            logger.debug(f"Program not found: {invocation.program}")
            return CommandResult(output=str(e), exit_code=COMMAND_NOT_FOUND_EXIT_CODE)

        if result.returncode == 0:
            output = result.stdout
        else:
            output = result.stderr or result.stdout

        logger.debug(f"Exit code {result.returncode} from: {invocation.command_line}")
        return CommandResult(output=output, exit_code=result.returncode)


__all__ = [
    "COMMAND_NOT_FOUND_EXIT_CODE",
    "SubprocessRunner",
]
