"""Command-related type definitions for compose invocations."""

from __future__ import annotations

import shlex

from pydantic import BaseModel, ConfigDict, Field


class ComposeInvocation(BaseModel):
    """A fully-specified external process call.

    Attributes:
        program: Program to execute (e.g., "docker-compose").
        args: Ordered arguments passed to the program.
        cwd: Working directory for the child process (None inherits the caller's).
        env: Environment overrides layered over the caller's environment.
    """

    model_config = ConfigDict(frozen=True)

    program: str = Field(description="Program to execute")
    args: tuple[str, ...] = Field(default=(), description="Ordered arguments passed to the program")
    cwd: str | None = Field(default=None, description="Working directory for the child process")
    env: dict[str, str] | None = Field(default=None, description="Environment variable overrides")

    @property
    def argv(self) -> list[str]:
        """Program followed by its arguments."""
        return [self.program, *self.args]

    @property
    def command_line(self) -> str:
        """Shell-quoted rendering of ``argv`` for logs and error messages."""
        return shlex.join(self.argv)


class CommandResult(BaseModel):
    """Output and exit code of a finished invocation.

    Attributes:
        output: Captured stdout on success, stderr (or stdout when empty) on failure.
        exit_code: Exit code of the process (127 when the program could not be found).
    """

    model_config = ConfigDict(frozen=True)

    output: str = Field(default="", description="Captured command output")
    exit_code: int = Field(description="Exit code of the process")

    @property
    def success(self) -> bool:
        """Check if command exited with code 0."""
        return self.exit_code == 0


__all__ = [
    "CommandResult",
    "ComposeInvocation",
]
