"""Exceptions raised by compose operations."""

from __future__ import annotations

from typing import ClassVar

from compose_manager.types.error import ErrorKind


class ComposeError(Exception):
    """Base error for failed compose invocations.

    Attributes:
        kind: Classification of the failure.
        output: Raw output of the failed command.
        exit_code: Exit code of the failed command, if known.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.GENERIC
    default_message: ClassVar[str] = "docker-compose command failed"

    def __init__(self, message: str | None = None, *, output: str = "", exit_code: int | None = None) -> None:
        super().__init__(message or self.default_message)
        self.output = output
        self.exit_code = exit_code


class ComposeCommandError(ComposeError):
    """Raised for unclassified failures; the message is the raw command output."""


class DockerInstallationMissingError(ComposeError):
    """Raised when the docker-compose program could not be found (exit 127)."""

    kind = ErrorKind.TOOL_NOT_INSTALLED
    default_message = "docker-compose is not installed or not available in PATH"


class ComposeFileNotFoundError(ComposeError):
    """Raised when no compose file was given and docker-compose.yml is missing."""

    kind = ErrorKind.COMPOSE_FILE_NOT_FOUND
    default_message = "Compose file not found"


class DockerHostConnectionError(ComposeError):
    """Raised when docker-compose cannot connect to the docker host."""

    kind = ErrorKind.HOST_CONNECTION
    default_message = "Could not connect to the docker host (check DOCKER_HOST)"


class NoSuchServiceError(ComposeError):
    """Raised by ``run`` when the service is not defined in the compose files."""

    kind = ErrorKind.NO_SUCH_SERVICE
    default_message = "No such service"


__all__ = [
    "ComposeCommandError",
    "ComposeError",
    "ComposeFileNotFoundError",
    "DockerHostConnectionError",
    "DockerInstallationMissingError",
    "NoSuchServiceError",
]
