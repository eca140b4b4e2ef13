"""Classification of docker-compose results into output or typed errors.

Docker-compose does not expose structured failure causes, so failures are
recognized by exit code and by markers in the output text. All such markers
live in this module.
"""

from __future__ import annotations

from compose_manager.errors import (
    ComposeCommandError,
    ComposeFileNotFoundError,
    DockerHostConnectionError,
    DockerInstallationMissingError,
    NoSuchServiceError,
)
from compose_manager.types.command import CommandResult

TOOL_NOT_FOUND_EXIT_CODE = 127
FAILURE_EXIT_CODE = 1

DOCKER_HOST_MARKER = "DOCKER_HOST"
DEFAULT_COMPOSE_FILE_MARKER = "docker-compose.yml"
SERVICE_MARKER = "service"


def classify_result(result: CommandResult) -> str:
    """Return the output of a successful result or raise the matching error.

    Rules, checked in order:
        1. Exit 127: docker-compose is not installed.
        2. Exit 1 without ``DOCKER_HOST`` in the output: compose file not found
           if the output mentions ``docker-compose.yml``, a generic failure
           carrying the raw output otherwise.
        3. Exit 1 with ``DOCKER_HOST`` in the output: host connection error.
        4. Any other exit code, including 0, is success.

    Args:
        result: Result of a finished invocation.

    Returns:
        The raw output, unchanged.

    Raises:
        DockerInstallationMissingError: Exit code 127.
        ComposeFileNotFoundError: Exit code 1 mentioning docker-compose.yml.
        DockerHostConnectionError: Exit code 1 mentioning DOCKER_HOST.
        ComposeCommandError: Any other exit code 1.
    """
    output = result.output

    if result.exit_code == TOOL_NOT_FOUND_EXIT_CODE:
        raise DockerInstallationMissingError(output=output, exit_code=result.exit_code)

    if result.exit_code == FAILURE_EXIT_CODE:
        if DOCKER_HOST_MARKER in output:
            raise DockerHostConnectionError(output=output, exit_code=result.exit_code)
        if DEFAULT_COMPOSE_FILE_MARKER in output:
            raise ComposeFileNotFoundError(output=output, exit_code=result.exit_code)
        raise ComposeCommandError(output, output=output, exit_code=result.exit_code)

    return output


def classify_run_result(result: CommandResult) -> str:
    """Classify the result of ``run``, detecting unknown services first.

    Raises:
        NoSuchServiceError: Exit code 1 with ``service`` in the output.
        ComposeError: See :func:`classify_result`.
    """
    if result.exit_code == FAILURE_EXIT_CODE and SERVICE_MARKER in result.output:
        raise NoSuchServiceError(result.output or None, output=result.output, exit_code=result.exit_code)
    return classify_result(result)


__all__ = [
    "classify_result",
    "classify_run_result",
]
