import pytest

from compose_manager.errors import (
    ComposeCommandError,
    ComposeFileNotFoundError,
    DockerHostConnectionError,
    DockerInstallationMissingError,
    NoSuchServiceError,
)
from compose_manager.manager import classify_result, classify_run_result
from compose_manager.types import CommandResult, ErrorKind


@pytest.mark.parametrize(
    "output",
    [
        "",
        "sh: docker-compose: command not found",
        "Couldn't connect to Docker daemon - check DOCKER_HOST",
        "Can't find a suitable configuration file, docker-compose.yml",
    ],
)
def test_exit_127_is_tool_not_installed_regardless_of_output(output):
    with pytest.raises(DockerInstallationMissingError) as exc_info:
        classify_result(CommandResult(output=output, exit_code=127))

    assert exc_info.value.kind is ErrorKind.TOOL_NOT_INSTALLED
    assert exc_info.value.exit_code == 127


def test_docker_host_marker_is_host_connection_error():
    output = (
        "Couldn't connect to Docker daemon at http+docker://localhost - is it running?\n\n"
        "If it's at a non-standard location, specify the URL with the DOCKER_HOST environment variable.\n"
    )

    with pytest.raises(DockerHostConnectionError) as exc_info:
        classify_result(CommandResult(output=output, exit_code=1))

    assert exc_info.value.kind is ErrorKind.HOST_CONNECTION
    assert exc_info.value.output == output


def test_docker_host_marker_takes_precedence_over_compose_file_marker():
    output = "docker-compose.yml: cannot reach DOCKER_HOST"

    with pytest.raises(DockerHostConnectionError):
        classify_result(CommandResult(output=output, exit_code=1))


def test_compose_file_marker_is_compose_file_not_found():
    output = (
        "Can't find a suitable configuration file in this directory or any parent. "
        "Are you in the right directory?\n\nSupported filenames: docker-compose.yml, docker-compose.yaml"
    )

    with pytest.raises(ComposeFileNotFoundError) as exc_info:
        classify_result(CommandResult(output=output, exit_code=1))

    assert exc_info.value.kind is ErrorKind.COMPOSE_FILE_NOT_FOUND


def test_unclassified_failure_keeps_output_verbatim():
    output = "ERROR: Service 'web' failed to build: pull access denied\n"

    with pytest.raises(ComposeCommandError) as exc_info:
        classify_result(CommandResult(output=output, exit_code=1))

    assert str(exc_info.value) == output
    assert exc_info.value.output == output
    assert exc_info.value.kind is ErrorKind.GENERIC


@pytest.mark.parametrize("exit_code", [0, 2, 125, 130])
def test_other_exit_codes_return_output_unchanged(exit_code):
    output = "  Name   Command   State   Ports\n-------------------------------\n"

    assert classify_result(CommandResult(output=output, exit_code=exit_code)) == output


def test_run_unknown_service_is_no_such_service():
    output = "ERROR: No such service: wbe"

    with pytest.raises(NoSuchServiceError, match="No such service: wbe") as exc_info:
        classify_run_result(CommandResult(output=output, exit_code=1))

    assert exc_info.value.kind is ErrorKind.NO_SUCH_SERVICE


def test_run_service_marker_takes_precedence_over_other_markers():
    output = "service 'db' depends on undefined service, see docker-compose.yml"

    with pytest.raises(NoSuchServiceError):
        classify_run_result(CommandResult(output=output, exit_code=1))


def test_run_falls_back_to_generic_classification():
    with pytest.raises(ComposeCommandError, match="exec failed"):
        classify_run_result(CommandResult(output="exec failed", exit_code=1))

    with pytest.raises(DockerInstallationMissingError):
        classify_run_result(CommandResult(output="no such service", exit_code=127))

    assert classify_run_result(CommandResult(output="hello\n", exit_code=0)) == "hello\n"
