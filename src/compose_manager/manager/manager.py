"""Compose manager for docker-compose projects.

This module provides the ComposeManager class, exposing one method per
docker-compose subcommand.
"""

from __future__ import annotations

import json
import shlex
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from compose_manager.backend import CommandRunner, get_default_runner
from compose_manager.config import get_settings
from compose_manager.core.utils import logger
from compose_manager.errors import ComposeCommandError
from compose_manager.types.command import ComposeInvocation
from compose_manager.types.compose_file import ComposeFileCollection, ComposeFileLike
from compose_manager.types.container import ContainerAddress

from .classifier import FAILURE_EXIT_CODE, TOOL_NOT_FOUND_EXIT_CODE, classify_result, classify_run_result
from .formatter import format_command

if TYPE_CHECKING:
    from compose_manager.types.command import CommandResult

ComposeFilesInput = ComposeFileCollection | ComposeFileLike | Sequence[ComposeFileLike] | None

DEFAULT_KILL_SIGNAL = "SIGKILL"
DEFAULT_RESTART_TIMEOUT = 10


class ComposeManager:
    """Runs docker-compose subcommands and classifies their results.

    Every subcommand method accepts the compose files as a single file name,
    an ordered list of file names, a ComposeFileCollection, or None to let
    docker-compose discover ``docker-compose.yml`` in the working directory.
    Methods return the raw command output on success and raise a
    :class:`~compose_manager.errors.ComposeError` subclass on failure.

    Args:
        cwd: Working directory for every invocation. None inherits the caller's.
        env: Environment variable overrides for every invocation.
        runner: Optional command runner. If None, uses subprocess.
        compose_binary: Compose program. Defaults to the configured setting.
        docker_binary: Docker program used by ``ips``. Defaults to the configured setting.

    Example:
        >>> manager = ComposeManager(cwd="/srv/app")
        >>> manager.start(["docker-compose.yml", "docker-compose.prod.yml"])
        >>> print(manager.ps("docker-compose.yml"))
    """

    def __init__(
        self,
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
        runner: CommandRunner | None = None,
        compose_binary: str | None = None,
        docker_binary: str | None = None,
    ) -> None:
        settings = get_settings()
        self.cwd = cwd
        self.env: dict[str, str] = dict(env) if env else {}
        self.runner = runner or get_default_runner(timeout=settings.timeout_sec)
        self.compose_binary = compose_binary or settings.compose_binary
        self.docker_binary = docker_binary or settings.docker_binary

    def start(self, compose_files: ComposeFilesInput = None) -> str:
        """Create and start service containers in the background (``up -d``)."""
        return classify_result(self._execute("up -d", compose_files))

    def stop(self, compose_files: ComposeFilesInput = None) -> str:
        """Stop service containers."""
        return classify_result(self._execute("stop", compose_files))

    def remove(
        self,
        compose_files: ComposeFilesInput = None,
        force: bool = False,
        remove_volumes: bool = False,
    ) -> str:
        """Remove stopped service containers.

        ``--force`` is always passed so that docker-compose never prompts.

        Args:
            compose_files: The compose files.
            force: Accepted for API compatibility; removal is always forced.
            remove_volumes: Also remove anonymous volumes attached to containers.
        """
        command = ["rm", "--force"]
        if remove_volumes:
            command.append("-v")
        return classify_result(self._execute(command, compose_files))

    def kill(self, compose_files: ComposeFilesInput = None, signal: str = DEFAULT_KILL_SIGNAL) -> str:
        """Kill service containers.

        Args:
            compose_files: The compose files.
            signal: Signal to send. Only passed to docker-compose when it is not SIGKILL.
        """
        command = ["kill"]
        if signal != DEFAULT_KILL_SIGNAL:
            command.extend(["-s", signal])
        return classify_result(self._execute(command, compose_files))

    def build(
        self,
        compose_files: ComposeFilesInput = None,
        pull: bool = True,
        force_remove: bool = False,
        cache: bool = True,
    ) -> str:
        """Build service images.

        Args:
            compose_files: The compose files.
            pull: Always attempt to pull a newer version of the base image.
            force_remove: Always remove intermediate containers.
            cache: Use the build cache. When False, ``--no-cache`` is passed.
        """
        command = ["build"]
        if pull:
            command.append("--pull")
        if force_remove:
            command.append("--force-rm")
        if not cache:
            command.append("--no-cache")
        return classify_result(self._execute(command, compose_files))

    def pull(self, compose_files: ComposeFilesInput = None) -> str:
        """Pull service images."""
        return classify_result(self._execute("pull", compose_files))

    def restart(self, compose_files: ComposeFilesInput = None, timeout: int = DEFAULT_RESTART_TIMEOUT) -> str:
        """Restart service containers.

        Args:
            compose_files: The compose files.
            timeout: Shutdown timeout in seconds. Only passed when it differs from 10.
        """
        command = ["restart"]
        if timeout != DEFAULT_RESTART_TIMEOUT:
            command.append(f"--timeout={timeout}")
        return classify_result(self._execute(command, compose_files))

    def run(self, service: str, command: str | Sequence[str], compose_files: ComposeFilesInput = None) -> str:
        """Run a one-off command in a new container of ``service``.

        The container is removed afterwards (``run --rm``).

        Args:
            service: Service name, passed as a single argument.
            command: Command to run, either as text (split shell-style) or as
                a sequence of arguments passed verbatim.
            compose_files: The compose files.

        Raises:
            NoSuchServiceError: If docker-compose does not know the service.
            ComposeCommandError: If ``command`` text cannot be split (e.g. unbalanced quotes).
        """
        if isinstance(command, str):
            try:
                command_args = shlex.split(command)
            except ValueError as e:
                raise ComposeCommandError(f"Invalid command for service {service}: {e}", output=command) from e
        else:
            command_args = list(command)

        subcommand = ["run", "--rm", service, *command_args]
        return classify_run_result(self._execute(subcommand, compose_files))

    def ps(self, compose_files: ComposeFilesInput = None) -> str:
        """List containers."""
        return classify_result(self._execute("ps", compose_files))

    def config(self, compose_files: ComposeFilesInput = None) -> str:
        """Validate and print the merged compose configuration (YAML)."""
        return classify_result(self._execute("config", compose_files))

    def ips(self, compose_files: ComposeFilesInput = None) -> str:
        """List container names and IP addresses.

        Returns:
            One ``<name>\\t<ip>`` line per container, in ``ps -q`` order.
        """
        return "".join(f"{address.to_line()}\n" for address in self.container_addresses(compose_files))

    def container_addresses(self, compose_files: ComposeFilesInput = None) -> list[ContainerAddress]:
        """Get name and IP addresses of every container of the project.

        Lists container IDs with ``ps -q``, then inspects each container.

        Returns:
            ContainerAddress for each container, in ``ps -q`` order.
        """
        output = classify_result(self._execute("ps -q", compose_files))
        container_ids = [line.strip() for line in output.splitlines() if line.strip()]
        logger.debug(f"Inspecting {len(container_ids)} container(s)")
        return [self._inspect_container(container_id) for container_id in container_ids]

    def _inspect_container(self, container_id: str) -> ContainerAddress:
        """Inspect one container and extract its name and addresses."""
        invocation = ComposeInvocation(
            program=self.docker_binary,
            args=("inspect", container_id),
            cwd=self.cwd or None,
            env=self.env or None,
        )
        output = classify_result(self._run(invocation))

        try:
            details: Any = json.loads(output)
        except json.JSONDecodeError as e:
            raise ComposeCommandError(f"Invalid docker inspect output for {container_id}: {e}", output=output) from e

        if not isinstance(details, list) or not details or not isinstance(details[0], dict):
            raise ComposeCommandError(f"Unexpected docker inspect output for {container_id}", output=output)
        container = details[0]

        network_settings = container.get("NetworkSettings") or {}
        networks = {
            name: settings.get("IPAddress") or ""
            for name, settings in (network_settings.get("Networks") or {}).items()
        }
        ip_address = network_settings.get("IPAddress") or next((ip for ip in networks.values() if ip), "")

        return ContainerAddress(
            container_id=container_id,
            name=str(container.get("Name", "")).lstrip("/"),
            ip_address=ip_address,
            networks=networks,
        )

    def _execute(self, subcommand: str | list[str], compose_files: ComposeFilesInput) -> CommandResult:
        """Format a compose subcommand and run it."""
        invocation = format_command(
            subcommand,
            ComposeFileCollection.from_input(compose_files),
            cwd=self.cwd,
            env=self.env,
            program=self.compose_binary,
        )
        return self._run(invocation)

    def _run(self, invocation: ComposeInvocation) -> CommandResult:
        logger.debug(f"Running: {invocation.command_line}")
        result = self.runner.execute(invocation)
        if result.exit_code in (FAILURE_EXIT_CODE, TOOL_NOT_FOUND_EXIT_CODE):
            logger.warning(f"Command failed with exit code {result.exit_code}: {invocation.command_line}")
        return result


__all__ = [
    "ComposeFilesInput",
    "ComposeManager",
]
