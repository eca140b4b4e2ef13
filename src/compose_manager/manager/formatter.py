"""Command formatting for docker-compose invocations."""

from __future__ import annotations

import shlex
from collections.abc import Mapping, Sequence

from compose_manager.config import get_settings
from compose_manager.types.command import ComposeInvocation
from compose_manager.types.compose_file import ComposeFileCollection


def format_command(
    subcommand: str | Sequence[str],
    compose_files: ComposeFileCollection,
    *,
    cwd: str | None = None,
    env: Mapping[str, str] | None = None,
    program: str | None = None,
) -> ComposeInvocation:
    """Build the invocation for a compose subcommand.

    Arguments are laid out as ``-f <file>`` pairs in collection order, then
    ``--project-name <name>`` if non-empty, then the subcommand tokens.

    Args:
        subcommand: Subcommand and its flags, either as text (split shell-style)
            or as a sequence of tokens.
        compose_files: Compose files and project name.
        cwd: Working directory override. None inherits the caller's.
        env: Environment variable overrides. Empty or None inherits the caller's.
        program: Compose program to invoke. None uses the configured compose binary.

    Returns:
        ComposeInvocation ready to be executed.

    Example:
        >>> files = ComposeFileCollection.from_input(["a.yml", "b.yml"]).with_project_name("demo")
        >>> format_command("up -d", files).argv
        ['docker-compose', '-f', 'a.yml', '-f', 'b.yml', '--project-name', 'demo', 'up', '-d']
    """
    args: list[str] = []

    for file_name in compose_files.file_names:
        args.extend(["-f", file_name])

    if compose_files.project_name:
        args.extend(["--project-name", compose_files.project_name])

    if isinstance(subcommand, str):
        args.extend(shlex.split(subcommand))
    else:
        args.extend(subcommand)

    return ComposeInvocation(
        program=program or get_settings().compose_binary,
        args=tuple(args),
        cwd=cwd or None,
        env=dict(env) if env else None,
    )


__all__ = [
    "format_command",
]
