"""Command-line interface for compose manager."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .config import get_settings
from .core.utils.logging import logger, setup_compose_manager_logging
from .errors import ComposeError
from .manager import DEFAULT_KILL_SIGNAL, DEFAULT_RESTART_TIMEOUT, ComposeManager
from .types import ComposeFileCollection, ErrorKind

# Process exit code for each error kind
EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.GENERIC: 1,
    ErrorKind.COMPOSE_FILE_NOT_FOUND: 2,
    ErrorKind.HOST_CONNECTION: 3,
    ErrorKind.NO_SUCH_SERVICE: 4,
    ErrorKind.TOOL_NOT_INSTALLED: 127,
}


def _parse_env(values: list[str]) -> dict[str, str]:
    """Parse KEY=VALUE pairs.

    Raises:
        ValueError: If a value has no '=' or an empty key.
    """
    env: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid environment variable '{item}', expected KEY=VALUE")
        env[key] = value
    return env


def _create_manager(args: argparse.Namespace) -> tuple[ComposeManager, ComposeFileCollection]:
    """Build the manager and compose file collection from global options."""
    manager = ComposeManager(cwd=args.cwd, env=_parse_env(args.env))
    compose_files = ComposeFileCollection.from_input(args.files).with_project_name(args.project_name)
    return manager, compose_files


def cmd_up(args: argparse.Namespace) -> str:
    """Handle the up command."""
    manager, compose_files = _create_manager(args)
    return manager.start(compose_files)


def cmd_stop(args: argparse.Namespace) -> str:
    """Handle the stop command."""
    manager, compose_files = _create_manager(args)
    return manager.stop(compose_files)


def cmd_rm(args: argparse.Namespace) -> str:
    """Handle the rm command."""
    manager, compose_files = _create_manager(args)
    return manager.remove(compose_files, force=True, remove_volumes=args.volumes)


def cmd_kill(args: argparse.Namespace) -> str:
    """Handle the kill command."""
    manager, compose_files = _create_manager(args)
    return manager.kill(compose_files, signal=args.signal)


def cmd_build(args: argparse.Namespace) -> str:
    """Handle the build command."""
    manager, compose_files = _create_manager(args)
    return manager.build(compose_files, pull=not args.no_pull, force_remove=args.force_rm, cache=not args.no_cache)


def cmd_pull(args: argparse.Namespace) -> str:
    """Handle the pull command."""
    manager, compose_files = _create_manager(args)
    return manager.pull(compose_files)


def cmd_restart(args: argparse.Namespace) -> str:
    """Handle the restart command."""
    manager, compose_files = _create_manager(args)
    return manager.restart(compose_files, timeout=args.timeout)


def cmd_run(args: argparse.Namespace) -> str:
    """Handle the run command."""
    manager, compose_files = _create_manager(args)
    return manager.run(args.service, args.service_command, compose_files)


def cmd_ps(args: argparse.Namespace) -> str:
    """Handle the ps command."""
    manager, compose_files = _create_manager(args)
    return manager.ps(compose_files)


def cmd_config(args: argparse.Namespace) -> str:
    """Handle the config command."""
    manager, compose_files = _create_manager(args)
    return manager.config(compose_files)


def cmd_ips(args: argparse.Namespace) -> str:
    """Handle the ips command."""
    manager, compose_files = _create_manager(args)
    return manager.ips(compose_files)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="compose-manager",
        description="Run docker-compose commands with typed error reporting",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Compose file (can be specified multiple times, order matters)",
    )
    parser.add_argument(
        "-p",
        "--project-name",
        dest="project_name",
        default=None,
        help="Project name",
    )
    parser.add_argument(
        "-C",
        "--cwd",
        dest="cwd",
        default=None,
        help="Working directory for docker-compose",
    )
    parser.add_argument(
        "-e",
        "--env",
        dest="env",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Environment variable for docker-compose (can be specified multiple times)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # up command
    up_parser = subparsers.add_parser("up", help="Create and start containers in the background")
    up_parser.set_defaults(func=cmd_up)

    # stop command
    stop_parser = subparsers.add_parser("stop", help="Stop containers")
    stop_parser.set_defaults(func=cmd_stop)

    # rm command
    rm_parser = subparsers.add_parser("rm", help="Remove stopped containers")
    rm_parser.add_argument(
        "-v",
        "--volumes",
        action="store_true",
        help="Remove anonymous volumes attached to containers",
    )
    rm_parser.set_defaults(func=cmd_rm)

    # kill command
    kill_parser = subparsers.add_parser("kill", help="Kill containers")
    kill_parser.add_argument(
        "-s",
        "--signal",
        default=DEFAULT_KILL_SIGNAL,
        help=f"Signal to send (default: {DEFAULT_KILL_SIGNAL})",
    )
    kill_parser.set_defaults(func=cmd_kill)

    # build command
    build_parser = subparsers.add_parser("build", help="Build service images")
    build_parser.add_argument(
        "--no-pull",
        action="store_true",
        help="Do not attempt to pull a newer version of the base image",
    )
    build_parser.add_argument(
        "--force-rm",
        action="store_true",
        help="Always remove intermediate containers",
    )
    build_parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Do not use cache when building the image",
    )
    build_parser.set_defaults(func=cmd_build)

    # pull command
    pull_parser = subparsers.add_parser("pull", help="Pull service images")
    pull_parser.set_defaults(func=cmd_pull)

    # restart command
    restart_parser = subparsers.add_parser("restart", help="Restart containers")
    restart_parser.add_argument(
        "-t",
        "--timeout",
        type=int,
        default=DEFAULT_RESTART_TIMEOUT,
        help=f"Shutdown timeout in seconds (default: {DEFAULT_RESTART_TIMEOUT})",
    )
    restart_parser.set_defaults(func=cmd_restart)

    # run command
    run_parser = subparsers.add_parser("run", help="Run a one-off command in a new container")
    run_parser.add_argument("service", help="Service name")
    run_parser.add_argument("service_command", nargs=argparse.REMAINDER, help="Command to run")
    run_parser.set_defaults(func=cmd_run)

    # ps command
    ps_parser = subparsers.add_parser("ps", help="List containers")
    ps_parser.set_defaults(func=cmd_ps)

    # config command
    config_parser = subparsers.add_parser("config", help="Validate and view the compose configuration")
    config_parser.set_defaults(func=cmd_config)

    # ips command
    ips_parser = subparsers.add_parser("ips", help="List container names and IP addresses")
    ips_parser.set_defaults(func=cmd_ips)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else get_settings().log_level_value
    setup_compose_manager_logging(level)

    try:
        logger.debug("Executing command: %s", args.command)
        output = args.func(args)
    except ComposeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CODES[e.kind]
    except ValueError as e:
        logger.error("Error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130

    if output:
        print(output, end="" if output.endswith("\n") else "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
