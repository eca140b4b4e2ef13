"""Invoke tasks wrapping compose manager operations for local development."""

from __future__ import annotations

from typing import TYPE_CHECKING

from invoke.tasks import task

from compose_manager import ComposeError, ComposeFileCollection, ComposeManager
from dev.utils import logging_utils

if TYPE_CHECKING:
    from invoke.context import Context


def _collection(files: list[str] | None, project: str | None) -> ComposeFileCollection:
    return ComposeFileCollection.from_input(list(files or [])).with_project_name(project)


@task(
    help={
        "file": "Compose file (can be specified multiple times). Defaults to docker-compose.yml discovery.",
        "project": "Project name",
    },
    iterable=["file"],
)
@logging_utils.with_banner()
def config(ctx: Context, file: list[str] | None = None, project: str | None = None) -> None:
    """Validate and print the merged compose configuration."""
    try:
        output = ComposeManager().config(_collection(file, project))
    except ComposeError as e:
        logging_utils.print_failure("Invalid compose configuration", error=str(e))
        raise SystemExit(1) from e
    logging_utils.console.print(output, markup=False, highlight=False)
    logging_utils.print_success("Configuration is valid")


@task(
    help={
        "file": "Compose file (can be specified multiple times). Defaults to docker-compose.yml discovery.",
        "project": "Project name",
    },
    iterable=["file"],
)
@logging_utils.with_banner()
def ips(ctx: Context, file: list[str] | None = None, project: str | None = None) -> None:
    """Show container names and IP addresses of a compose project."""
    try:
        addresses = ComposeManager().container_addresses(_collection(file, project))
    except ComposeError as e:
        logging_utils.print_failure("Could not list containers", error=str(e))
        raise SystemExit(1) from e

    if not addresses:
        logging_utils.print_info("No containers running.")
        return
    logging_utils.print_table({address.name: address.ip_address or "-" for address in addresses})
