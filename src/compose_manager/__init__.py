"""Compose Manager - Python facade over the docker-compose command line"""

from compose_manager.core.utils import logger
from compose_manager.errors import (
    ComposeCommandError,
    ComposeError,
    ComposeFileNotFoundError,
    DockerHostConnectionError,
    DockerInstallationMissingError,
    NoSuchServiceError,
)
from compose_manager.manager import ComposeManager
from compose_manager.types import ComposeFile, ComposeFileCollection, ContainerAddress, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "ComposeCommandError",
    "ComposeError",
    "ComposeFile",
    "ComposeFileCollection",
    "ComposeFileNotFoundError",
    "ComposeManager",
    "ContainerAddress",
    "DockerHostConnectionError",
    "DockerInstallationMissingError",
    "ErrorKind",
    "NoSuchServiceError",
    "logger",
]
