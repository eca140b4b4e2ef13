"""Type definitions for Compose Manager."""

from .command import CommandResult, ComposeInvocation
from .compose_file import ComposeFile, ComposeFileCollection, ComposeFileLike
from .container import ContainerAddress
from .error import ErrorKind

__all__ = [
    "CommandResult",
    "ComposeFile",
    "ComposeFileCollection",
    "ComposeFileLike",
    "ComposeInvocation",
    "ContainerAddress",
    "ErrorKind",
]
