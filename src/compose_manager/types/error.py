"""Error kind definitions."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kind of failure reported by a compose invocation."""

    TOOL_NOT_INSTALLED = "tool_not_installed"
    COMPOSE_FILE_NOT_FOUND = "compose_file_not_found"
    HOST_CONNECTION = "host_connection"
    NO_SUCH_SERVICE = "no_such_service"
    GENERIC = "generic"


__all__ = [
    "ErrorKind",
]
