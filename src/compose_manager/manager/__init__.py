"""Docker-compose command management.

This package formats docker-compose command lines, runs them through a
command runner, and classifies their results.
"""

from .classifier import classify_result, classify_run_result
from .formatter import format_command
from .manager import DEFAULT_KILL_SIGNAL, DEFAULT_RESTART_TIMEOUT, ComposeFilesInput, ComposeManager

__all__ = [
    "DEFAULT_KILL_SIGNAL",
    "DEFAULT_RESTART_TIMEOUT",
    "ComposeFilesInput",
    "ComposeManager",
    "classify_result",
    "classify_run_result",
    "format_command",
]
