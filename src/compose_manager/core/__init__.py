"""Core modules for Compose Manager."""

from .utils.logging import logger, setup_compose_manager_logging

__all__ = [
    "logger",
    "setup_compose_manager_logging",
]
