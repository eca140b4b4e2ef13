"""Logging utilities for compose_manager package."""

import logging
import sys

# Create global logger instance
logger = logging.getLogger("Compose-Manager")


def setup_compose_manager_logging(level: int = logging.INFO) -> None:
    """
    Setup logging with a clean format for the compose_manager package.

    Args:
        level: Logging level (default: INFO)
    """
    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Use stdout stream handler to ensure logs are dumped to stdout
    logging_handler = logging.StreamHandler(sys.stdout)
    logging_formatter = logging.Formatter("[Compose Manager] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger


__all__ = [
    "logger",
    "setup_compose_manager_logging",
]
