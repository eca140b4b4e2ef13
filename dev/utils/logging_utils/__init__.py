"""CLI output formatting using Rich.

This module provides consistent terminal output for invoke tasks.

Features:
    - Banners: Task headers with argument context
    - Tables: Display key-value data in aligned tables
    - Success/failure: Colored status messages

Requirements:
    Rich library (dev dependency): uv sync --extra dev

Usage:
    from dev.utils.logging_utils import console, print_banner, print_success

    print_banner("IPS", data={"File": "docker-compose.yml"})
    print_table({"web": "172.18.0.2", "db": "172.18.0.3"})
    print_success("Configuration is valid")
"""

from .console import console
from .printers import (
    print_banner,
    print_failure,
    print_info,
    print_success,
    print_table,
    with_banner,
)

__all__ = [
    "console",
    "print_banner",
    "print_failure",
    "print_info",
    "print_success",
    "print_table",
    "with_banner",
]
