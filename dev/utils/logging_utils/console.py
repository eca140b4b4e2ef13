"""Rich console setup."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()

__all__ = ["Console", "Panel", "Table", "Text", "console"]
