"""Basic print utilities using Rich."""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

from .console import Panel, Table, Text, console

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def print_banner(title: str, data: dict[str, Any] | None = None) -> None:
    """Print task banner with title and key-value pairs.

    Args:
        title: Main title text (e.g., "IPS").
        data: Optional dict of key-value pairs to display below the title.

    Example:
        >>> print_banner("IPS", {"File": ["docker-compose.yml"], "Project": "demo"})
        ╭────────────────────────── IPS ───────────────────────────╮
        │ File: ['docker-compose.yml']                             │
        │ Project: demo                                            │
        ╰──────────────────────────────────────────────────────────╯
    """
    content = Text()
    if data:
        for i, (key, value) in enumerate(data.items()):
            if i > 0:
                content.append("\n")
            content.append(f"{key}: ", style="dim")
            content.append(str(value), style="cyan")
    console.print()
    console.print(Panel(content, style="blue", title=f"[bold]{title}[/]", title_align="center"))
    console.print()


def print_table(data: dict[str, Any]) -> None:
    """Print key-value data as an aligned table.

    Args:
        data: Dictionary of key-value pairs to display.

    Example:
        >>> print_table({"demo-web-1": "172.18.0.2", "demo-db-1": "172.18.0.3"})
          demo-web-1  172.18.0.2
          demo-db-1   172.18.0.3
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="cyan")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)
    console.print()


def print_success(message: str = "SUCCESS", **details: Any) -> None:
    """Print success message with optional details.

    Args:
        message: Success message to display (default: "SUCCESS").
        **details: Key-value pairs to display below the message.
    """
    console.print()
    console.print(f"[bold green]✓ {message}[/]")
    if details:
        for key, value in details.items():
            console.print(f"  [dim]{key}:[/] [cyan]{value}[/]")


def print_failure(message: str = "FAILED", error: str | None = None) -> None:
    """Print failure message with optional error details.

    Args:
        message: Failure message to display (default: "FAILED").
        error: Optional error details to show below the message.

    Example:
        >>> print_failure("Could not list containers", error="Compose file not found")

        ✗ Could not list containers
          Compose file not found
    """
    console.print()
    console.print(f"[bold red]✗ {message}[/]")
    if error:
        console.print(f"  {error}", style="dim", markup=False, highlight=False)


def print_info(message: str) -> None:
    """Print an info message.

    Args:
        message: Message to display.
    """
    console.print(f"  {message}")


def with_banner(
    exclude: set[str] | None = None,
    include_false: bool = False,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator that prints a banner with function name and args before execution.

    Args:
        exclude: Additional parameter names to exclude from banner. "self" and "ctx"
            are always excluded automatically.
        include_false: If True, include parameters with False/None values (default: False).
    """
    # Always exclude self and ctx, plus any user-provided excludes
    base_exclude = {"self", "ctx"}
    effective_exclude = base_exclude | (exclude or set())

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            sig = inspect.signature(func)
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            # Build banner title from function name
            title = func.__name__.replace("_", " ").upper()  # type: ignore[attr-defined]

            data = {}
            for name, value in bound.arguments.items():
                if name in effective_exclude:
                    continue
                if not include_false and (value is None or value is False):
                    continue
                key = name.replace("_", " ").title()
                data[key] = value

            print_banner(title, data if data else None)
            return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "print_banner",
    "print_failure",
    "print_info",
    "print_success",
    "print_table",
    "with_banner",
]
