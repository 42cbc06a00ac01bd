# ABOUTME: Console output helpers shared by the server, seed runner and database layer
# ABOUTME: Rich-styled status lines plus a RichHandler-based logging setup

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def print_info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def print_success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def print_section(title: str) -> None:
    """Print a section header rule."""
    console.rule(f"[bold]{title}[/bold]")


def configure_logging(level: int | str = logging.INFO) -> None:
    """
    Route stdlib logging through rich.

    Safe to call more than once; existing RichHandlers on the root logger are replaced.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    root.addHandler(RichHandler(console=console, rich_tracebacks=True, show_path=False))
    root.setLevel(level)
