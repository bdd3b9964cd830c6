"""Shared console helpers for express-start.

All terminal output goes through one Rich ``Console`` so colours, tables and
error messages look the same everywhere.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(project_name: str) -> None:
    """Print the start-of-run banner."""
    console.print(
        Panel(
            f"[bold blue]Creating ExpressStart project:[/bold blue] {escape(project_name)}",
            border_style="blue",
            expand=False,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=escape(title), show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_next_steps(commands: list[str]) -> None:
    """Print the commands the user should run next."""
    console.print("[bold]Next steps:[/bold]")
    for command in commands:
        console.print(f"   [cyan]{escape(command)}[/cyan]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
