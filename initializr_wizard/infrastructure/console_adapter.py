"""Console adapter implementation using Rich library."""

from __future__ import annotations

from rich.console import Console

SEPARATOR = "=" * 52


class ConsoleAdapter:
    """Adapter for console operations using Rich library."""

    def __init__(self, console: Console | None = None):
        """Initialize console adapter.

        Args:
            console: Optional Rich console instance
        """
        self._console = console or Console(highlight=False)

    def clear(self) -> None:
        """Clear the terminal screen."""
        self._console.clear()

    def print(self, message: str = "", style: str | None = None) -> None:
        """Print a message to the console."""
        if style:
            self._console.print(f"[{style}]{message}[/{style}]")
        else:
            self._console.print(message)

    def print_error(self, message: str) -> None:
        """Print an error message to the console."""
        self._console.print(f"[red bold]Error:[/red bold] [red]{message}[/red]")

    def print_success(self, message: str) -> None:
        """Print a success message to the console."""
        self._console.print(f"[green]{message}[/green]")

    def print_header(self, title: str) -> None:
        """Print a section header framed by separator rules."""
        self._console.print(f"[yellow]{SEPARATOR}[/yellow]")
        self._console.print(f"[bold yellow]  {title}[/bold yellow]")
        self._console.print(f"[yellow]{SEPARATOR}[/yellow]")

    def prompt(self, message: str) -> str:
        """Read one line of input from the user."""
        return self._console.input(f"{message}: ")
