"""Console port for user interface operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Port for console/terminal operations."""

    def clear(self) -> None:
        """Clear the terminal screen."""
        ...

    def print(self, message: str = "", style: str | None = None) -> None:
        """Print a message to the console.

        Args:
            message: Message to print, may contain Rich markup
            style: Optional style/color formatting
        """
        ...

    def print_error(self, message: str) -> None:
        """Print an error message to the console.

        Args:
            message: Error message to print, as Rich markup; text from outside
                the program must be escaped by the caller
        """
        ...

    def print_success(self, message: str) -> None:
        """Print a success message to the console.

        Args:
            message: Success message to print
        """
        ...

    def print_header(self, title: str) -> None:
        """Print a section header framed by separator rules.

        Args:
            title: Header text
        """
        ...

    def prompt(self, message: str) -> str:
        """Read one line of input from the user.

        The line is returned verbatim, without stripping.

        Args:
            message: Prompt message

        Returns:
            User input string
        """
        ...
