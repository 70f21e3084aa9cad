"""Console output abstraction.

This module provides a protocol for console output that can be implemented
by different backends (Rich, mock for testing). The log sink and the report
renderer write through it without depending on a specific library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()  # Red, error message
    TYPE = auto()  # Failure type name
    LOCATION = auto()  # Frame function and file:line
    SOURCE = auto()  # Dimmed source line
    HEADER = auto()  # Section header

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def error(self, message: str) -> None:
        """Print an error message (shorthand for print with ERROR style)."""
        ...

    def header(self, message: str) -> None:
        """Print a section header."""
        ...


class RichConsole:
    """Console implementation using Rich library.

    Writes to stdout, or stderr when stderr=True (as the log sink does).
    """

    def __init__(self, *, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.markup import escape

        self._console = Console(stderr=stderr, highlight=False, soft_wrap=True)
        self._escape = escape
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.TYPE: "magenta bold",
            Style.LOCATION: "cyan",
            Style.SOURCE: "dim",
            Style.HEADER: "blue bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}")

    def header(self, message: str) -> None:
        self._console.print()
        self._console.print(message, style="blue bold", markup=False)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    """Factory for empty outputs list (helps type inference)."""
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    # Test helper methods

    def clear(self) -> None:
        """Clear all captured output."""
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        """Get all output messages as a list of strings."""
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """Get all output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        """Check if any error was printed."""
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        """Count outputs with a specific style."""
        return sum(1 for o in self.outputs if o.style == style)
