"""Styled rendering of failure reports.

The plain-text reports (DiagnosticError.full_report(), ErrorSet.full_report())
are the canonical format. These helpers print the same information to a
console with styling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stackerr.core.error import DiagnosticError
from stackerr.core.errorset import ErrorSet
from stackerr.core.factory import FormattedFactory
from stackerr.output.console import Style

if TYPE_CHECKING:
    from stackerr.output.console import ConsoleProtocol

__all__ = ["print_error", "print_report"]


def print_error(error: DiagnosticError, console: ConsoleProtocol) -> None:
    """Print one DiagnosticError: type, message, then one entry per frame."""
    console.print(f"{error.type_name} {error.message()}", Style.TYPE)
    for frame in error.frames():
        console.print(f"{frame.function} ({frame.file}:{frame.line})", Style.LOCATION)
        if frame.source:
            console.print(f"\t{frame.source}", Style.SOURCE)


def print_report(value: object, console: ConsoleProtocol) -> None:
    """Print any failure value to console."""
    match value:
        case None:
            return
        case DiagnosticError():
            print_error(value, console)
        case ErrorSet():
            total = len(value)
            for index, error in enumerate(value, start=1):
                console.header(f"[{index}/{total}]")
                print_error(error, console)
        case FormattedFactory():
            console.print(f"factory {value.pattern!r} (tag {value.tag})", Style.TYPE)
        case _:
            console.error(str(value))
