"""Failure categories and the message-only failure.

Every DiagnosticError carries its category explicitly, decided once at
construction, instead of inspecting the wrapped value later on.
"""

from __future__ import annotations

from enum import Enum, auto

__all__ = [
    "Category",
    "MessageFailure",
    "PANIC_TYPE_NAME",
    "as_failure",
    "format_message",
    "type_label",
]

PANIC_TYPE_NAME = "panic"


class Category(Enum):
    """Kind of underlying failure held by a DiagnosticError."""

    FOREIGN = auto()  # An exception raised outside this library
    MESSAGE = auto()  # A non-exception value converted to its text
    FORMATTED = auto()  # Built by errorf() or a factory
    PANIC = auto()  # An exception that escaped and was recovered

    def __str__(self) -> str:
        return self.name.lower()


class MessageFailure(Exception):
    """Minimal failure carrying only a message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def type_label(exc: BaseException) -> str:
    """Stable label for the runtime type of exc.

    Builtins are reported by bare name (e.g. "FileNotFoundError"), everything
    else by module-qualified name.
    """
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def as_failure(value: object) -> tuple[BaseException, Category]:
    """Convert value into an exception and its category."""
    if isinstance(value, BaseException):
        return value, Category.FOREIGN
    return MessageFailure(str(value)), Category.MESSAGE


def format_message(pattern: str, args: tuple[object, ...]) -> str:
    """Substitute args into a printf-style pattern.

    Without args only escapes such as "%%" are processed, and a pattern that
    still expects arguments is kept as is. Never raises: a pattern/argument
    mismatch appends the arguments instead.
    """
    if not args:
        try:
            return pattern % ()
        except (TypeError, ValueError, KeyError):
            return pattern
    try:
        return pattern % args
    except (TypeError, ValueError, KeyError):
        rendered = ", ".join(repr(a) for a in args)
        return f"{pattern} (args: {rendered})"
