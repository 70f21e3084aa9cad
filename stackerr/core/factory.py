"""Formatted error factories.

A factory is a reusable message pattern bound to one identity tag. Every call
builds a new DiagnosticError with its own message and stack, yet all of them
compare as the same origin:

    NotFound = new_factory("no such entry: %s")

    err = NotFound("alpha")
    same_origin(err, NotFound("beta"))  # True
    same_origin(err, NotFound)          # True
"""

from __future__ import annotations

from .error import DiagnosticError, _formatted
from .failure import format_message
from .tags import allocate

__all__ = ["FormattedFactory", "new_factory"]


class FormattedFactory:
    """Callable producing tagged DiagnosticErrors from one pattern."""

    __slots__ = ("_pattern", "_tag")

    def __init__(self, pattern: str) -> None:
        self._pattern = pattern
        self._tag = allocate()

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def tag(self) -> int:
        return self._tag

    def __call__(self, *args: object) -> DiagnosticError:
        return _formatted(self._pattern, args, 1, self._tag)

    def message(self) -> str:
        """Message of an invocation without arguments."""
        return format_message(self._pattern, ())

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"FormattedFactory({self._pattern!r}, tag={self._tag})"


def new_factory(pattern: str) -> FormattedFactory:
    """Create a factory with a freshly allocated identity tag."""
    return FormattedFactory(pattern)
