"""ErrorSet: an ordered aggregate of DiagnosticErrors.

Useful when a failure is not fatal for a function but must still be kept:

    errs: ErrorSet | None = None
    for item in items:
        try:
            process(item)
        except OSError as exc:
            errs = add(errs, exc)
    if errs:
        raise errs

Sets never nest: adding an ErrorSet appends its elements.
"""

from __future__ import annotations

from collections.abc import Iterator

from .error import DiagnosticError, _formatted, wrap
from .factory import FormattedFactory
from .sink import log_failure

__all__ = ["ErrorSet", "add", "add_to", "new_set"]


class ErrorSet(Exception):
    """Ordered, growable sequence of DiagnosticErrors.

    An empty set is falsy, so `if errs:` reads as "did anything fail".
    """

    def __init__(self, *values: object) -> None:
        super().__init__()
        self._errors: list[DiagnosticError] = []
        for value in values:
            self._append(value, 1)

    def _append(self, value: object, skip: int) -> None:
        # skip=0 puts the caller of _append on top of any stack captured here.
        new: list[DiagnosticError]
        match value:
            case None:
                return
            case DiagnosticError():
                new = [value]
            case ErrorSet():
                elements = list(value._errors)
                self._errors.extend(elements)
                for err in elements:
                    log_failure(err)
                return
            case FormattedFactory():
                new = [_formatted(value.pattern, (), skip + 1, value.tag)]
            case _:
                new = [wrap(value, skip + 1)]

        self._errors.extend(new)
        log_failure(value)

    def add(self, value: object) -> ErrorSet:
        """Append value and return self.

        None and empty sets are ignored, other sets are flattened, and
        anything that is not a DiagnosticError is wrapped first.
        """
        self._append(value, 1)
        return self

    def addf(self, pattern: str, *args: object) -> ErrorSet:
        """Append an error built from a printf-style pattern."""
        self._errors.append(_formatted(pattern, args, 1))
        log_failure(self._errors[-1])
        return self

    @property
    def errors(self) -> tuple[DiagnosticError, ...]:
        return tuple(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[DiagnosticError]:
        return iter(tuple(self._errors))

    def __getitem__(self, index: int) -> DiagnosticError:
        return self._errors[index]

    def message(self) -> str:
        return "\n".join(err.message() for err in self._errors)

    def full_report(self) -> str:
        return "\n".join(err.full_report() for err in self._errors)

    def contains_origin(self, other: object) -> bool:
        """True if any element shares its origin with other."""
        from .identity import same_origin

        return any(same_origin(err, other) for err in self._errors)

    def to_group(self, message: str = "multiple errors") -> ExceptionGroup[DiagnosticError]:
        """Return the elements as a built-in ExceptionGroup.

        Raises:
            ValueError: If the set is empty.
        """
        return ExceptionGroup(message, list(self._errors))

    def __str__(self) -> str:
        return self.full_report()

    def __repr__(self) -> str:
        return f"ErrorSet({len(self._errors)} errors)"


def add(errs: ErrorSet | None, value: object) -> ErrorSet | None:
    """Add value to errs, allocating a set if errs is None.

    Returns None only when errs is None and value is empty.
    """
    if errs is None:
        errs = ErrorSet()
        errs._append(value, 1)
        return errs or None
    errs._append(value, 1)
    return errs


def new_set(value: object) -> ErrorSet | None:
    """Return a set holding value, or None if value is empty."""
    errs = ErrorSet()
    errs._append(value, 1)
    return errs or None


def add_to(a: object, b: object) -> ErrorSet | None:
    """Combine two failures of any kind into one ErrorSet.

    If a already is an ErrorSet, b is added to it in place. Otherwise a new
    set holds a followed by b. None operands are skipped; None is returned
    when both are empty.
    """
    if isinstance(a, ErrorSet):
        a._append(b, 1)
        return a

    errs = ErrorSet()
    errs._append(a, 1)
    errs._append(b, 1)
    return errs or None
