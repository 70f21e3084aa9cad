"""DiagnosticError: a failure with an attached call stack.

A DiagnosticError wraps exactly one underlying failure. It can be raised and
caught like any exception, and its stack points at the code that built it
rather than at wherever it was eventually raised.

    err = wrap(exc)              # capture a stack around exc
    err = wrap_prefix(exc, "loading plugin")
    err = errorf("bad value %r", value)
    print(err.full_report())
"""

from __future__ import annotations

from .failure import (
    PANIC_TYPE_NAME,
    Category,
    MessageFailure,
    as_failure,
    format_message,
    type_label,
)
from .stack import CapturedStack, StackFrame, capture
from .tags import NO_TAG, allocate

__all__ = [
    "DiagnosticError",
    "PREFIX_SEPARATOR",
    "errorf",
    "new_error",
    "wrap",
    "wrap_prefix",
]

PREFIX_SEPARATOR = ": "


class DiagnosticError(Exception):
    """An underlying failure plus the stack captured where it was wrapped.

    Attributes are read-only except for the prefix, which only grows through
    add_prefix().
    """

    def __init__(
        self,
        cause: BaseException,
        stack: CapturedStack,
        *,
        category: Category = Category.FOREIGN,
        tag: int = NO_TAG,
    ) -> None:
        super().__init__(cause)
        self._cause = cause
        self._stack = stack
        self._category = category
        self._tag = tag
        self._prefix = ""
        self._type_name = PANIC_TYPE_NAME if category is Category.PANIC else type_label(cause)
        if category in (Category.FOREIGN, Category.PANIC):
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        """The underlying failure."""
        return self._cause

    @property
    def stack(self) -> CapturedStack:
        return self._stack

    @property
    def category(self) -> Category:
        return self._category

    @property
    def tag(self) -> int:
        """Identity tag; 0 means no shared tag."""
        return self._tag

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def type_name(self) -> str:
        """Category label of the underlying failure, "panic" for recovered panics."""
        return self._type_name

    def add_prefix(self, prefix: str) -> DiagnosticError:
        """Prepend prefix to the message, keeping any existing prefix after it."""
        if self._prefix:
            self._prefix = f"{prefix}{PREFIX_SEPARATOR}{self._prefix}"
        else:
            self._prefix = prefix
        return self

    def message(self) -> str:
        msg = str(self._cause)
        if self._prefix:
            msg = f"{self._prefix}{PREFIX_SEPARATOR}{msg}"
        return msg

    def frames(self) -> tuple[StackFrame, ...]:
        return self._stack.frames()

    def render_stack(self) -> str:
        return self._stack.render()

    def full_report(self) -> str:
        """Type name, message and the rendered stack."""
        return f"{self.type_name} {self.message()}\n{self.render_stack()}"

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore, (self._cause, self._stack, self._category, self._tag, self._prefix))

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"DiagnosticError({self.message()!r}, type={self.type_name!r}, tag={self._tag})"


def _restore(
    cause: BaseException,
    stack: CapturedStack,
    category: Category,
    tag: int,
    prefix: str,
) -> DiagnosticError:
    # copy.copy() target; the stack is shared, not re-captured.
    err = DiagnosticError(cause, stack, category=category, tag=tag)
    err._prefix = prefix
    return err


def new_error(value: object) -> DiagnosticError:
    """Build a new DiagnosticError around value, with the caller as top frame.

    Unlike wrap(), value is wrapped even if it already is a DiagnosticError.
    """
    cause, category = as_failure(value)
    return DiagnosticError(cause, capture(1), category=category, tag=allocate())


def wrap(value: object, skip: int = 0) -> DiagnosticError:
    """Wrap value in a DiagnosticError.

    An existing DiagnosticError is returned unchanged. Anything else gets a
    stack starting skip frames above the caller (0 is the caller itself), and a
    fresh identity tag. Non-exception values become a MessageFailure.
    """
    if isinstance(value, DiagnosticError):
        return value
    cause, category = as_failure(value)
    return DiagnosticError(cause, capture(skip + 1), category=category, tag=allocate())


def wrap_prefix(value: object, prefix: str, skip: int = 0) -> DiagnosticError:
    """wrap(), then prepend prefix to the error message."""
    return wrap(value, skip + 1).add_prefix(prefix)


def _formatted(
    pattern: str,
    args: tuple[object, ...],
    skip: int,
    tag: int = NO_TAG,
) -> DiagnosticError:
    # skip=0 puts the caller of _formatted on top of the stack.
    cause = MessageFailure(format_message(pattern, args))
    return DiagnosticError(cause, capture(skip + 1), category=Category.FORMATTED, tag=tag)


def errorf(pattern: str, *args: object) -> DiagnosticError:
    """Build a DiagnosticError from a printf-style pattern.

    The result carries no identity tag; use new_factory() for errors that
    must compare equal across invocations.
    """
    return _formatted(pattern, args, 1)
