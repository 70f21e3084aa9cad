"""Recover escaping exceptions as "panic" DiagnosticErrors.

A panic is an exception nobody expected. Recovering it keeps the stack of the
place it was raised from and reports "panic" as its type name:

    match recover(handler, request):
        case Ok(response):
            ...
        case Err(error):
            errs = add(errs, error)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ParamSpec, TypeVar

from .error import DiagnosticError
from .failure import Category
from .result import Err, Ok, Result
from .stack import CapturedStack, capture
from .tags import allocate

__all__ = ["panic_error", "recover"]

P = ParamSpec("P")
T = TypeVar("T")


def panic_error(exc: BaseException) -> DiagnosticError:
    """Wrap exc as a recovered panic.

    The stack comes from exc's traceback when it has one, otherwise from the
    caller of panic_error.
    """
    if exc.__traceback__ is not None:
        stack = CapturedStack.from_traceback(exc.__traceback__)
    else:
        stack = capture(1)
    return DiagnosticError(exc, stack, category=Category.PANIC, tag=allocate())


def recover(
    fn: Callable[P, T],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Result[T, DiagnosticError]:
    """Call fn, turning any Exception it raises into Err(panic_error(exc)).

    A raised DiagnosticError is returned as is. KeyboardInterrupt, SystemExit
    and other non-Exception exceptions are not recovered.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except DiagnosticError as exc:
        return Err(exc)
    except Exception as exc:
        return Err(panic_error(exc))
