"""Apply raw-failure predicates through wrappers and aggregates."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from stackerr.platform import oserrors

from .error import DiagnosticError
from .errorset import ErrorSet

__all__ = [
    "Predicate",
    "apply_predicate",
    "is_exist",
    "is_not_exist",
    "is_permission",
]

Predicate: TypeAlias = Callable[[object], bool]


def apply_predicate(fn: Predicate, err: object) -> bool:
    """Check fn against the failure(s) underlying err.

    A DiagnosticError is checked through its cause, an ErrorSet through each
    element's cause (first match wins), anything else directly.
    """
    match err:
        case DiagnosticError():
            return fn(err.cause)
        case ErrorSet():
            return any(fn(e.cause) for e in err)
        case _:
            return fn(err)


def is_not_exist(err: object) -> bool:
    return apply_predicate(oserrors.not_found, err)


def is_exist(err: object) -> bool:
    return apply_predicate(oserrors.exists, err)


def is_permission(err: object) -> bool:
    return apply_predicate(oserrors.permission_denied, err)
