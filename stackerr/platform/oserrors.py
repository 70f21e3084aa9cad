"""Predicates on raw operating-system failures.

These look only at the value they are given; stackerr.core.predicates applies
them through DiagnosticErrors and ErrorSets.
"""

from __future__ import annotations

import errno

__all__ = ["exists", "not_found", "permission_denied"]

_NOT_FOUND = frozenset({errno.ENOENT})
_EXISTS = frozenset({errno.EEXIST, errno.ENOTEMPTY})
_PERMISSION = frozenset({errno.EACCES, errno.EPERM})


def _errno(exc: object) -> int | None:
    if isinstance(exc, OSError):
        return exc.errno
    return None


def not_found(exc: object) -> bool:
    """True for "file or directory does not exist" failures."""
    return isinstance(exc, FileNotFoundError) or _errno(exc) in _NOT_FOUND


def exists(exc: object) -> bool:
    """True for "file or directory already exists" failures."""
    return isinstance(exc, FileExistsError) or _errno(exc) in _EXISTS


def permission_denied(exc: object) -> bool:
    """True for permission failures."""
    return isinstance(exc, PermissionError) or _errno(exc) in _PERMISSION
