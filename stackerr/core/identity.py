"""Identity comparison across wrapped, formatted and aggregated failures.

same_origin(a, b) decides whether two failure values come from the same
origin. The checks run in a fixed order:

1. a and b are the same object.
2. A factory on either side stands for one of its invocations.
3. a is a DiagnosticError and its cause matches b.
4. b is a DiagnosticError and a matches its cause.
5. Both are DiagnosticErrors with the same non-zero tag.
6. a is an ErrorSet and some element matches b.
7. b is an ErrorSet and a matches some element.

Structural unwrapping (3, 4) runs before tag comparison (5), so an error
always matches what it directly wraps. Each side is unwrapped once into its
chain of causes and every pair of links is compared, so the cost grows with
the product of the two wrapping depths. Error graphs must not contain cycles.
"""

from __future__ import annotations

from .error import DiagnosticError
from .errorset import ErrorSet
from .factory import FormattedFactory
from .tags import NO_TAG

__all__ = ["same_origin"]


def _unwrap_chain(value: object) -> list[object]:
    # [value, value.cause, value.cause.cause, ...] down to the first non-DiagnosticError.
    chain = [value]
    while isinstance(value, DiagnosticError):
        value = value.cause
        chain.append(value)
    return chain


def _direct_match(a: object, b: object) -> bool:
    if a is b:
        return True
    match a, b:
        case DiagnosticError(), DiagnosticError():
            return a.tag != NO_TAG and a.tag == b.tag
        case ErrorSet(), _:
            return a.contains_origin(b)
        case _, ErrorSet():
            return b.contains_origin(a)
        case _:
            return False


def same_origin(a: object, b: object) -> bool:
    """Return True if a and b are the same underlying failure."""
    if a is b:
        return True

    if isinstance(a, FormattedFactory):
        return same_origin(a(), b)
    if isinstance(b, FormattedFactory):
        return same_origin(a, b())

    # Unwrapping either side in any order reaches every pair of chain links.
    chain_b = _unwrap_chain(b)
    return any(_direct_match(x, y) for x in _unwrap_chain(a) for y in chain_b)
