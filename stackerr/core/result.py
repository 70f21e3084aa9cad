"""Result type for explicit error handling.

Recovery and configuration loading report failures as values rather than
raising. A Result is either Ok(value) or Err(error):

    match recover(parse, text):
        case Ok(value):
            use(value)
        case Err(error):
            print(error.full_report())
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Never, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value.
    """

    value: T

    def unwrap(self) -> T:
        """Returns the contained value."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value.
    """

    error: E

    def unwrap(self) -> Never:
        """Raises the contained error.

        Raises:
            The error itself when it is an exception, ValueError otherwise.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"called unwrap on Err: {self.error}")

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
