"""Tests for stackerr.core.recover module."""

from __future__ import annotations

import sys

import pytest

from stackerr.core.error import DiagnosticError, wrap
from stackerr.core.failure import Category
from stackerr.core.identity import same_origin
from stackerr.core.recover import panic_error, recover
from stackerr.core.result import Err, Ok


def _explode(message: str) -> int:
    raise RuntimeError(message)


def _divide(a: int, b: int) -> float:
    return a / b


class TestRecover:
    """Test recover() outcomes."""

    def test_returns_ok(self) -> None:
        assert recover(_divide, 6, b=3) == Ok(2.0)

    def test_exception_becomes_panic(self) -> None:
        result = recover(_explode, "kaboom")
        assert isinstance(result, Err)
        err = result.error
        assert err.type_name == "panic"
        assert err.category is Category.PANIC
        assert err.message() == "kaboom"
        assert isinstance(err.cause, RuntimeError)

    def test_panic_stack_points_at_raise_site(self) -> None:
        result = recover(_explode, "kaboom")
        assert isinstance(result, Err)
        top = result.error.frames()[0]
        assert top.function == "_explode"
        assert top.source == "raise RuntimeError(message)"

    def test_panic_report_starts_with_panic(self) -> None:
        result = recover(_divide, 1, 0)
        assert isinstance(result, Err)
        assert result.error.full_report().startswith("panic division by zero\n")

    def test_diagnostic_error_passes_through(self) -> None:
        err = wrap("known")

        def fail() -> None:
            raise err

        result = recover(fail)
        assert isinstance(result, Err)
        assert result.error is err

    def test_keyboard_interrupt_propagates(self) -> None:
        def interrupt() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            recover(interrupt)

    def test_unwrap_reraises_panic(self) -> None:
        result = recover(_explode, "kaboom")
        with pytest.raises(DiagnosticError, match="kaboom"):
            result.unwrap()


class TestPanicError:
    """Test panic_error() construction."""

    def test_without_traceback_uses_caller(self) -> None:
        err = panic_error(ValueError("never raised"))
        assert err.frames()[0].function == sys._getframe().f_code.co_qualname

    def test_matches_its_cause(self) -> None:
        exc = ValueError("x")
        assert same_origin(panic_error(exc), exc)

    def test_gets_own_tag(self) -> None:
        assert panic_error(ValueError("x")).tag != 0
