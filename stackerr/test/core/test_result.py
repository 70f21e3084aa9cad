"""Tests for stackerr.core.result module."""

import pytest

from stackerr.core.error import DiagnosticError, wrap
from stackerr.core.result import Err, Ok, Result


class TestOk:
    """Tests for Ok type."""

    def test_ok_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_ok_repr(self) -> None:
        assert repr(Ok(42)) == "Ok(42)"


class TestErr:
    """Tests for Err type."""

    def test_err_unwrap_raises_contained_exception(self) -> None:
        err = wrap("boom")
        with pytest.raises(DiagnosticError) as info:
            Err(err).unwrap()
        assert info.value is err

    def test_err_unwrap_non_exception_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("something went wrong").unwrap()

    def test_err_repr(self) -> None:
        assert repr(Err("x")) == "Err('x')"


def test_pattern_matching() -> None:
    result: Result[int, str] = Err("nope")
    match result:
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "nope"
