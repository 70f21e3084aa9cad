"""Tests for stackerr.core.stack module."""

from __future__ import annotations

import sys
import threading
from types import CodeType

import pytest

from stackerr.core.config import Config, configure
from stackerr.core.stack import UNKNOWN_FRAME, CapturedStack, StackFrame, capture


def _chain(n: int, max_depth: int) -> CapturedStack:
    if n == 0:
        return capture(max_depth=max_depth)
    return _chain(n - 1, max_depth)


def _capture_above(skip: int) -> CapturedStack:
    return capture(skip)


def _raise_inner() -> None:
    raise ValueError("inner")


def _raise_outer() -> None:
    _raise_inner()


class TestStackFrame:
    """Test StackFrame formatting."""

    def test_str_with_source(self) -> None:
        frame = StackFrame(file="/src/app.py", line=12, function="load", source="x = y()")
        assert str(frame) == "load (/src/app.py:12)\n\tx = y()\n"

    def test_str_without_source(self) -> None:
        frame = StackFrame(file="/src/app.py", line=12, function="load")
        assert str(frame) == "load (/src/app.py:12)\n"

    def test_unknown_frame(self) -> None:
        assert str(UNKNOWN_FRAME) == "??? (???:0)\n"

    def test_frozen(self) -> None:
        frame = StackFrame(file="a.py", line=1, function="f")
        with pytest.raises(AttributeError):
            frame.line = 2  # type: ignore[misc]


class TestCapture:
    """Test capture() frame selection."""

    def test_top_frame_is_caller(self) -> None:
        here = sys._getframe().f_code
        stack = capture()
        top = stack.frames()[0]
        assert top.function == here.co_qualname
        assert top.file == here.co_filename
        assert top.source == "stack = capture()"

    def test_max_depth_bounds_frames(self) -> None:
        stack = _chain(9, max_depth=3)
        frames = stack.frames()
        assert len(frames) == 3
        assert len(stack) == 3
        assert all(f.function == "_chain" for f in frames)
        assert frames[0].source == "return capture(max_depth=max_depth)"

    def test_default_depth_from_config(self) -> None:
        configure(Config(max_stack_depth=2))
        assert len(capture()) == 2

    def test_skip_moves_top_frame_up(self) -> None:
        here = sys._getframe().f_code.co_qualname
        stack = _capture_above(1)
        assert stack.frames()[0].function == here

    def test_skip_past_outermost_frame_is_empty(self) -> None:
        stack = capture(skip=100_000)
        assert len(stack) == 0
        assert stack.frames() == ()
        assert stack.render() == ""

    def test_zero_depth(self) -> None:
        assert capture(max_depth=0).frames() == ()


class TestCapturedStack:
    """Test lazy resolution and rendering."""

    def test_frames_are_memoized(self) -> None:
        stack = capture()
        assert stack.frames() is stack.frames()

    def test_concurrent_first_read_converges(self) -> None:
        stack = _chain(20, max_depth=25)
        results: list[tuple[StackFrame, ...]] = []
        lock = threading.Lock()

        def read() -> None:
            frames = stack.frames()
            with lock:
                results.append(frames)

        threads = [threading.Thread(target=read) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_render_concatenates_frames(self) -> None:
        stack = _chain(2, max_depth=3)
        assert stack.render() == "".join(str(f) for f in stack.frames())
        assert stack.render().startswith("_chain (")

    def test_unresolvable_entry_yields_unknown_frame(self) -> None:
        stack = CapturedStack(((None, None),))
        assert stack.frames() == (UNKNOWN_FRAME,)

    def test_from_traceback_innermost_first(self) -> None:
        try:
            _raise_outer()
        except ValueError as exc:
            stack = CapturedStack.from_traceback(exc.__traceback__)

        names = [f.function for f in stack.frames()]
        assert names[0] == "_raise_inner"
        assert names[1] == "_raise_outer"
        assert names[2].endswith("test_from_traceback_innermost_first")

    def test_from_traceback_respects_max_depth(self) -> None:
        try:
            _raise_outer()
        except ValueError as exc:
            stack = CapturedStack.from_traceback(exc.__traceback__, max_depth=1)

        assert [f.function for f in stack.frames()] == ["_raise_inner"]

    def test_keeps_code_objects_not_frames(self) -> None:
        stack = capture()
        assert all(isinstance(code, CodeType) for code, _ in stack._entries)
