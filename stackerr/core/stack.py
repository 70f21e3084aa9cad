"""Call-stack capture and frame formatting.

A CapturedStack records raw (code object, line number) pairs at the moment of
capture. Nothing is resolved until frames() is first called; the resolved
frames are then cached for the lifetime of the stack. Frame objects are never
retained, so capturing a stack does not keep any locals alive.
"""

from __future__ import annotations

import linecache
import sys
import threading
from dataclasses import dataclass
from types import CodeType, FrameType, TracebackType

from .config import current_config

__all__ = [
    "StackFrame",
    "CapturedStack",
    "UNKNOWN_FRAME",
    "capture",
]

RawEntry = tuple[CodeType | None, int | None]


@dataclass(frozen=True, slots=True)
class StackFrame:
    """A single resolved stack entry."""

    file: str
    line: int
    function: str
    source: str | None = None

    def __str__(self) -> str:
        text = f"{self.function} ({self.file}:{self.line})\n"
        if self.source:
            text += f"\t{self.source}\n"
        return text


UNKNOWN_FRAME = StackFrame(file="???", line=0, function="???")


def _resolve(entry: RawEntry) -> StackFrame:
    code, lineno = entry
    if code is None or not code.co_filename:
        return UNKNOWN_FRAME

    line = lineno or 0
    source = linecache.getline(code.co_filename, line).strip() if line else ""
    return StackFrame(
        file=code.co_filename,
        line=line,
        function=code.co_qualname,
        source=source or None,
    )


class CapturedStack:
    """A bounded sequence of raw stack entries with lazy resolution."""

    __slots__ = ("_entries", "_frames", "_lock")

    def __init__(self, entries: tuple[RawEntry, ...]) -> None:
        self._entries = entries
        self._frames: tuple[StackFrame, ...] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_frame(cls, frame: FrameType | None, max_depth: int) -> CapturedStack:
        """Walk outward from frame, keeping at most max_depth entries."""
        entries: list[RawEntry] = []
        while frame is not None and len(entries) < max_depth:
            entries.append((frame.f_code, frame.f_lineno))
            frame = frame.f_back
        return cls(tuple(entries))

    @classmethod
    def from_traceback(
        cls,
        tb: TracebackType | None,
        max_depth: int | None = None,
    ) -> CapturedStack:
        """Build a stack from an exception traceback, innermost frame first."""
        depth = current_config().max_stack_depth if max_depth is None else max_depth
        entries: list[RawEntry] = []
        while tb is not None:
            entries.append((tb.tb_frame.f_code, tb.tb_lineno))
            tb = tb.tb_next
        entries.reverse()
        return cls(tuple(entries[: max(depth, 0)]))

    def __len__(self) -> int:
        return len(self._entries)

    def frames(self) -> tuple[StackFrame, ...]:
        """Return the resolved frames, resolving them on first access."""
        frames = self._frames
        if frames is not None:
            return frames
        with self._lock:
            if self._frames is None:
                self._frames = tuple(_resolve(entry) for entry in self._entries)
            return self._frames

    def render(self) -> str:
        """Render the frames the way a conventional stack dump does."""
        return "".join(str(frame) for frame in self.frames())

    def __repr__(self) -> str:
        return f"CapturedStack(depth={len(self._entries)})"


def capture(skip: int = 0, max_depth: int | None = None) -> CapturedStack:
    """Capture the current call stack.

    Args:
        skip: Frames to skip above the caller. 0 makes the caller of capture
            the top frame.
        max_depth: Maximum number of frames kept. Defaults to the configured
            maximum stack depth.

    Returns:
        The captured stack. Empty if skip reaches past the outermost frame.
    """
    depth = current_config().max_stack_depth if max_depth is None else max_depth
    try:
        frame: FrameType | None = sys._getframe(1 + max(skip, 0))
    except ValueError:
        frame = None
    return CapturedStack.from_frame(frame, max(depth, 0))
