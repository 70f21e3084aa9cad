"""Identity tag allocation.

Tags mark a group of errors as sharing one origin. They are handed out by a
single process-wide allocator so that no two factories or errors ever see
the same value.
"""

from __future__ import annotations

import threading

__all__ = ["NO_TAG", "TagAllocator", "allocate"]

NO_TAG = 0


class TagAllocator:
    """Monotonically increasing tag counter.

    The first allocated tag is 1; 0 is reserved for "no shared tag".
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def allocate(self) -> int:
        with self._lock:
            tag = self._next
            self._next += 1
        return tag


_allocator = TagAllocator()


def allocate() -> int:
    """Return a fresh process-wide tag."""
    return _allocator.allocate()
