"""Tests for stackerr.core.tags module."""

from __future__ import annotations

import threading

from stackerr.core.tags import NO_TAG, TagAllocator, allocate


class TestTagAllocator:
    def test_starts_at_one(self) -> None:
        allocator = TagAllocator()
        assert allocator.allocate() == 1
        assert allocator.allocate() == 2

    def test_never_hands_out_no_tag(self) -> None:
        allocator = TagAllocator()
        assert NO_TAG not in {allocator.allocate() for _ in range(100)}

    def test_concurrent_allocation_is_unique(self) -> None:
        allocator = TagAllocator()
        tags: list[int] = []
        lock = threading.Lock()

        def worker() -> None:
            local = [allocator.allocate() for _ in range(500)]
            with lock:
                tags.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(tags) == 4000
        assert len(set(tags)) == 4000
        assert sorted(tags) == list(range(1, 4001))


def test_process_allocator_is_monotonic() -> None:
    first = allocate()
    second = allocate()
    assert second > first > NO_TAG
