"""Shared test doubles."""

from __future__ import annotations


class RecordingSink:
    """Log sink keeping every emitted failure."""

    def __init__(self) -> None:
        self.failures: list[object] = []

    def emit(self, failure: object) -> None:
        self.failures.append(failure)
