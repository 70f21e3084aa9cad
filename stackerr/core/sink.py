"""Verbosity-gated log sink.

ErrorSet.add() reports each added failure here. Nothing is emitted unless the
configured verbosity reaches the log threshold, so the sink is purely
observational.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Protocol

from .config import current_config

if TYPE_CHECKING:
    from stackerr.output.console import ConsoleProtocol

__all__ = [
    "LogSink",
    "ConsoleSink",
    "get_sink",
    "log_failure",
    "set_sink",
]


class LogSink(Protocol):
    """Receives failures as they are added to an ErrorSet."""

    def emit(self, failure: object) -> None:
        """Record one failure."""
        ...


class ConsoleSink:
    """Sink writing each failure as an error line on a console."""

    def __init__(self, console: ConsoleProtocol) -> None:
        self._console = console

    def emit(self, failure: object) -> None:
        self._console.error(str(failure))


_lock = threading.Lock()
_sink: LogSink | None = None


def _default_sink() -> LogSink:
    from stackerr.output.console import RichConsole

    return ConsoleSink(RichConsole(stderr=True))


def set_sink(sink: LogSink | None) -> None:
    """Install sink. None restores the default stderr sink on next use."""
    global _sink
    with _lock:
        _sink = sink


def get_sink() -> LogSink:
    global _sink
    with _lock:
        if _sink is None:
            _sink = _default_sink()
        return _sink


def log_failure(failure: object) -> bool:
    """Emit failure if verbosity allows it. Returns True when emitted."""
    if not current_config().log_enabled:
        return False
    get_sink().emit(failure)
    return True
