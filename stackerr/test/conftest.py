from __future__ import annotations

from collections.abc import Iterator

import pytest

from stackerr.core.config import Config, configure
from stackerr.core.sink import set_sink
from stackerr.test._support import RecordingSink


@pytest.fixture(autouse=True)
def isolated_settings() -> Iterator[None]:
    """Run each test with default settings, ignoring the environment."""
    configure(Config())
    set_sink(None)
    yield
    configure(None)
    set_sink(None)


@pytest.fixture
def sink() -> RecordingSink:
    recording = RecordingSink()
    set_sink(recording)
    return recording
