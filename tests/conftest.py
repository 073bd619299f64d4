import threading
from typing import Any, Dict, Tuple

import pytest

from wren.assets.errors import SourceError
from wren.assets.formats.base import Format
from wren.assets.sources import Source
from wren.core.world import World


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class MemorySource(Source):
    """In-memory files with explicit modification markers."""

    def __init__(self):
        self._files: Dict[str, Tuple[bytes, int]] = {}
        self._broken: Dict[str, Exception] = {}
        self._lock = threading.Lock()
        self.loads = 0

    def write(self, path: str, data: bytes, modified: int) -> None:
        with self._lock:
            self._files[path] = (data, modified)

    def break_queries(self, path: str) -> None:
        self.fail_with(path, SourceError(path, "query failed"))

    def fail_with(self, path: str, error: Exception) -> None:
        """Make `modified` raise `error` for this path."""
        self._broken[path] = error

    def modified(self, path: str) -> int:
        if path in self._broken:
            raise self._broken[path]
        with self._lock:
            if path not in self._files:
                raise SourceError(path, "no such file")
            return self._files[path][1]

    def load(self, path: str) -> bytes:
        with self._lock:
            if path not in self._files:
                raise SourceError(path, "no such file")
            self.loads += 1
            return self._files[path][0]


class TextFormat(Format[str]):
    """UTF-8 text. Data starting with `!` is rejected."""

    NAME = "text"

    def decode(self, path: str, data: bytes, options: Any) -> str:
        text = data.decode("utf-8")
        if text.startswith("!"):
            raise ValueError(f"Rejected content in {path}")
        if options and options.get("upper"):
            text = text.upper()
        return text


@pytest.fixture
def world():
    """Returns a fresh World instance for each test."""
    return World()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def source():
    return MemorySource()
