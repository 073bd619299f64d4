from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from wren.assets.errors import SourceError
from wren.types import Timestamp


class Source(ABC):
    """
    Where asset bytes come from.
    Implementations must be safe to call from several worker threads.
    """

    @abstractmethod
    def modified(self, path: str) -> Timestamp:
        """
        Last-modified marker for `path`, or 0 if the source can't tell.
        Raises SourceError if the path can't be queried.
        """

    @abstractmethod
    def load(self, path: str) -> bytes:
        """Raises SourceError if the path can't be read."""

    def load_with_metadata(self, path: str) -> Tuple[bytes, Timestamp]:
        # Query first so a write racing the read reloads again next time.
        modified = self.modified(path)
        return self.load(path), modified


class Directory(Source):
    """Reads assets from files below `root`."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        return self.root / path

    def modified(self, path: str) -> Timestamp:
        try:
            return self.resolve(path).stat().st_mtime_ns
        except OSError as e:
            raise SourceError(path, f"cannot stat: {e.strerror}") from e

    def load(self, path: str) -> bytes:
        try:
            return self.resolve(path).read_bytes()
        except OSError as e:
            raise SourceError(path, f"cannot read: {e.strerror}") from e

    def __repr__(self) -> str:
        return f"Directory({str(self.root)!r})"
