from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Optional, TypeVar

from wren.assets.errors import AssetImportError, SourceError
from wren.assets.reload import Reload, SingleFile
from wren.assets.sources import Source

A = TypeVar("A")


@dataclass(frozen=True)
class FormatValue(Generic[A]):
    """Imported data, plus a handle to import it again if requested."""

    data: A
    reload: Optional[Reload[A]] = None


class Format(ABC, Generic[A]):
    """
    Decodes bytes from a Source into a CPU-side asset.
    Instances are copied onto every reload handle, so keep them small and
    free of per-import state. Must be thread-safe.
    """

    NAME: ClassVar[str]

    @abstractmethod
    def decode(self, path: str, data: bytes, options: Any) -> A:
        """Raise ValueError on malformed input."""

    def default_options(self) -> Any:
        return None

    def import_asset(
        self,
        path: str,
        source: Source,
        options: Any,
        create_reload: bool,
    ) -> FormatValue[A]:
        reload: Optional[Reload[A]] = None
        try:
            if create_reload:
                raw, modified = source.load_with_metadata(path)
                reload = SingleFile(self, modified, options, path, source)
            else:
                raw = source.load(path)

            data = self.decode(path, raw, options)
        except (SourceError, ValueError) as e:
            raise AssetImportError(path, self.NAME, str(e)) from e

        return FormatValue(data, reload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
