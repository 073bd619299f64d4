from typing import Any

from wren.assets.formats.base import Format
from wren.assets.types import ShaderSource


class ShaderFormat(Format[ShaderSource]):
    NAME = "shader"

    def decode(self, path: str, data: bytes, options: Any) -> ShaderSource:
        return ShaderSource(source=data.decode("utf-8"), path=path)
