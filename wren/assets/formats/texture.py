import io
from dataclasses import dataclass

from PIL import Image

from wren.assets.formats.base import Format
from wren.assets.types import TextureData


@dataclass(frozen=True)
class TextureOptions:
    # OpenGL samples textures bottom-up.
    flip_y: bool = False


class TextureFormat(Format[TextureData]):
    NAME = "texture"

    def default_options(self) -> TextureOptions:
        return TextureOptions()

    def decode(
        self, path: str, data: bytes, options: TextureOptions
    ) -> TextureData:
        try:
            with Image.open(io.BytesIO(data)) as img:
                converted = img.convert("RGBA")
        except OSError as e:
            raise ValueError(f"Unreadable image data in {path}: {e}") from e

        if options is not None and options.flip_y:
            converted = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

        width, height = converted.size
        return TextureData(
            data=converted.tobytes(), width=width, height=height, components=4
        )
