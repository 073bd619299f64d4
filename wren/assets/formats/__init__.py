from wren.assets.formats.base import Format, FormatValue
from wren.assets.formats.mesh import ObjFormat
from wren.assets.formats.shader import ShaderFormat
from wren.assets.formats.texture import TextureFormat, TextureOptions

__all__ = [
    "Format",
    "FormatValue",
    "ObjFormat",
    "ShaderFormat",
    "TextureFormat",
    "TextureOptions",
]
