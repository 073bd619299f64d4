from wren.assets.errors import (
    AssetError,
    AssetImportError,
    ReloadConsumedError,
    SourceError,
)
from wren.assets.events import AssetFailed, AssetLoaded, AssetReloaded
from wren.assets.formats import (
    Format,
    FormatValue,
    ObjFormat,
    ShaderFormat,
    TextureFormat,
    TextureOptions,
)
from wren.assets.handle import AssetHandle
from wren.assets.reload import HotReloadStrategy, Reload, SingleFile
from wren.assets.server import AssetServer, AssetUpdate
from wren.assets.sources import Directory, Source
from wren.assets.types import MeshData, ShaderSource, TextureData, VertexLayout
from wren.types import AssetId

__all__ = [
    "AssetServer",
    "AssetUpdate",
    "AssetHandle",
    "AssetId",
    "Source",
    "Directory",
    "Format",
    "FormatValue",
    "ObjFormat",
    "ShaderFormat",
    "TextureFormat",
    "TextureOptions",
    "Reload",
    "SingleFile",
    "HotReloadStrategy",
    "AssetLoaded",
    "AssetReloaded",
    "AssetFailed",
    "AssetError",
    "AssetImportError",
    "ReloadConsumedError",
    "SourceError",
    "MeshData",
    "TextureData",
    "ShaderSource",
    "VertexLayout",
]
