from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Generic, TypeVar

from wren.types import AssetId

T = TypeVar("T")  # Type of data (MeshData, TextureData)


@dataclass(frozen=True)
class AssetHandle(Generic[T]):
    """
    Lightweight reference to an asset.
    Holding this does not guarantee that the asset is loaded.
    """

    id: AssetId
    path: str

    @staticmethod
    def for_path(path: str) -> AssetHandle:
        asset_id = AssetId(
            int(hashlib.sha256(path.encode()).hexdigest(), 16) % (10**16)
        )
        return AssetHandle(asset_id, path)
