from typing import Any, Dict, Optional

from wren.types import AssetId


class AssetRegistry:
    """
    CPU-side asset data by AssetId, one live version per asset.
    A reload swaps the entry; the previous version is handed back so the
    caller can release anything it holds.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, Any] = {}
        self._versions: Dict[AssetId, int] = {}

    def store(self, asset_id: AssetId, data: Any) -> Optional[Any]:
        """Register loaded data. Returns the replaced version, if any."""
        previous = self._storage.get(asset_id)
        self._storage[asset_id] = data
        self._versions[asset_id] = self._versions.get(asset_id, 0) + 1
        return previous

    def get(self, asset_id: AssetId) -> Optional[Any]:
        return self._storage.get(asset_id)

    def version(self, asset_id: AssetId) -> int:
        """1 after the first load, +1 per reload. 0 if never stored."""
        return self._versions.get(asset_id, 0)

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._storage

    def clear(self) -> None:
        """Clear all loaded assets (use with caution)."""
        self._storage.clear()
        self._versions.clear()
