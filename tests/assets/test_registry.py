from wren.assets.registry import AssetRegistry
from wren.types import AssetId


def test_store_counts_versions():
    registry = AssetRegistry()
    asset_id = AssetId(7)

    assert registry.version(asset_id) == 0
    assert registry.store(asset_id, "v1") is None
    assert registry.store(asset_id, "v2") == "v1"

    assert registry.get(asset_id) == "v2"
    assert registry.version(asset_id) == 2


def test_clear_resets_versions():
    registry = AssetRegistry()
    registry.store(AssetId(7), "v1")

    registry.clear()

    assert AssetId(7) not in registry
    assert registry.version(AssetId(7)) == 0
