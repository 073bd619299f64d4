from wren.systems.assets import asset_processing_system
from wren.systems.hot_reload import (
    HOT_RELOAD_SYSTEM,
    HotReloadBundle,
    hot_reload_system,
)

__all__ = [
    "asset_processing_system",
    "hot_reload_system",
    "HotReloadBundle",
    "HOT_RELOAD_SYSTEM",
]
