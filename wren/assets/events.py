from dataclasses import dataclass

from wren.core.events import Event
from wren.types import AssetId


@dataclass(frozen=True)
class AssetLoaded(Event):
    asset_id: AssetId
    path: str


@dataclass(frozen=True)
class AssetReloaded(Event):
    asset_id: AssetId
    path: str


@dataclass(frozen=True)
class AssetFailed(Event):
    """A load or reload failed. On reload, the previous data is still live."""

    asset_id: AssetId
    path: str
    error: Exception
    reloading: bool
