from wren.assets.events import AssetFailed, AssetLoaded, AssetReloaded
from wren.assets.reload import HotReloadStrategy
from wren.assets.server import AssetServer
from wren.core.world import World


def asset_processing_system(world: World) -> None:
    """
    Stores finished imports and, on due ticks, starts reloads of stale
    assets. Must run before `hot_reload_system` in the same tick.
    """
    server = world.try_resource(AssetServer)
    if server is None:
        return

    update = server.update(world.try_resource(HotReloadStrategy))

    for asset_id in update.loaded:
        world.emit_event(AssetLoaded(asset_id, server.path_of(asset_id)))
    for asset_id in update.reloaded:
        world.emit_event(AssetReloaded(asset_id, server.path_of(asset_id)))
    for asset_id, error, reloading in update.failed:
        world.emit_event(
            AssetFailed(asset_id, server.path_of(asset_id), error, reloading)
        )
