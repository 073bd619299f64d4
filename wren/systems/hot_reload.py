from __future__ import annotations

import logging

from wren.assets.reload import HotReloadStrategy
from wren.assets.server import AssetServer
from wren.core.scheduler import Scheduler, Stage
from wren.core.world import World
from wren.types import SystemId

logger = logging.getLogger(__name__)

HOT_RELOAD_SYSTEM = SystemId("hot_reload")


def hot_reload_system(world: World) -> None:
    """
    Advances the HotReloadStrategy to the next tick.
    NOTE: Has to run after every system that checks `is_due()`.
    """
    world.get_resource(HotReloadStrategy).advance()


class HotReloadBundle:
    """
    Activates hot reload for the AssetServer, adds a HotReloadStrategy and
    the `hot_reload_system`.

    The system goes into `Stage.LAST`, ordered after every other system of
    that stage, so all readers of a tick see one stable `is_due()` answer.
    """

    def __init__(self, strategy: HotReloadStrategy | None = None) -> None:
        self.strategy = strategy if strategy is not None else HotReloadStrategy()

    def build(self, world: World, scheduler: Scheduler) -> None:
        server = world.try_resource(AssetServer)
        if server is not None:
            server.hot_reload = True
        else:
            logger.warning(
                "No AssetServer resource, hot reload only advances the strategy"
            )

        world.add_resource(self.strategy)
        scheduler.add_system(
            Stage.LAST, hot_reload_system, name=HOT_RELOAD_SYSTEM, after_all=True
        )
        logger.debug("Hot reload enabled: %r", self.strategy)
