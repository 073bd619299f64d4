from __future__ import annotations

import logging
import time
from typing import Protocol

from wren.assets.server import AssetServer
from wren.assets.sources import Directory, Source
from wren.core.scheduler import Scheduler, Stage
from wren.core.settings import AppSettings
from wren.core.world import World
from wren.systems.assets import asset_processing_system

logger = logging.getLogger(__name__)

TICK_STAGES = (Stage.UPDATE, Stage.ASSETS, Stage.POST_UPDATE, Stage.LAST)


class Bundle(Protocol):
    """One-time setup that adds resources and systems."""

    def build(self, world: World, scheduler: Scheduler) -> None: ...


class Application:
    def __init__(
        self,
        settings: AppSettings | None = None,
        source: Source | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.world = World()
        self.scheduler = Scheduler()

        self.asset_server = AssetServer(
            source or Directory(self.settings.asset_root),
            max_workers=self.settings.asset_workers,
        )
        self.world.add_resource(self.settings)
        self.world.add_resource(self.asset_server)
        self.scheduler.add_system(
            Stage.ASSETS, asset_processing_system, name="asset_processing"
        )

        self.tick_count = 0
        self.running = False

    def add_bundle(self, bundle: Bundle) -> Application:
        bundle.build(self.world, self.scheduler)
        return self

    def update(self) -> None:
        """Runs a single tick."""
        if self.tick_count == 0:
            self.scheduler.run_stage(Stage.STARTUP, self.world)

        for stage in TICK_STAGES:
            self.scheduler.run_stage(stage, self.world)

        # Events live for this tick and the next, then unread ones drop.
        dropped = self.world.update_events()
        if dropped:
            logger.debug("Dropped %d unread events", dropped)

        self.tick_count += 1

    def run(self, max_ticks: int | None = None) -> None:
        """
        Ticks at `settings.tick_rate` until `stop()` is called or
        `max_ticks` ticks have run. Shuts the asset workers down on exit.
        """
        self.running = True
        step = self.settings.tick_seconds
        next_tick = time.perf_counter()
        logger.info("Running at %.1f ticks/s", self.settings.tick_rate)

        try:
            while self.running:
                self.update()
                if max_ticks is not None and self.tick_count >= max_ticks:
                    break

                next_tick += step
                delay = next_tick - time.perf_counter()
                if delay > 0:
                    time.sleep(delay)
                else:
                    # Behind schedule, don't try to catch up.
                    next_tick = time.perf_counter()
        finally:
            self.running = False
            self.asset_server.shutdown(wait=True)

    def stop(self) -> None:
        self.running = False
