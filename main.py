"""
Headless hot-reload demo.

Loads every supported asset below a directory and keeps them fresh while
the files are edited.

Usage:
    python main.py assets/ --reload every:2
    python main.py assets/ --reload triggered   # press Enter to reload
    python main.py assets/ --reload never

Expected keys:
    - Ctrl+C: quit
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from pathlib import Path

from wren import Application, AppSettings
from wren.assets import AssetFailed, AssetLoaded, AssetReloaded, HotReloadStrategy
from wren.assets.reload import Trigger
from wren.core import Stage, World
from wren.debug.logging import configure_logging
from wren.systems import HotReloadBundle

logger = logging.getLogger("wren.demo")


def parse_strategy(value: str) -> HotReloadStrategy:
    """`every:N`, `triggered` or `never`."""
    kind, _, arg = value.partition(":")
    if kind == "every":
        try:
            return HotReloadStrategy.every(float(arg or 1))
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    if kind == "triggered":
        return HotReloadStrategy.when_triggered()
    if kind == "never":
        return HotReloadStrategy.never()
    raise argparse.ArgumentTypeError(f"Unknown reload strategy: {value!r}")


def report_asset_events(world: World) -> None:
    for ev in world.get_events(AssetLoaded):
        logger.info("Loaded %s", ev.path)
    for ev in world.get_events(AssetReloaded):
        logger.info("Reloaded %s", ev.path)
    for ev in world.get_events(AssetFailed):
        logger.warning("%s failed: %s", ev.path, ev.error)


def arm_on_enter(strategy: HotReloadStrategy) -> None:
    for _ in sys.stdin:
        strategy.arm()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("root", type=Path)
    parser.add_argument("--reload", type=parse_strategy, default="every:1")
    parser.add_argument("--tick-rate", type=float, default=30.0)
    parser.add_argument("--ticks", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    settings = AppSettings(
        asset_root=args.root, tick_rate=args.tick_rate, log_level=args.log_level
    )
    configure_logging(settings.log_level)

    app = Application(settings)
    app.add_bundle(HotReloadBundle(args.reload))
    app.scheduler.add_system(Stage.POST_UPDATE, report_asset_events)

    server = app.asset_server
    for path in sorted(args.root.rglob("*")):
        if not path.is_file():
            continue
        rel = path.relative_to(args.root).as_posix()
        try:
            server.format_for(rel)
        except ValueError:
            continue
        server.load(rel)

    if isinstance(args.reload.state, Trigger):
        threading.Thread(
            target=arm_on_enter, args=(args.reload,), daemon=True
        ).start()

    try:
        app.run(max_ticks=args.ticks)
    except KeyboardInterrupt:
        app.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
