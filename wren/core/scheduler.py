from __future__ import annotations

import logging
from enum import Enum, auto
from graphlib import CycleError, TopologicalSorter
from typing import Callable, Dict, List, Union

from wren.core.world import World
from wren.types import SystemId

logger = logging.getLogger(__name__)


class Stage(Enum):
    STARTUP = auto()  # Run once before the first tick
    UPDATE = auto()  # Game logic, may arm reload triggers
    ASSETS = auto()  # Asset processing, consults the reload strategy
    POST_UPDATE = auto()  # Consumers of asset events
    LAST = auto()  # End-of-tick bookkeeping (reload strategy advance)


SystemFn = Callable[[World], None]
SystemDeps = Union[SystemId, str, List[SystemId], List[str], None]


class Scheduler:
    """
    Runs systems stage by stage. Inside a stage, order is derived from
    the `before` / `after` constraints declared at registration.
    """

    def __init__(self):
        self._registered_systems: List[dict] = []

        self._execution_order: Dict[Stage, List[SystemFn]] = {
            s: [] for s in Stage
        }
        self._is_compiled = False

    def add_system(
        self,
        stage: Stage,
        system: SystemFn,
        name: Union[SystemId, str, None] = None,
        before: SystemDeps = None,
        after: SystemDeps = None,
        after_all: bool = False,
    ) -> SystemId:
        """
        Register a simple function as a system.
        `after_all` orders it after every other system of its stage,
        including ones registered later. Only one per stage.
        """
        if self._is_compiled:
            raise RuntimeError(
                "Cannot add systems after scheduler is compiled."
            )

        sys_name = SystemId(name or getattr(system, "__name__"))
        if any(e["name"] == sys_name for e in self._registered_systems):
            raise ValueError(f"System already registered: {sys_name}")
        if after_all and any(
            e["after_all"] and e["stage"] is stage
            for e in self._registered_systems
        ):
            raise ValueError(
                f"Stage {stage.name} already has a system ordered after all"
            )

        before_deps = [before] if isinstance(before, str) else (before or [])
        after_deps = [after] if isinstance(after, str) else (after or [])

        self._registered_systems.append(
            {
                "stage": stage,
                "func": system,
                "name": sys_name,
                "before": list(before_deps),
                "after": list(after_deps),
                "after_all": after_all,
            }
        )
        return sys_name

    def system_names(self, stage: Stage) -> List[SystemId]:
        """Registered names for a stage, in registration order."""
        return [
            e["name"] for e in self._registered_systems if e["stage"] is stage
        ]

    def compile(self) -> None:
        by_stage: Dict[Stage, List[dict]] = {s: [] for s in Stage}
        for entry in self._registered_systems:
            by_stage[entry["stage"]].append(entry)

        for stage, entries in by_stage.items():
            sorter: TopologicalSorter = TopologicalSorter()
            name_map = {}

            for entry in entries:
                name = entry["name"]
                name_map[name] = entry["func"]
                sorter.add(name, *entry["after"])

            for entry in entries:
                for successor in entry["before"]:
                    sorter.add(successor, entry["name"])

            for entry in entries:
                if entry["after_all"]:
                    others = [e["name"] for e in entries if e is not entry]
                    sorter.add(entry["name"], *others)

            try:
                sorted_names = list(sorter.static_order())
            except CycleError as e:
                raise RuntimeError(
                    f"Cycle detected in stage {stage.name}: {e.args[1]}"
                ) from e

            # Dependencies on systems from other stages are ignored here,
            # stage order already covers them.
            self._execution_order[stage] = [
                name_map[name] for name in sorted_names if name in name_map
            ]
            logger.debug(
                "Stage %s order: %s",
                stage.name,
                [n for n in sorted_names if n in name_map],
            )

        self._is_compiled = True

    def run_stage(self, stage: Stage, world: World) -> None:
        if not self._is_compiled:
            self.compile()

        for system in self._execution_order[stage]:
            system(world)

    def clear(self):
        for stage in Stage:
            self._execution_order[stage].clear()

        self._registered_systems.clear()
        self._is_compiled = False
