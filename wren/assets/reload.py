"""
Hot reloading of loaded assets.

Two pieces live here:

* `HotReloadStrategy` decides, once per tick, whether this tick should check
  assets for changes. It is a world resource, advanced at the end of every
  tick by `hot_reload_system`.
* `Reload` is a per-asset handle that knows whether its asset went stale and
  how to import it again. `SingleFile` is the implementation formats hand
  out for assets backed by one file.
"""

from __future__ import annotations

import copy
import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, Union

from wren.assets.errors import ReloadConsumedError
from wren.assets.sources import Source
from wren.types import Timestamp

if TYPE_CHECKING:
    from wren.assets.formats.base import Format, FormatValue

logger = logging.getLogger(__name__)

A = TypeVar("A")

Clock = Callable[[], float]


# STRATEGY


@dataclass(frozen=True)
class Every:
    interval: float  # seconds
    last: float  # clock reading of the last due tick
    due: bool = False


@dataclass(frozen=True)
class Trigger:
    armed: bool = False


@dataclass(frozen=True)
class Never:
    pass


StrategyState = Union[Every, Trigger, Never]


class HotReloadStrategy:
    """
    World resource configuring when hot reloads happen.

    Example:
        # Assets will be checked every two seconds
        world.add_resource(HotReloadStrategy.every(2))

    `is_due()` is stable for the whole tick. Only `advance()` (run by
    `hot_reload_system` in `Stage.LAST`) and `arm()` change the state, and
    both swap in a new immutable state object.
    """

    def __init__(
        self,
        state: StrategyState | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._state: StrategyState = (
            state if state is not None else Every(1, clock())
        )

    @classmethod
    def every(cls, n: float, clock: Clock = time.monotonic) -> HotReloadStrategy:
        """Causes hot reloads every `n` seconds. 0 means every tick."""
        if n < 0:
            raise ValueError(f"Reload interval must not be negative, got {n}")
        return cls(Every(n, clock()), clock)

    @classmethod
    def when_triggered(cls, clock: Clock = time.monotonic) -> HotReloadStrategy:
        """Reloads only on the tick after `arm()` was called."""
        return cls(Trigger(), clock)

    @classmethod
    def never(cls) -> HotReloadStrategy:
        return cls(Never())

    @property
    def state(self) -> StrategyState:
        return self._state

    def arm(self) -> None:
        """
        Reports due until the next `advance()`, so the next asset
        processing pass reloads all changed assets.
        Doesn't do anything unless the strategy came from `when_triggered`.
        """
        with self._lock:
            if isinstance(self._state, Trigger):
                self._state = Trigger(armed=True)

    def is_due(self) -> bool:
        state = self._state
        if isinstance(state, Every):
            return state.due
        if isinstance(state, Trigger):
            return state.armed
        return False

    def advance(self) -> None:
        """Move to the next tick. Call after every `is_due()` reader ran."""
        with self._lock:
            state = self._state
            if isinstance(state, Every):
                now = self._clock()
                if now - state.last > state.interval:
                    logger.debug("Hot reload due after %.2fs", now - state.last)
                    self._state = replace(state, due=True, last=now)
                else:
                    self._state = replace(state, due=False)
            elif isinstance(state, Trigger):
                self._state = Trigger(armed=False)

    def __repr__(self) -> str:
        return f"HotReloadStrategy({self._state!r})"


# RELOAD HANDLES


class Reload(ABC, Generic[A]):
    """
    Checks whether an asset needs to be reloaded, and reloads it.

    `reload()` consumes the handle: any later use raises ReloadConsumedError.
    Storage that wants to keep checking an asset while a reload is running
    should keep `duplicate()` around.
    """

    _consumed: bool = False

    @abstractmethod
    def needs_reload(self) -> bool:
        """Checks if a reload is necessary. Never raises for query errors."""

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def format_name(self) -> str:
        pass

    @abstractmethod
    def duplicate(self) -> Reload[A]:
        """An independent handle carrying the same reload data."""

    @abstractmethod
    def _reload(self) -> FormatValue[A]:
        pass

    @property
    def consumed(self) -> bool:
        return self._consumed

    def reload(self) -> FormatValue[A]:
        """
        Imports the asset again. The returned value carries the handle for
        the next generation. Import errors propagate unchanged.
        """
        self._ensure_live()
        self._consumed = True
        return self._reload()

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ReloadConsumedError(
                f"{type(self).__name__} was already consumed by reload()"
            )


class SingleFile(Reload[A]):
    """
    Stores the modification time and path of a single-file asset.
    `modified == 0` means freshness is unknown: the handle never reports
    itself stale.
    """

    def __init__(
        self,
        format: Format[A],
        modified: Timestamp,
        options: Any,
        path: str,
        source: Source,
    ) -> None:
        self.format = format
        self.modified = modified
        self.options = options
        self.path = path
        self.source = source

    def needs_reload(self) -> bool:
        self._ensure_live()
        if self.modified == 0:
            return False

        try:
            current = self.source.modified(self.path)
        except Exception as e:
            # Any query failure reads as "freshness unknown".
            logger.debug("Cannot query %s for changes: %r", self.path, e)
            return False

        return current > self.modified

    def name(self) -> str:
        self._ensure_live()
        return self.path

    def format_name(self) -> str:
        self._ensure_live()
        return self.format.NAME

    def duplicate(self) -> SingleFile[A]:
        self._ensure_live()
        return SingleFile(
            copy.copy(self.format),
            self.modified,
            copy.copy(self.options),
            self.path,
            self.source,
        )

    def _reload(self) -> FormatValue[A]:
        # The stale timestamp is dropped, the import reports a fresh one.
        format, path, source, options = (
            self.format,
            self.path,
            self.source,
            self.options,
        )
        return format.import_asset(path, source, options, True)

    def __repr__(self) -> str:
        return (
            f"SingleFile(path={self.path!r}, format={self.format.NAME!r}, "
            f"modified={self.modified})"
        )
