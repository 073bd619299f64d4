from collections import defaultdict
from typing import Any, Dict, List, Type, TypeVar

E = TypeVar("E")


class Event:
    """Base class for all Events."""

    pass


class EventManager:
    """
    Double-buffered event queues.
    An unread event survives the tick it was emitted in and the next one,
    then `update()` drops it.
    """

    def __init__(self):
        self._current: Dict[Type[Any], List[Any]] = defaultdict(list)
        self._previous: Dict[Type[Any], List[Any]] = {}

    def emit(self, event: Any) -> None:
        self._current[type(event)].append(event)

    def get(self, event_type: Type[E]) -> List[E]:
        """Drain both buffers for one event type, oldest first."""
        older = self._previous.pop(event_type, [])
        newer = self._current.pop(event_type, [])
        return older + newer

    def update(self) -> int:
        """End-of-tick swap. Returns how many unread events were dropped."""
        dropped = sum(len(q) for q in self._previous.values())
        self._previous = {t: q for t, q in self._current.items() if q}
        self._current = defaultdict(list)
        return dropped

    def clear_all(self) -> None:
        self._current.clear()
        self._previous.clear()
