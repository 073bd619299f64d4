from __future__ import annotations

import logging
from typing import Any, List, Type, TypeVar

from wren.core.events import EventManager
from wren.core.resources import ResourceManager

logger = logging.getLogger(__name__)

T = TypeVar("T")
Ev = TypeVar("Ev")


class World:
    """
    Shared context handed to every system.
    Holds global resources (strategies, servers, settings) and event queues.
    """

    def __init__(self) -> None:
        self._resource_manager = ResourceManager()
        self._event_manager = EventManager()

    # RESOURCE MANAGEMENT
    def add_resource(self, resource: Any) -> None:
        """Register a global resource, replacing any of the same type."""
        previous = self._resource_manager.add(resource)
        if previous is not None and previous is not resource:
            logger.debug("Replaced resource %s", type(resource).__name__)

    def get_resource(self, resource_type: Type[T]) -> T:
        """Retrieve a resource. Raises KeyError if missing."""
        return self._resource_manager.get(resource_type)

    def try_resource(self, resource_type: Type[T]) -> T | None:
        """Retrieve a resource or returns None."""
        return self._resource_manager.try_get(resource_type)

    def remove_resource(self, resource_type: Type[T]) -> T | None:
        return self._resource_manager.remove(resource_type)

    def has_resource(self, resource_type: Type[Any]) -> bool:
        return resource_type in self._resource_manager

    # EVENT MANAGEMENT
    def emit_event(self, event: Any) -> None:
        """Queues an event signal."""
        self._event_manager.emit(event)

    def get_events(self, event_type: Type[Ev]) -> List[Ev]:
        """Consumes and returns all events of the given type."""
        return self._event_manager.get(event_type)

    def update_events(self) -> int:
        """Age event queues by one tick. Returns dropped unread events."""
        return self._event_manager.update()

    def clear_events(self) -> None:
        self._event_manager.clear_all()
