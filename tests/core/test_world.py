from dataclasses import dataclass

import pytest

from wren.core.events import Event
from wren.core.resources import ResourceManager


@dataclass
class Gravity:
    g: float = 9.81


@dataclass(frozen=True)
class Ping(Event):
    n: int


def test_add_and_get_resource(world):
    gravity = Gravity()
    world.add_resource(gravity)

    assert world.get_resource(Gravity) is gravity
    assert world.try_resource(Gravity) is gravity
    assert world.has_resource(Gravity)


def test_missing_resource(world):
    with pytest.raises(KeyError, match="Resource not found: Gravity"):
        world.get_resource(Gravity)
    assert world.try_resource(Gravity) is None


def test_add_resource_replaces_same_type(world):
    world.add_resource(Gravity(1.0))
    world.add_resource(Gravity(2.0))

    assert world.get_resource(Gravity).g == 2.0


def test_remove_resource(world):
    world.add_resource(Gravity())
    removed = world.remove_resource(Gravity)

    assert isinstance(removed, Gravity)
    assert not world.has_resource(Gravity)


def test_events_are_drained(world):
    world.emit_event(Ping(1))
    world.emit_event(Ping(2))

    assert [e.n for e in world.get_events(Ping)] == [1, 2]
    assert world.get_events(Ping) == []


def test_clear_events(world):
    world.emit_event(Ping(1))
    world.clear_events()

    assert world.get_events(Ping) == []


def test_unread_events_dropped_after_two_updates(world):
    world.emit_event(Ping(1))

    assert world.update_events() == 0
    assert world.update_events() == 1
    assert world.get_events(Ping) == []


def test_events_readable_on_following_tick(world):
    world.emit_event(Ping(1))
    world.update_events()
    world.emit_event(Ping(2))

    assert [e.n for e in world.get_events(Ping)] == [1, 2]
    assert world.update_events() == 0


def test_clear_events_drops_both_ticks(world):
    world.emit_event(Ping(1))
    world.update_events()
    world.emit_event(Ping(2))
    world.clear_events()

    assert world.get_events(Ping) == []


def test_resource_manager_add_returns_replaced():
    manager = ResourceManager()
    first = Gravity(1.0)

    assert manager.add(first) is None
    assert manager.add(Gravity(2.0)) is first
    assert manager.get(Gravity).g == 2.0
    assert Gravity in manager
