from wren.core.events import Event
from wren.core.scheduler import Scheduler, Stage
from wren.core.settings import AppSettings
from wren.core.world import World

__all__ = ["AppSettings", "Event", "Scheduler", "Stage", "World"]
