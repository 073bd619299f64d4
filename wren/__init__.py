from wren.core.application import Application
from wren.core.settings import AppSettings

__all__ = ["Application", "AppSettings"]
