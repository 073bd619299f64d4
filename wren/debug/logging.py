from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach one console handler to the `wren` logger.
    Calling it again replaces the handler instead of stacking another one.
    """
    logger = logging.getLogger("wren")
    for handler in list(logger.handlers):
        if getattr(handler, "_wren_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    handler._wren_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
