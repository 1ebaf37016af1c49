from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)-7s %(name)s: %(message)s"


def configure_swarmgen_logging(*, level: int = logging.INFO, fmt: str = LOG_FORMAT) -> logging.Handler | None:
    """
    Configure a console logger for swarmgen runs.

    Records are prefixed with their level and logger name, so progress from
    ``swarmgen.engine.loggers`` can be told apart from optimizer and
    experiment messages.

    Notes:
        - This is opt-in; library code never calls logging.basicConfig().
        - The handler is only attached if neither the root logger nor the "swarmgen" logger has handlers.

    Returns:
        The attached handler, or None when logging was already configured.
    """
    root = logging.getLogger()
    swarmgen_logger = logging.getLogger("swarmgen")

    if root.handlers or swarmgen_logger.handlers:
        return None

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    swarmgen_logger.addHandler(handler)
    swarmgen_logger.setLevel(level)
    swarmgen_logger.propagate = False
    return handler


__all__ = ["LOG_FORMAT", "configure_swarmgen_logging"]
