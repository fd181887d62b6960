import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: str, level: int = logging.DEBUG) -> logging.Logger:
    """Return a logger writing to stderr with the service-wide format.

    Repeated calls with the same name return the same logger without stacking handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def set_level(level: str | int) -> None:
    """Apply ``level`` to every logger created through :func:`get_logger`."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("inventory_service"):
            logging.getLogger(name).setLevel(level)
