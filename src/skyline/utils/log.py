import logging

from rich.console import Console
from rich.logging import RichHandler

from skyline.utils.config import settings

LOGGER_NAME = "skyline"
LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"
FALLBACK_LEVEL = logging.WARNING


def resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else FALLBACK_LEVEL


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Returns a logger under the shared 'skyline' namespace.

    The package logger gets a RichHandler the first time it is requested;
    child loggers propagate to it. Unknown level names fall back to WARNING.
    """
    root = logging.getLogger(LOGGER_NAME)

    if not root.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
            log_time_format=LOG_DATE_FORMAT,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(resolve_level(settings.LOG_LEVEL))

    if name == LOGGER_NAME:
        return root
    return root.getChild(name.removeprefix(f"{LOGGER_NAME}."))
