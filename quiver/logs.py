"""
Logging for quiver.

Records go to the "quiver" logger through a rich handler on stderr. The logger does
not propagate, so host programs opt in by raising its level:

    from quiver.logs import set_level
    set_level("DEBUG")
"""
import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "quiver"
_configured = False


def _normalize_level(level):
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        if level.isdigit():
            return int(level)
        resolved = logging.getLevelName(level.upper())
        if isinstance(resolved, str):
            raise ValueError(f"unknown logging level: {level}")
        return resolved
    raise TypeError("logging level must be an int or str")


def configure_logger(*, level=logging.WARNING, console=None, force=False):
    """
    Install the rich handler on the package logger.

    Parameters
    - level: int | str, defaults to WARNING.
    - console: rich Console to render on; defaults to a stderr console.
    - force: reconfigure even when a configuration already exists.
    """
    global _configured
    if _configured and not force:
        return

    logger = logging.getLogger(_LOGGER_NAME)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(_normalize_level(level))
    logger.propagate = False
    _configured = True


def get_logger(name=None):
    """
    Return the package logger, or one of its children, configuring defaults on first use.
    """
    if not _configured:
        configure_logger()
    return logging.getLogger(_LOGGER_NAME if not name else f"{_LOGGER_NAME}.{name}")


def set_level(level, name=None):
    get_logger(name).setLevel(_normalize_level(level))


__all__ = (
    "configure_logger",
    "get_logger",
    "set_level",
)
