from __future__ import annotations

from logging import DEBUG, getLevelName, INFO, Logger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quart import Quart  # noqa


def _resolve_level(app: Quart) -> int:
    name = app.config.get("LOG_LEVEL")
    if name is None:
        return DEBUG if app.debug else INFO
    # Numeric levels arrive as ints from JSON decoded CALCDEMO_LOG_LEVEL
    if isinstance(name, int) and not isinstance(name, bool):
        return name
    if isinstance(name, str) and name.isascii() and name.strip().isdigit():
        return int(name)
    level = getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def configure_logging(app: Quart) -> Logger:
    """Set the app logger level from the ``LOG_LEVEL`` config value.

    Quart attaches its default handler to the logger on first access,
    this only decides how verbose it is.
    """
    logger = app.logger
    logger.setLevel(_resolve_level(app))
    return logger
