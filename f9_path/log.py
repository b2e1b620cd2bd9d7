"""Logging configuration using loguru.

The package disables its own loguru records on import so that applications
embedding it see nothing by default. :func:`configure_logging` installs the
sinks and turns the records back on. Sinks added by the host application
are left in place; calling it again replaces only the sinks it added before.
"""

from __future__ import annotations

import contextlib
import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .config import LoggingConfig

PACKAGE = "f9_path"

_handler_ids: list[int] = []

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(config: LoggingConfig) -> None:
    """Configure loguru sinks and enable the package's log records.

    All console output is directed to stderr.

    Args:
        config: LoggingConfig with level, format and file settings.

    """
    for handler_id in _handler_ids:
        # the host may already have removed it
        with contextlib.suppress(ValueError):
            logger.remove(handler_id)
    _handler_ids.clear()

    if config.format == "json":
        fmt = "{message}"
        serialize = True
    else:
        fmt = _CONSOLE_FORMAT
        serialize = False

    _handler_ids.append(
        logger.add(
            sys.stderr,
            format=fmt,
            level=config.level,
            serialize=serialize,
            colorize=config.format == "console",
        )
    )

    if config.file:
        _handler_ids.append(
            logger.add(
                config.file,
                format=fmt,
                level=config.level,
                serialize=serialize,
            )
        )

    logger.enable(PACKAGE)
    logger.debug("Logging configured: level={} format={}", config.level, config.format)
