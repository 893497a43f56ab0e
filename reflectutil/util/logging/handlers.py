# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Handler construction for :class:`~reflectutil.util.logging.manager.LoggingManager`.

Two handlers exist, ``file`` and ``tty``. A record logged with ``extra={"handler": "tty"}`` only reaches the TTY handler,
and one logged with ``extra={"simple": True}`` is emitted without the level and logger name prefix.
"""

import logging
import sys

from typing import TYPE_CHECKING, override


if TYPE_CHECKING:
    import pathlib

    from .config import LoggingConfig


FILE_FORMAT = "%(asctime)s [%(levelname)s:%(name)s] %(message)s"
TTY_FORMAT = "[%(levelname).1s:%(name)s] %(message)s"


# MARK: Filters and formatters
class HandlerFilter(logging.Filter):
    """Drop records routed to a different handler through ``extra={"handler": ...}``."""

    def __init__(self, handler_name: str) -> None:
        super().__init__()
        self.handler_name = handler_name

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        target = getattr(record, "handler", None)
        return target is None or target == self.handler_name


class ConditionalFormatter(logging.Formatter):
    """Formatter that emits the bare message for records logged with ``extra={"simple": True}``."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "simple", False):
            return record.getMessage()
        return super().format(record)


# MARK: Factories
def _finish(handler: logging.Handler, name: str, level: int) -> logging.Handler:
    handler.set_name(name)
    handler.setLevel(level)
    handler.addFilter(HandlerFilter(name))
    return handler


def create_file_handler(config: LoggingConfig, path: pathlib.Path) -> logging.Handler | None:
    """Return the log file handler, or ``None`` when file logging is off."""
    level = config.levels.file
    if not level.enabled:
        return None

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="w", encoding="UTF-8")
    handler.setFormatter(ConditionalFormatter(FILE_FORMAT))
    return _finish(handler, "file", level.value)


def create_tty_handler(config: LoggingConfig) -> logging.Handler | None:
    """Return the terminal handler (rich or plain ``stderr``), or ``None`` when TTY logging is off."""
    level = config.levels.tty
    if not level.enabled:
        return None

    if config.rich:
        from .rich_handler import CustomRichHandler

        handler: logging.Handler = CustomRichHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ConditionalFormatter(TTY_FORMAT))
    return _finish(handler, "tty", level.value)
