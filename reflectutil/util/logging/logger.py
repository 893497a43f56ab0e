# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import logging
import types

from typing import Any, override


class Logger(logging.Logger):
    """Logger that can also tell whether a level would reach a specific handler (``"tty"`` or ``"file"``)."""

    @override
    def isEnabledFor(self, level: int, *, handler: str | None = None) -> bool:
        if handler is None:
            return super().isEnabledFor(level)
        if handler not in ("tty", "file"):
            msg = f"Unknown handler: {handler}. Expected 'tty' or 'file'."
            raise ValueError(msg)
        return self._isEnabledForHandler(handler, level)

    def isEnabledForTty(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        return self._isEnabledForHandler("tty", level)

    def isEnabledForFile(self, level: int) -> bool:  # noqa: N802 which matches isEnabledFor
        return self._isEnabledForHandler("file", level)

    def _isEnabledForHandler(self, name: str, level: int) -> bool:  # noqa: N802
        from .manager import LoggingManager

        handler = LoggingManager().handler(name)
        if handler is None or handler.level > level:
            return False
        return super().isEnabledFor(level)


logging.setLoggerClass(Logger)


def logger_name(obj: object) -> str:
    """Return the logger name for *obj*.

    Strings are used as-is, modules by their ``__name__``, and classes (or the class of any other object) by their
    fully-qualified name.
    """
    if isinstance(obj, str):
        return obj
    if isinstance(obj, types.ModuleType):
        return obj.__name__
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


def getLogger(obj: object, parent: Any = None, name: str | None = None) -> Logger:  # noqa: N802 matches logging.getLogger
    """Return the :class:`Logger` for *obj* (see :func:`logger_name`), or called *name* when given.

    When *parent* is a :class:`logging.Logger` the new logger is created as its child. The manager's configured level
    is applied if logging has been initialised.
    """
    if name is None:
        name = logger_name(obj)

    logger = parent.getChild(name) if isinstance(parent, logging.Logger) else logging.getLogger(name)
    if not isinstance(logger, Logger):
        msg = f"Expected a Logger instance, got: {type(logger)}"
        raise TypeError(msg)

    from .manager import LoggingManager

    manager = LoggingManager()
    if manager.initialized:
        manager.apply_logging_level(logger)

    return logger
