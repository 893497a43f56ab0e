# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Logging configuration for applications using reflectutil.

Importing reflectutil never touches the logging configuration. Applications opt in by calling
:meth:`LoggingManager.initialize` (directly or through :func:`reflectutil.config.configure`), which installs the file and
TTY handlers and the per-logger levels described by a :class:`~reflectutil.util.logging.config.LoggingConfig`.
"""

import logging

from typing import TYPE_CHECKING, Any, ClassVar, Self

from ..helpers import script_info
from .config import LoggingConfig
from .handlers import create_file_handler, create_tty_handler
from .levels import LoggingLevel


if TYPE_CHECKING:
    import pathlib


######
# MARK: Logging Manager
class LoggingManager:
    """Process-wide logging setup. Every instantiation returns the same object."""

    _instance: ClassVar[LoggingManager | None] = None

    initialized: bool
    config: LoggingConfig
    log_file_path: pathlib.Path
    handlers: dict[str, logging.Handler]

    def __new__(cls) -> Self:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.initialized = False
            instance.handlers = {}
            cls._instance = instance
        return cls._instance  # pyright: ignore[reportReturnType]

    def initialize(self, config: LoggingConfig | dict[str, Any]) -> None:
        if not isinstance(config, LoggingConfig):
            config = LoggingConfig.model_validate(config)

        if self.initialized:
            msg = f"Must not initialise {type(self).__name__} twice"
            raise RuntimeError(msg)
        self.initialized = True

        self.config = config
        self.log_file_path = config.dir / f"{script_info.get_script_name()}.log"

        logging.captureWarnings(capture=True)
        logging.root.setLevel(config.levels.root.value)

        self._install("file", create_file_handler(config, self.log_file_path))
        # pytest captures log records itself
        self._install("tty", create_tty_handler(config), attach=not script_info.is_unit_test())

        # Loggers created before initialisation get their level now
        for name in list(logging.root.manager.loggerDict):
            self.apply_logging_level(logging.getLogger(name))

    def _install(self, name: str, handler: logging.Handler | None, *, attach: bool = True) -> None:
        if handler is None:
            return
        self.handlers[name] = handler
        if attach:
            logging.root.addHandler(handler)

    # MARK: Handlers
    def handler(self, name: str) -> logging.Handler | None:
        """Return the ``file`` or ``tty`` handler, or ``None`` if it is disabled or logging is not initialised."""
        return self.handlers.get(name)

    @property
    def fh(self) -> logging.Handler | None:
        return self.handler("file")

    @property
    def ch(self) -> logging.Handler | None:
        return self.handler("tty")

    # MARK: Levels
    def level_for(self, logger_name: str) -> LoggingLevel:
        """Return the configured level for *logger_name*: the longest matching custom pattern, else the default."""
        levels = self.config.levels
        best, best_length = levels.default, 0

        for pattern, level in levels.custom.items():
            match = pattern.match(logger_name)
            if match is not None and len(match.group(0)) > best_length:
                best, best_length = level, len(match.group(0))

        return best

    def apply_logging_level(self, logger: logging.Logger) -> None:
        # Explicitly set levels win
        if logger.level != logging.NOTSET:
            return

        level = self.level_for(logger.name)
        if level == logging.NOTSET:
            return
        logger.setLevel(level.value if level.enabled else logging.CRITICAL + 1)
