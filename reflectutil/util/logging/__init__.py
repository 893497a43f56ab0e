# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

# Logger / getLogger
from .logger import Logger, getLogger, logger_name

# Configuration
from .config import LoggingConfig, LoggingLevels
from .levels import LoggingLevel
from .manager import LoggingManager


__all__ = [
    "Logger",
    "LoggingConfig",
    "LoggingLevel",
    "LoggingLevels",
    "LoggingManager",
    "getLogger",
    "logger_name",
]
