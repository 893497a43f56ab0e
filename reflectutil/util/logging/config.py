# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import re

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from frozendict import frozendict
from pydantic import DirectoryPath, Field, field_serializer, field_validator

from ..config.models import BaseConfigModel
from .levels import LoggingLevel


#: Custom levels applied unless overridden: rich's markdown parser is chatty at DEBUG.
DEFAULT_CUSTOM_LEVELS: Mapping[str, LoggingLevel] = frozendict({
    r"^markdown_it": LoggingLevel.INFO,
})


def compile_level_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a logger name pattern. Patterns match case-insensitively from the start of the logger name."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern, re.IGNORECASE)
    msg = f"Custom logging levels keys must be str or compiled regex patterns, got {type(pattern)}"
    raise TypeError(msg)


class LoggingLevels(BaseConfigModel):
    file: LoggingLevel = Field(default=LoggingLevel.OFF, description="Log level for log file output")
    tty: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for TTY output")
    root: LoggingLevel = Field(default=LoggingLevel.NOTSET, description="Log level for the root logger")
    default: LoggingLevel = Field(default=LoggingLevel.INFO, description="Level for loggers not matched by 'custom'")

    custom: Mapping[re.Pattern[str], LoggingLevel] = Field(
        default_factory=frozendict,
        description="Per-logger levels, where the key is a regex for the logger name and the value is the logging level.",
        validate_default=True,
    )

    @field_validator("custom", mode="before")
    @classmethod
    def compile_custom_levels(cls, value: Any) -> dict[re.Pattern[str], Any]:
        if not isinstance(value, Mapping):
            msg = f"Custom logging levels must be a dict, got {type(value)}"
            raise TypeError(msg)

        levels = {compile_level_pattern(pattern): level for pattern, level in DEFAULT_CUSTOM_LEVELS.items()}
        # Explicit entries override the defaults
        levels.update((compile_level_pattern(pattern), level) for pattern, level in value.items())
        return levels

    @field_validator("custom", mode="after")
    @classmethod
    def freeze_custom_levels(cls, value: Mapping[re.Pattern[str], LoggingLevel]) -> frozendict[re.Pattern[str], LoggingLevel]:
        return frozendict(value)

    @field_serializer("custom")
    def serialize_custom_levels(self, value: Mapping[re.Pattern[str], LoggingLevel]) -> dict[str, str]:
        return {pattern.pattern: str(level) for pattern, level in value.items()}


class LoggingConfig(BaseConfigModel):
    dir: DirectoryPath = Field(default_factory=Path.cwd, description="Log file directory")
    levels: LoggingLevels = Field(default_factory=LoggingLevels, description="Logging levels configuration")
    rich: bool = Field(default=True, description="Enable rich text (colors etc) in TTY output")
