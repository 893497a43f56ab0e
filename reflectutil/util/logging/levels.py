# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import logging

from typing import Any, ClassVar, Self, override

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, PydanticUseDefault, core_schema


#: Level used to switch a handler off entirely.
OFF = -1

LEVELS : dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR"   : logging.ERROR   ,
    "WARNING" : logging.WARNING ,
    "INFO"    : logging.INFO    ,
    "DEBUG"   : logging.DEBUG   ,
    "NOTSET"  : logging.NOTSET  ,
    "OFF"     : OFF             ,
}  # fmt: skip

REVERSE_LEVELS: dict[int, str] = {v: k for k, v in LEVELS.items()}


class LoggingLevel(int):
    """An ``int`` logging level that can be parsed from configuration.

    Accepts level names (case-insensitive), integers, numeric strings and booleans (``True`` is ``INFO``, ``False`` is
    ``OFF``). Being an ``int``, a level can be handed straight to :meth:`logging.Logger.setLevel`.

    Examples
    --------
        >>> LoggingLevel("debug")
        LoggingLevel.DEBUG
        >>> LoggingLevel(False).enabled
        False
        >>> LoggingLevel("25") == 25
        True

    """

    # fmt: off
    CRITICAL : ClassVar[LoggingLevel]
    ERROR    : ClassVar[LoggingLevel]
    WARNING  : ClassVar[LoggingLevel]
    INFO     : ClassVar[LoggingLevel]
    DEBUG    : ClassVar[LoggingLevel]
    NOTSET   : ClassVar[LoggingLevel]
    OFF      : ClassVar[LoggingLevel]
    # fmt: on

    def __new__(cls, value: Any = logging.NOTSET) -> Self:
        return super().__new__(cls, cls.coerce(value))

    @staticmethod
    def coerce(value: Any) -> int:
        """Convert a configuration value into a numeric level."""
        # bool first, as it is an int subclass
        if isinstance(value, bool):
            level = logging.INFO if value else OFF
        elif isinstance(value, int):
            level = int(value)
        elif isinstance(value, str):
            text = value.strip().upper()
            if text in LEVELS:
                level = LEVELS[text]
            elif text == "FALSE":
                level = OFF
            else:
                try:
                    level = int(text)
                except ValueError as err:
                    msg = f"Unknown logging level string: {value}"
                    raise ValueError(msg) from err
        else:
            msg = f"Invalid type for logging level: {type(value)}"
            raise TypeError(msg)

        if level < OFF:
            msg = f"Invalid value for logging level: {level}"
            raise ValueError(msg)
        return level

    # MARK: Pydantic
    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            function=cls.validate,
            schema=core_schema.nullable_schema(
                core_schema.union_schema(
                    [
                        core_schema.is_instance_schema(cls),
                        core_schema.bool_schema(strict=True),
                        core_schema.int_schema(),
                        core_schema.str_schema(),
                    ]
                )
            ),
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def validate(cls, value: Any) -> LoggingLevel:
        # 'None' falls back to the field default
        if value is None:
            raise PydanticUseDefault
        return value if isinstance(value, cls) else cls(value)

    # MARK: Properties
    @property
    def value(self) -> int:
        return int(self)

    @property
    def name(self) -> str:
        return REVERSE_LEVELS.get(int(self), str(int(self)))

    @property
    def enabled(self) -> bool:
        return self >= 0

    # MARK: Comparison
    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                return int(self) == self.coerce(other)
            except ValueError:
                return False
        return super().__eq__(other)

    @override
    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    @override
    def __hash__(self) -> int:
        return super().__hash__()

    @override
    def __repr__(self) -> str:
        name = REVERSE_LEVELS.get(int(self))
        return f"LoggingLevel.{name}" if name is not None else f"LoggingLevel({int(self)})"

    @override
    def __str__(self) -> str:
        return self.name


for _name, _value in LEVELS.items():
    setattr(LoggingLevel, _name, LoggingLevel(_value))
