# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import logging
import re

import pytest

from pydantic import ValidationError

from reflectutil.util.logging.config import DEFAULT_CUSTOM_LEVELS, LoggingLevels
from reflectutil.util.logging.levels import LoggingLevel


@pytest.mark.logging
@pytest.mark.logging_levels
class TestLoggingLevel:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (10, 10),
            (logging.INFO, logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("critical", logging.CRITICAL),
            ("off", -1),
            ("false", -1),
            ("15", 15),
            ("-1", -1),
            (True, logging.INFO),
            (False, -1),
            (LoggingLevel.ERROR, logging.ERROR),
        ],
    )
    def test_accepts_names_numbers_and_booleans(self, value, expected):
        assert LoggingLevel(value).value == expected

    @pytest.mark.parametrize("value", ["notalevel", "-5", 3.14, None, [], {}])
    def test_rejects_invalid(self, value):
        with pytest.raises((ValueError, TypeError)):
            LoggingLevel(value)

    @pytest.mark.parametrize(
        ("value", "expected_name", "expected_repr"),
        [
            ("DEBUG", "DEBUG", "LoggingLevel.DEBUG"),
            (logging.INFO, "INFO", "LoggingLevel.INFO"),
            (42, "42", "LoggingLevel(42)"),
            ("-1", "OFF", "LoggingLevel.OFF"),
        ],
    )
    def test_str_output(self, value, expected_name, expected_repr):
        level = LoggingLevel(value)
        assert level.name == expected_name
        assert str(level) == expected_name
        assert repr(level) == expected_repr

    def test_equality(self):
        assert LoggingLevel("info") == LoggingLevel.INFO
        assert LoggingLevel.INFO == logging.INFO
        assert LoggingLevel.INFO == "info"
        assert LoggingLevel.INFO != LoggingLevel.DEBUG
        assert hash(LoggingLevel("debug")) == hash(LoggingLevel.DEBUG)

    def test_enabled(self):
        assert LoggingLevel.NOTSET.enabled
        assert not LoggingLevel.OFF.enabled


@pytest.mark.logging
@pytest.mark.logging_levels
class TestLoggingLevels:
    def test_defaults(self):
        levels = LoggingLevels()

        assert levels.file == LoggingLevel.OFF
        assert levels.tty == LoggingLevel.NOTSET
        assert levels.default == LoggingLevel.INFO
        assert {pattern.pattern for pattern in levels.custom} == set(DEFAULT_CUSTOM_LEVELS)

    def test_none_uses_default(self):
        assert LoggingLevels(tty=None).tty == LoggingLevel.NOTSET

    def test_custom_patterns_are_compiled(self):
        levels = LoggingLevels(custom={r"^reflectutil\.": "debug"})

        patterns = {pattern.pattern: level for pattern, level in levels.custom.items()}
        assert patterns[r"^reflectutil\."] == LoggingLevel.DEBUG
        assert all(isinstance(pattern, re.Pattern) for pattern in levels.custom)
        assert all(pattern.flags & re.IGNORECASE for pattern in levels.custom)

    def test_custom_entries_override_defaults(self):
        levels = LoggingLevels(custom={r"^markdown_it": "error"})

        patterns = {pattern.pattern: level for pattern, level in levels.custom.items()}
        assert patterns[r"^markdown_it"] == LoggingLevel.ERROR

    def test_rejects_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingLevels(default="loud")

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            LoggingLevels(console="debug")
