# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

# Shared fixtures, and doctest collection for docstrings and reStructuredText files
from doctest import ELLIPSIS, IGNORE_EXCEPTION_DETAIL
from typing import TYPE_CHECKING

import pytest

from sybil import Sybil
from sybil.parsers.rest import DocTestParser, PythonCodeBlockParser


if TYPE_CHECKING:
    from reflectutil.util.logging.manager import LoggingManager


#: Logging set-up for the test session: no log file, and every level reaches pytest's log capture.
TEST_LOGGING_CONFIG = {
    "logging": {
        "levels": {"file": "OFF", "tty": "NOTSET", "default": "NOTSET"},
        "rich": False,
    },
}


@pytest.fixture(autouse=True, scope="session")
def logging_manager() -> LoggingManager:
    from reflectutil.config import configure
    from reflectutil.util.logging.manager import LoggingManager

    configure(TEST_LOGGING_CONFIG)
    return LoggingManager()


pytest_collect_file = Sybil(
    parsers=[DocTestParser(optionflags=ELLIPSIS | IGNORE_EXCEPTION_DETAIL), PythonCodeBlockParser()],
    patterns=["*.rst", "*.py"],
    excludes=["conf.py"],
).pytest()
