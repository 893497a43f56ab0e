# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Facts about the running process that affect logging setup."""

import functools
import os
import pathlib
import sys


DEFAULT_SCRIPT_NAME = "reflectutil"


@functools.cache
def is_unit_test() -> bool:
    """Return ``True`` under pytest, or when the ``UNIT_TEST`` environment variable is set to a truthy value."""
    if "PYTEST_VERSION" in os.environ:
        return True

    flag = os.environ.get("UNIT_TEST", "").strip().lower()
    return flag not in ("", "false", "0", "no")


def get_script_name() -> str:
    """Return the name used for log files: the running script without its ``.py`` suffix."""
    if is_unit_test() or not sys.argv or not sys.argv[0]:
        return DEFAULT_SCRIPT_NAME

    path = pathlib.Path(sys.argv[0])
    name = path.stem if path.suffix.lower() == ".py" else path.name
    return name or DEFAULT_SCRIPT_NAME
