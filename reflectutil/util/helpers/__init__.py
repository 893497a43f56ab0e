# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

from . import mro, script_info, type_hints
from .classproperty import ClassPropertyDescriptor, cached_classproperty, classproperty


__all__ = [
    "ClassPropertyDescriptor",
    "cached_classproperty",
    "classproperty",
    "mro",
    "script_info",
    "type_hints",
]
