# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Named lookup and invocation of class members over Python's runtime introspection."""

from .reflection import *
from .reflection import __all__ as __all__
