# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

# Helpers
from .helpers import *

# Logging
from .logging import Logger, LoggingManager, getLogger
