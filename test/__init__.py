# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import logging


# Quieten the markdown parser used by rich
logging.getLogger("markdown_it").setLevel(logging.WARNING)
