# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro


from .models import BaseConfigModel
from .yaml_loader import IncludeLoader


__all__ = [
    "BaseConfigModel",
    "IncludeLoader",
]
