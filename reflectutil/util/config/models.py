# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro


from pydantic import BaseModel, ConfigDict


class BaseConfigModel(BaseModel):
    """Base class for configuration sections: immutable, and unknown keys are rejected."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )
