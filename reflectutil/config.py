# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Application level configuration.

reflectutil itself needs no configuration to do lookups. Applications embedding it can describe its logging in YAML,
validate it with :func:`load_config` (or :func:`open_config` for a file) and apply it once with :func:`configure`.

Examples
--------
    >>> from reflectutil.config import load_config
    >>> config = load_config('''
    ... logging:
    ...   rich: false
    ...   levels:
    ...     tty: debug
    ...     custom:
    ...       ^reflectutil: warning
    ... ''')
    >>> config.logging.levels.tty
    LoggingLevel.DEBUG
    >>> config.logging.rich
    False

"""

import pathlib

from collections.abc import Mapping
from typing import Any

import yaml

from pydantic import Field

from .util.config import BaseConfigModel, IncludeLoader
from .util.logging import LoggingConfig, LoggingManager, getLogger


LOG = getLogger(__name__)


class ReflectUtilConfig(BaseConfigModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")


def load_config(data: Mapping[str, Any] | str | ReflectUtilConfig) -> ReflectUtilConfig:
    """Validate *data*, either a mapping or a YAML document, into a :class:`ReflectUtilConfig`.

    An empty YAML document produces the default configuration.
    """
    if isinstance(data, ReflectUtilConfig):
        return data

    if isinstance(data, str):
        data = yaml.load(data, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader
        if data is None:
            data = {}

    if not isinstance(data, Mapping):
        msg = f"Invalid configuration format. Expected a dictionary, got {type(data).__name__}"
        raise TypeError(msg)

    return ReflectUtilConfig.model_validate(data)


def open_config(path: pathlib.Path | str) -> ReflectUtilConfig:
    """Read and validate a YAML configuration file. ``!include`` paths are resolved relative to the file."""
    path = pathlib.Path(path).expanduser()

    with path.open(encoding="UTF-8") as f:
        data = yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader

    LOG.debug("Loaded configuration from %s", path)
    return load_config({} if data is None else data)


def configure(config: Mapping[str, Any] | str | ReflectUtilConfig) -> ReflectUtilConfig:
    """Validate *config* and initialise logging from it.

    Raises:
        RuntimeError: If logging was already initialised.

    """
    config = load_config(config)
    LoggingManager().initialize(config.logging)
    LOG.debug("Configuration applied")
    return config
