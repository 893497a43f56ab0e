# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""YAML loading with file inclusion.

A ``!include <path>`` node is replaced by the parsed contents of that file. Relative paths resolve against the directory
of the including document (the working directory for in-memory strings). Environment variables and ``~`` are expanded.
"""

import os
import pathlib

from typing import IO, Any

import yaml


class IncludeLoader(yaml.SafeLoader):
    """``yaml.SafeLoader`` that understands the ``!include`` tag."""

    def __init__(self, stream: IO[str] | str, root: pathlib.Path | None = None) -> None:
        if root is None:
            name = getattr(stream, "name", None)
            root = pathlib.Path(name).resolve().parent if isinstance(name, str) else pathlib.Path.cwd()
        self.root = root
        super().__init__(stream)

    def resolve_include(self, target: str) -> pathlib.Path:
        path = pathlib.Path(os.path.expandvars(target)).expanduser()
        return path if path.is_absolute() else self.root / path

    def include(self, node: yaml.Node) -> Any:
        if not isinstance(node, yaml.ScalarNode):
            msg = f"!include expects a file path, got {node.id} node"
            raise yaml.constructor.ConstructorError(None, None, msg, node.start_mark)

        path = self.resolve_include(self.construct_scalar(node))
        with path.open(encoding="UTF-8") as f:
            return yaml.load(f, IncludeLoader)  # noqa: S506 as IncludeLoader extends yaml.SafeLoader


IncludeLoader.add_constructor("!include", IncludeLoader.include)
