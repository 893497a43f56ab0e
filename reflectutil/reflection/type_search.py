# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import sys
import types

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload, override


if TYPE_CHECKING:
    from collections.abc import Mapping


class ModuleRegistry(Sequence[types.ModuleType]):
    """An immutable snapshot of modules to search for types.

    Type searches take the registry as an explicit argument, so a search is a pure function of the name and the
    snapshot. :meth:`loaded` captures every module currently imported in the process.
    """

    def __init__(self, modules: Iterable[types.ModuleType] = ()) -> None:
        unique: dict[int, types.ModuleType] = {}
        for module in modules:
            if not isinstance(module, types.ModuleType):
                msg = f"Expected a module, got {type(module).__name__}"
                raise TypeError(msg)
            unique.setdefault(id(module), module)
        self._modules: tuple[types.ModuleType, ...] = tuple(unique.values())

    @classmethod
    def loaded(cls, modules: Mapping[str, Any] | None = None) -> ModuleRegistry:
        """Snapshot the modules in *modules* (by default :data:`sys.modules`), skipping placeholder entries."""
        if modules is None:
            modules = sys.modules
        return cls(module for module in tuple(modules.values()) if isinstance(module, types.ModuleType))

    @overload
    def __getitem__(self, index: int) -> types.ModuleType: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[types.ModuleType]: ...
    @override
    def __getitem__(self, index: int | slice) -> types.ModuleType | Sequence[types.ModuleType]:
        return self._modules[index]

    @override
    def __len__(self) -> int:
        return len(self._modules)

    @override
    def __iter__(self) -> Iterator[types.ModuleType]:
        return iter(self._modules)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(_module_name(module) or "<unnamed>" for module in self._modules)

    @override
    def __repr__(self) -> str:
        return f"<ModuleRegistry ({len(self)} modules)>"


def _namespace(obj: Any) -> Mapping[str, Any] | None:
    # Bypass custom __getattribute__ hooks so lazily loaded modules are never imported by a search
    try:
        return object.__getattribute__(obj, "__dict__")
    except AttributeError:
        return None


def _resolve_qualname(module: types.ModuleType, qualname: str) -> type | None:
    obj: Any = module
    for part in qualname.split("."):
        namespace = _namespace(obj)
        if namespace is None or part not in namespace:
            return None
        obj = namespace[part]

    if not isinstance(obj, type):
        return None

    # Re-exports and aliases do not count, the class must be defined here under this name
    if obj.__module__ != _module_name(module) or obj.__qualname__ != qualname:
        return None
    return obj


def _module_name(module: types.ModuleType) -> str | None:
    namespace = _namespace(module)
    name = None if namespace is None else namespace.get("__name__")
    return name if isinstance(name, str) else None


def find_module_type(module: types.ModuleType, name: str) -> type | None:
    """Return the class called *name* defined by *module*, or ``None``.

    *name* is either the qualified name of the class inside the module (``Outer.Inner``), or its fully-qualified name
    (``package.module.Outer.Inner``).
    """
    if not isinstance(module, types.ModuleType):
        msg = f"Expected a module, got {type(module).__name__}"
        raise TypeError(msg)

    module_name = _module_name(module)
    if module_name is None:
        return None

    prefix = f"{module_name}."
    if name.startswith(prefix) and (found := _resolve_qualname(module, name.removeprefix(prefix))) is not None:
        return found
    return _resolve_qualname(module, name)


def find_types(name: str, modules: Iterable[types.ModuleType] | None = None) -> tuple[type, ...]:
    """Return every distinct class called *name* across *modules* (by default, every loaded module)."""
    registry = modules if isinstance(modules, ModuleRegistry) else (ModuleRegistry.loaded() if modules is None else ModuleRegistry(modules))

    found: dict[int, type] = {}
    for module in registry:
        if (typ := find_module_type(module, name)) is not None:
            found.setdefault(id(typ), typ)
    return tuple(found.values())
