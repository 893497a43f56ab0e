# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

from typing import TYPE_CHECKING, Any, override


if TYPE_CHECKING:
    from collections.abc import Callable


def _as_class_bound(func: Any) -> Any:
    return func if isinstance(func, (classmethod, staticmethod)) else classmethod(func)


# Subclassing property means code that special-cases properties treats these the same way
class ClassPropertyDescriptor[C: object, T: Any](property):
    """Property descriptor evaluated against the owning class instead of an instance.

    Class properties are the static counterpart of :class:`property`. Assigning to one through the class would replace the
    descriptor, so writes go through :meth:`set_class_value` instead, which calls the setter registered with :meth:`setter`.
    With ``cached=True`` the first result replaces the descriptor on the class it was read from.
    """

    def __init__(self, fget: Callable[[C], T], fset: Callable[[C, T], None] | None = None, *, cached: bool = False) -> None:
        self.getter: Any = _as_class_bound(fget)
        self.class_setter: Any = None if fset is None else _as_class_bound(fset)
        self.cached = cached

    @property
    def getter_function(self) -> Callable[..., T]:
        return getattr(self.getter, "__func__", self.getter)

    @property
    def writable(self) -> bool:
        return self.class_setter is not None

    @override
    def __get__(self, obj: Any, cls: type | None = None) -> T:  # pyright: ignore[reportIncompatibleMethodOverride]
        owner = type(obj) if cls is None else cls
        value = self.getter.__get__(obj, owner)()
        if self.cached:
            setattr(owner, self.getter_function.__name__, value)
        return value

    @override
    def __set__(self, obj: Any, value: Any) -> None:
        msg = "Can't set classproperty descriptors through an instance"
        raise AttributeError(msg)

    @override
    def __delete__(self, obj: Any) -> None:
        msg = "Can't delete classproperty descriptors"
        raise AttributeError(msg)

    @override
    def setter(self, fset: Callable[[C, T], None]) -> ClassPropertyDescriptor[C, T]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return type(self)(self.getter, fset, cached=self.cached)

    def set_class_value(self, cls: type, value: T) -> None:
        if not self.writable:
            msg = f"classproperty '{cls.__name__}.{self.getter_function.__name__}' has no setter"
            raise AttributeError(msg)
        self.class_setter.__get__(None, cls)(value)


def classproperty[C: object, T: Any](func: Callable[[C], T], *, cached: bool = False) -> ClassPropertyDescriptor[C, T]:
    return ClassPropertyDescriptor(func, cached=cached)


def cached_classproperty[C: object, T: Any](func: Callable[[C], T]) -> ClassPropertyDescriptor[C, T]:
    """Like :func:`classproperty`, but computed only once per class."""
    return classproperty(func, cached=True)
