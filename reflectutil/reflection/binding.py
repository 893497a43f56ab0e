# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import enum


class Binding(enum.Flag):
    """Filter selecting which members a lookup may return.

    A binding combines a visibility (:attr:`PUBLIC` and/or :attr:`NON_PUBLIC`) with a scope (:attr:`INSTANCE` and/or
    :attr:`STATIC`). A member is public when its name does not start with an underscore.
    """

    PUBLIC = enum.auto()
    NON_PUBLIC = enum.auto()
    INSTANCE = enum.auto()
    STATIC = enum.auto()

    def matches(self, name: str, *, is_static: bool) -> bool:
        """Return whether a member called *name* with the given scope is selected by this binding."""
        public = not name.startswith("_")
        if not (Binding.PUBLIC in self if public else Binding.NON_PUBLIC in self):
            return False
        return Binding.STATIC in self if is_static else Binding.INSTANCE in self

    def describe(self) -> str:
        return describe_binding(self)


#: Public instance members, the default filter of every lookup.
INSTANCE_BINDING = Binding.PUBLIC | Binding.INSTANCE

#: Public static members (class attributes, class properties, static and class methods).
STATIC_BINDING = Binding.PUBLIC | Binding.STATIC


_DESCRIPTIONS: dict[Binding, str] = {
    Binding.PUBLIC: "Public",
    Binding.NON_PUBLIC: "NonPublic",
    Binding.INSTANCE: "Instance",
    Binding.STATIC: "Static",
}


def describe_binding(binding: Binding) -> str:
    """Render *binding* for error messages, e.g. ``[Public|Instance]``."""
    names = [description for flag, description in _DESCRIPTIONS.items() if flag in binding]
    return "[" + "|".join(names) + "]"
