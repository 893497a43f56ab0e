# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

"""Exceptions raised by reflectutil.

Lookups never answer "absent" with ``None``: they raise one of the :class:`ReflectionError` subclasses below, so callers
can tell a missing member (:class:`NotFoundError`) from an ambiguous type name (:class:`AmbiguousTypeNameError`) and from
an invalid call (:class:`NullArgumentError`).

:class:`AmbiguousMatchError` is not a :class:`ReflectionError`. It comes from the member enumeration layer when a method
name alone selects several overloads, and the accessor helpers let it through unchanged, exactly like exceptions raised
by the invoked code itself.
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

    from .binding import Binding


class ReflectionError(Exception):
    """Base class for the lookup failures reported by reflectutil."""


class NotFoundError(ReflectionError, LookupError):
    """A type or member with the requested name (and binding) does not exist."""

    def __init__(self, msg: str, *, type_name: str | None = None, member_name: str | None = None, binding: Binding | None = None) -> None:
        super().__init__(msg)
        self.type_name = type_name
        self.member_name = member_name
        self.binding = binding


class AmbiguousTypeNameError(ReflectionError, LookupError):
    """More than one loaded module defines a type with the requested name."""

    def __init__(self, msg: str, *, type_name: str, modules: Sequence[str] = ()) -> None:
        super().__init__(msg)
        self.type_name = type_name
        self.modules = tuple(modules)


class NullArgumentError(ReflectionError, ValueError):
    """An argument that must not be ``None`` was ``None``."""

    def __init__(self, msg: str, *, index: int | None = None) -> None:
        super().__init__(msg)
        self.index = index


class AmbiguousMatchError(TypeError):
    """A method name matches more than one overload and no parameter types were given to choose between them."""
