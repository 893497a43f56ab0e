# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import annotationlib
import types
import typing

from frozendict import frozendict


# MARK: Type aliases
#: Alias for all accepted forms of type hints.
type TypeHint = type | types.GenericAlias | typing.ForwardRef | typing.TypeAliasType


# MARK: typing.get_type_hints wrapper
def _get_type_hints(obj: typing.Any, format: annotationlib.Format = annotationlib.Format.FORWARDREF) -> typing.Mapping[str, typing.Any]:  # noqa: A002
    return frozendict(typing.get_type_hints(obj, format=format))


# MARK: get_type_hints
def get_type_hints(obj: typing.Any) -> typing.Mapping[str, typing.Any]:
    """Return the resolved type hints of *obj*, leaving unresolvable names as :class:`typing.ForwardRef`.

    Wrappers such as :class:`staticmethod` and :class:`classmethod` are unwrapped first. Objects without annotations
    (or which cannot carry any, such as builtins) produce an empty mapping.
    """
    obj = getattr(obj, "__func__", obj)
    try:
        return _get_type_hints(obj)
    except TypeError:
        # Builtins and C extension callables have no __annotations__
        return frozendict()


# MARK: get_type_hint
def get_type_hint(obj: typing.Any, attr: str, default: typing.Any = None) -> typing.Any:
    hints = get_type_hints(obj)
    return hints.get(attr, default)


# MARK: get_own_annotations
def get_own_annotations(cls: type) -> typing.Mapping[str, typing.Any]:
    """Return the annotations declared directly on *cls*, ignoring its bases.

    Unlike :func:`get_type_hints`, inherited annotations are not merged in, which lets callers know which class in the
    MRO declared each attribute.
    """
    return frozendict(annotationlib.get_annotations(cls, format=annotationlib.Format.FORWARDREF))


# MARK: ClassVar utilities
def is_classvar(hint: TypeHint | str) -> bool:
    """Return whether *hint* declares a class variable (``ClassVar`` or ``ClassVar[...]``)."""
    if isinstance(hint, str):
        return hint.startswith(("ClassVar", "typing.ClassVar"))
    if isinstance(hint, typing.ForwardRef):
        return is_classvar(hint.__forward_arg__)
    return hint is typing.ClassVar or typing.get_origin(hint) is typing.ClassVar


def strip_classvar(hint: TypeHint) -> TypeHint:
    """Return the type wrapped by a ``ClassVar[...]`` hint, or ``object`` for a bare ``ClassVar``."""
    if hint is typing.ClassVar:
        return object
    if typing.get_origin(hint) is typing.ClassVar:
        (inner,) = typing.get_args(hint)
        return inner
    return hint


# MARK: Display
def type_name(hint: TypeHint | None) -> str:
    """Return a short, human-friendly name for *hint* (``int``, ``list[int]``, ``Foo``)."""
    if hint is None:
        return "None"
    if isinstance(hint, typing.ForwardRef):
        return hint.__forward_arg__
    if isinstance(hint, type) and typing.get_origin(hint) is None:
        return hint.__name__
    return repr(hint).replace("typing.", "")
