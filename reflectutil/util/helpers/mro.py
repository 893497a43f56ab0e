# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro


import typing

from typing import TYPE_CHECKING, Any

from . import type_hints


if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


#: Classes whose members are never reported by the MRO helpers.
ROOT_CLASSES: tuple[type, ...] = (object, type)


class Declaration(typing.NamedTuple):
    """Where and how a class attribute is declared."""

    #: Class in the MRO whose namespace (or annotations) declares the attribute.
    owner: type
    #: Raw entry of ``owner.__dict__``, or ``None`` when only annotated (see :attr:`has_value`).
    value: Any
    #: Whether ``owner.__dict__`` holds an entry for the attribute.
    has_value: bool
    #: Own annotation of ``owner`` for the attribute, or ``None`` when unannotated.
    annotation: Any
    #: Whether ``owner`` annotates the attribute.
    has_annotation: bool


def iter_mro(cls: type, *, skip: Iterable[type] = ROOT_CLASSES) -> Iterator[type]:
    """Yield the classes in the MRO of *cls*, omitting any class in *skip*."""
    skip = tuple(skip)
    for klass in cls.__mro__:
        if klass in skip:
            continue
        yield klass


def iter_declared_names(cls: type, *, skip: Iterable[type] = ROOT_CLASSES) -> Iterator[str]:
    """Yield every attribute name declared along the MRO of *cls*, each name once, nearest declaration first.

    Annotated names without a value count as declared.
    """
    seen: set[str] = set()
    for klass in iter_mro(cls, skip=skip):
        for name in (*vars(klass).keys(), *type_hints.get_own_annotations(klass).keys()):
            if name in seen:
                continue
            seen.add(name)
            yield name


def find_declaration(cls: type, name: str, *, skip: Iterable[type] = ROOT_CLASSES) -> Declaration | None:
    """Find the nearest class in the MRO of *cls* that declares *name*, or ``None`` if none does."""
    for klass in iter_mro(cls, skip=skip):
        namespace = vars(klass)
        annotations = type_hints.get_own_annotations(klass)
        has_value = name in namespace
        has_annotation = name in annotations
        if has_value or has_annotation:
            return Declaration(
                owner=klass,
                value=namespace.get(name),
                has_value=has_value,
                annotation=annotations.get(name),
                has_annotation=has_annotation,
            )
    return None


def find_annotation(cls: type, name: str, *, skip: Iterable[type] = ROOT_CLASSES) -> Declaration | None:
    """Find the nearest class in the MRO of *cls* that annotates *name*, or ``None`` if none does."""
    for klass in iter_mro(cls, skip=skip):
        annotations = type_hints.get_own_annotations(klass)
        if name in annotations:
            namespace = vars(klass)
            return Declaration(
                owner=klass,
                value=namespace.get(name),
                has_value=name in namespace,
                annotation=annotations[name],
                has_annotation=True,
            )
    return None
