# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import pytest

from reflectutil.util.helpers.mro import find_annotation, find_declaration, iter_declared_names, iter_mro


class _Root:
    shared: int = 1
    annotated_only: str

    def greet(self) -> str:
        return "root"


class _Leaf(_Root):
    shared = 2

    def wave(self) -> str:
        return "leaf"


@pytest.mark.helpers
@pytest.mark.mro
class TestMro:
    def test_iter_mro_skips_root_classes(self) -> None:
        assert list(iter_mro(_Leaf)) == [_Leaf, _Root]

    def test_iter_mro_custom_skip(self) -> None:
        assert list(iter_mro(_Leaf, skip=(_Root,))) == [_Leaf, object]

    def test_iter_declared_names_nearest_first(self) -> None:
        names = [name for name in iter_declared_names(_Leaf) if not name.startswith("__")]

        assert names == ["shared", "wave", "greet", "annotated_only"]

    def test_find_declaration_nearest_owner(self) -> None:
        declaration = find_declaration(_Leaf, "shared")

        assert declaration is not None
        assert declaration.owner is _Leaf
        assert declaration.value == 2
        assert declaration.has_value
        assert not declaration.has_annotation

    def test_find_declaration_inherited(self) -> None:
        declaration = find_declaration(_Leaf, "greet")

        assert declaration is not None
        assert declaration.owner is _Root
        assert declaration.value is _Root.__dict__["greet"]

    def test_find_declaration_annotation_only(self) -> None:
        declaration = find_declaration(_Leaf, "annotated_only")

        assert declaration is not None
        assert declaration.owner is _Root
        assert not declaration.has_value
        assert declaration.value is None
        assert declaration.has_annotation
        assert declaration.annotation is str

    def test_find_declaration_missing(self) -> None:
        assert find_declaration(_Leaf, "missing") is None

    def test_find_declaration_ignores_object(self) -> None:
        assert find_declaration(_Leaf, "__repr__") is None

    def test_find_annotation_skips_unannotated_overrides(self) -> None:
        declaration = find_annotation(_Leaf, "shared")

        assert declaration is not None
        assert declaration.owner is _Root
        assert declaration.annotation is int
        assert declaration.value == 1

    def test_find_annotation_missing(self) -> None:
        assert find_annotation(_Leaf, "wave") is None
